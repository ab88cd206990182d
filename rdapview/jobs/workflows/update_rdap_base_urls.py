"""Registrar RDAP base-URL synchronization workflow.

Scheduled job that copies the RDAP base URLs ICANN publishes for each
registrar into the registrar records. Every REAL registrar is brought in
line, including clearing the URLs of one that no longer has an entry.
Runs twice a day by default.
"""

from dataclasses import dataclass, field
from enum import Enum

from rdapview.errors import MosapiError
from rdapview.jobs.mosapi import MosapiClient
from rdapview.observability.logging import get_logger
from rdapview.registry.enums import RegistrarType
from rdapview.registry.models import RegistrarRecord
from rdapview.registry.store import RegistrarStore

logger = get_logger(__name__)


class SyncOutcome(str, Enum):
    """What happened to one registrar."""

    UPDATED = "updated"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"


@dataclass
class UpdateBaseUrlsInput:
    """Input for the base-URL sync workflow."""

    client_ids: list[str] | None = None  # None = all registrars


@dataclass
class UpdateBaseUrlsOutput:
    """Output from the base-URL sync workflow."""

    updated_count: int = 0
    unchanged_count: int = 0
    skipped_count: int = 0
    success: bool = True
    updated_client_ids: list[str] = field(default_factory=list)


class UpdateRegistrarRdapBaseUrlsWorkflow:
    """Workflow to sync registrar RDAP base URLs from MoSAPI.

    This workflow:
    1. Logs in to MoSAPI, reads the base-URL list and logs out
    2. For each registrar, transactionally compares its stored URLs with
       the published ones
    3. Overwrites the stored set when they differ

    Only REAL registrars are touched. A registrar deleted between listing
    and its transaction is skipped. If the list cannot be read the run
    fails before any registrar is written.
    """

    WORKFLOW_NAME = "update-registrar-rdap-base-urls"
    CRON_SCHEDULE = "0 */12 * * *"  # Every 12 hours

    def __init__(self, client: MosapiClient, store: RegistrarStore) -> None:
        """Initialize workflow.

        Args:
            client: MoSAPI client for the base-URL directory
            store: Registrar store the URLs are written to
        """
        self._client = client
        self._store = store

    async def run(self, input_data: UpdateBaseUrlsInput) -> UpdateBaseUrlsOutput:
        """Execute the base-URL sync.

        Args:
            input_data: Workflow input with optional registrar filter

        Returns:
            UpdateBaseUrlsOutput with per-outcome counts

        Raises:
            MosapiError: If the directory could not be read
        """
        try:
            base_urls_by_iana_id = await self._client.fetch_rdap_base_urls()
        except MosapiError as e:
            logger.error(
                "update_rdap_base_urls_failed",
                error=e.message,
                status_code=e.status_code,
            )
            raise

        client_ids = input_data.client_ids
        if client_ids is None:
            client_ids = await self._store.list_client_ids()

        output = UpdateBaseUrlsOutput()
        for client_id in client_ids:
            outcome = await self._sync_registrar(client_id, base_urls_by_iana_id)
            if outcome == SyncOutcome.UPDATED:
                output.updated_count += 1
                output.updated_client_ids.append(client_id)
            elif outcome == SyncOutcome.UNCHANGED:
                output.unchanged_count += 1
            else:
                output.skipped_count += 1

        logger.info(
            "rdap_base_urls_synced",
            updated_count=output.updated_count,
            unchanged_count=output.unchanged_count,
            skipped_count=output.skipped_count,
        )
        return output

    async def _sync_registrar(
        self,
        client_id: str,
        base_urls_by_iana_id: dict[str, frozenset[str]],
    ) -> SyncOutcome:
        outcome: SyncOutcome | None = None

        def mutate(registrar: RegistrarRecord) -> RegistrarRecord | None:
            nonlocal outcome
            if registrar.type != RegistrarType.REAL:
                outcome = SyncOutcome.SKIPPED
                return None

            iana_id = str(registrar.iana_identifier)
            base_urls: frozenset[str] = frozenset()
            if registrar.iana_identifier is not None:
                base_urls = base_urls_by_iana_id.get(iana_id, frozenset())

            if registrar.rdap_base_urls == base_urls:
                logger.info(
                    "registrar_rdap_base_urls_unchanged",
                    client_id=client_id,
                    iana_id=iana_id,
                )
                outcome = SyncOutcome.UNCHANGED
                return None

            logger.info(
                "registrar_rdap_base_urls_updated",
                client_id=client_id,
                iana_id=iana_id,
                old_base_urls=sorted(registrar.rdap_base_urls),
                new_base_urls=sorted(base_urls),
            )
            outcome = SyncOutcome.UPDATED
            return registrar.model_copy(update={"rdap_base_urls": base_urls})

        written = await self._store.update_registrar(client_id, mutate)
        if outcome is None:
            logger.info("registrar_vanished_during_sync", client_id=client_id)
            return SyncOutcome.SKIPPED
        if outcome == SyncOutcome.UPDATED and not written:
            return SyncOutcome.SKIPPED
        return outcome
