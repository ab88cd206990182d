"""RDAP JSON formatter.

The formatter is the only place that talks to the registry store while a
response is built. It loads everything a view needs once, in batches, and
hands the records to the views by value.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from rdapview.errors import InvariantViolationError, RegistrarNotFoundError
from rdapview.observability.logging import get_logger
from rdapview.rdap.builder import JsonBuilder
from rdapview.rdap.context import RequestContext
from rdapview.rdap.enums import ObjectClassName, OutputTier, Role
from rdapview.rdap.events import make_last_update_event
from rdapview.rdap.models import Notice
from rdapview.rdap.standard import (
    DOMAIN_BOILERPLATE_NOTICES,
    RDAP_CONFORMANCE,
    TRUNCATED_RESULT_SET_NOTICE,
)
from rdapview.rdap.views import (
    ContactView,
    DomainView,
    NameserverView,
    RdapView,
    RedactedContactView,
    RegistrarView,
    UnredactedContactView,
    group_contact_roles,
)
from rdapview.registry.enums import StatusValue
from rdapview.registry.models import (
    ContactRecord,
    DomainRecord,
    HostRecord,
    RegistrarRecord,
)
from rdapview.registry.store import RegistryStore

logger = get_logger(__name__)

SEARCH_RESULTS_MEMBER: dict[ObjectClassName, str] = {
    ObjectClassName.DOMAIN: "domainSearchResults",
    ObjectClassName.NAMESERVER: "nameserverSearchResults",
    ObjectClassName.ENTITY: "entitySearchResults",
}


class RdapJsonFormatter:
    """Builds RDAP views and response envelopes for one request.

    A formatter wraps exactly one RequestContext, so every object in a
    response shares the same request time and authorization.

    Example:
        formatter = RdapJsonFormatter(store, context)
        view = formatter.view_domain(domain, OutputTier.FULL)
        body = formatter.make_response(view)
    """

    def __init__(self, store: RegistryStore, context: RequestContext) -> None:
        self._store = store
        self._context = context

    @property
    def context(self) -> RequestContext:
        return self._context

    def view_domain(self, record: DomainRecord, tier: OutputTier) -> DomainView:
        """Create a domain view; FULL loads registrar, contacts, hosts and history."""
        if tier != OutputTier.FULL:
            return DomainView(record=record, tier=tier, context=self._context)

        registrar = self.view_registrar(
            self._load_sponsor(record.current_sponsor_client_id), OutputTier.INTERNAL
        )

        contact_roles = group_contact_roles(record)
        contact_records = self._store.load_contacts([key for key, _ in contact_roles])
        contacts: list[ContactView] = []
        for key, roles in contact_roles:
            contact = contact_records.get(key)
            if contact is None:
                logger.warning(
                    "domain_contact_not_found",
                    domain=record.fully_qualified_domain_name,
                    contact_key=key,
                )
                continue
            contacts.append(self.view_contact(contact, roles, OutputTier.INTERNAL))

        host_records = self._store.load_hosts(record.nameservers)
        nameservers: list[NameserverView] = []
        for key in record.nameservers:
            host = host_records.get(key)
            if host is None:
                logger.warning(
                    "domain_host_not_found",
                    domain=record.fully_qualified_domain_name,
                    host_key=key,
                )
                continue
            nameservers.append(self.view_nameserver(host, OutputTier.INTERNAL))

        return DomainView(
            record=record,
            tier=tier,
            context=self._context,
            registrar=registrar,
            contacts=tuple(contacts),
            nameservers=tuple(nameservers),
            history=tuple(self._store.load_history(record.repo_id)),
        )

    def view_nameserver(self, record: HostRecord, tier: OutputTier) -> NameserverView:
        """Create a nameserver view; FULL resolves linked and transfer state."""
        if tier != OutputTier.FULL:
            return NameserverView(record=record, tier=tier, context=self._context)

        return NameserverView(
            record=record,
            tier=tier,
            context=self._context,
            is_linked=self._store.is_linked(record.repo_id, self._context.request_time),
            parent_pending_transfer=self._is_parent_pending_transfer(record),
            registrar=self.view_registrar(
                self._load_sponsor(record.current_sponsor_client_id), OutputTier.INTERNAL
            ),
        )

    def view_contact(
        self,
        record: ContactRecord,
        roles: Iterable[Role],
        tier: OutputTier,
    ) -> ContactView:
        """Create a contact view, redacted unless the caller sponsors the contact."""
        roles = tuple(roles)
        if not self._context.is_authorized_for(record.current_sponsor_client_id):
            return RedactedContactView(roles=roles, tier=tier, context=self._context)
        if tier != OutputTier.FULL:
            return UnredactedContactView(
                record=record, roles=roles, tier=tier, context=self._context
            )
        return UnredactedContactView(
            record=record,
            roles=roles,
            tier=tier,
            context=self._context,
            is_linked=self._store.is_linked(record.repo_id, self._context.request_time),
            history=tuple(self._store.load_history(record.repo_id)),
        )

    def view_registrar(self, record: RegistrarRecord, tier: OutputTier) -> RegistrarView:
        return RegistrarView.create(record, tier, self._context)

    def view_for(
        self,
        record: DomainRecord | HostRecord | ContactRecord | RegistrarRecord,
        tier: OutputTier,
        roles: Iterable[Role] = (),
    ) -> RdapView:
        """Create the view matching the record's kind.

        Raises:
            InvariantViolationError: If the record kind has no view
        """
        match record:
            case DomainRecord():
                return self.view_domain(record, tier)
            case HostRecord():
                return self.view_nameserver(record, tier)
            case ContactRecord():
                return self.view_contact(record, roles, tier)
            case RegistrarRecord():
                return self.view_registrar(record, tier)
            case _:
                raise InvariantViolationError(
                    f"No RDAP view for {type(record).__name__}"
                )

    def make_response(self, view: RdapView) -> dict[str, Any]:
        """Top-level response for a single-object query.

        A FULL object also gets the "last update of RDAP database" event,
        appended after its own events. Embedded objects and redacted
        contacts never carry it.
        """
        builder = JsonBuilder()
        builder.extend("rdapConformance", RDAP_CONFORMANCE)
        for name, value in view.to_json().items():
            builder.add(name, value)
        if view.tier == OutputTier.FULL and not isinstance(view, RedactedContactView):
            builder.extend(
                "events", [make_last_update_event(self._context.request_time)]
            )
        builder.extend("notices", self._notices(view))
        return builder.build()

    def make_search_response(
        self,
        views: Sequence[RdapView],
        *,
        incomplete: bool = False,
        object_class: ObjectClassName | None = None,
    ) -> dict[str, Any]:
        """Top-level response for a search.

        The results member is chosen by the kind of the first view, or by
        `object_class` when there are no results.

        Raises:
            InvariantViolationError: If there are no views and no object class
        """
        if views:
            object_class = views[0].object_class_name
        if object_class is None:
            raise InvariantViolationError("Empty search response needs an object class")

        notices: list[Notice] = [self._context.tos_notice()]
        if incomplete:
            notices.append(TRUNCATED_RESULT_SET_NOTICE)
        return (
            JsonBuilder()
            .extend("rdapConformance", RDAP_CONFORMANCE)
            .add(SEARCH_RESULTS_MEMBER[object_class], list(views))
            .extend("notices", notices)
            .build()
        )

    def _notices(self, view: RdapView) -> list[Notice]:
        notices = [self._context.tos_notice()]
        if isinstance(view, DomainView):
            notices.extend(DOMAIN_BOILERPLATE_NOTICES)
        return notices

    def _load_sponsor(self, client_id: str) -> RegistrarRecord:
        registrar = self._store.load_registrar(client_id)
        if registrar is None:
            raise RegistrarNotFoundError(client_id)
        return registrar

    def _is_parent_pending_transfer(self, host: HostRecord) -> bool:
        """Whether a subordinate host's parent domain is mid-transfer right now."""
        if host.superordinate_domain is None:
            return False
        parent = self._store.load_domain(host.superordinate_domain)
        if parent is None:
            logger.warning(
                "host_superordinate_domain_not_found",
                host=host.fully_qualified_host_name,
                domain_key=host.superordinate_domain,
            )
            return False
        return StatusValue.PENDING_TRANSFER in parent.status_values_at(
            self._context.request_time
        )
