"""Store interfaces consumed by rdapview.

`RegistryStore` is the read side used while building responses; it is
synchronous because response construction is CPU-bound and performs no I/O
of its own beyond these lookups. `RegistrarStore` is the write side used by
the base-URL job.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from datetime import datetime

from rdapview.registry.models import (
    ContactRecord,
    DomainRecord,
    HistoryEntry,
    HostRecord,
    RegistrarRecord,
)

RegistrarMutation = Callable[[RegistrarRecord], RegistrarRecord | None]


class RegistryStore(ABC):
    """Read-only access to registry records.

    Multi-key loads return only the keys that exist; callers decide how to
    treat the missing ones.
    """

    @abstractmethod
    def load_domain(self, key: str) -> DomainRecord | None:
        """Load a domain by repo ID."""

    @abstractmethod
    def load_contacts(self, keys: Iterable[str]) -> dict[str, ContactRecord]:
        """Load several contacts in one round trip."""

    @abstractmethod
    def load_hosts(self, keys: Iterable[str]) -> dict[str, HostRecord]:
        """Load several hosts in one round trip."""

    @abstractmethod
    def load_registrar(self, client_id: str) -> RegistrarRecord | None:
        """Load a registrar by client ID."""

    @abstractmethod
    def load_history(self, parent_key: str) -> list[HistoryEntry]:
        """History of one object, ordered by modification time."""

    @abstractmethod
    def is_linked(self, key: str, at: datetime) -> bool:
        """Whether any domain existing at `at` references the contact or host."""


class RegistrarStore(ABC):
    """Transactional registrar updates for the base-URL job."""

    @abstractmethod
    async def list_client_ids(self) -> list[str]:
        """Client IDs of every registrar."""

    @abstractmethod
    async def update_registrar(
        self, client_id: str, mutate: RegistrarMutation
    ) -> bool:
        """Apply `mutate` to the current registrar inside a transaction.

        `mutate` returns the replacement record, or None to leave it alone.
        Returns whether a write happened; a registrar that no longer exists
        yields False without calling `mutate`.
        """
