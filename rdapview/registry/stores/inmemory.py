"""In-memory implementation of the registry stores."""

import asyncio
from collections.abc import Iterable
from datetime import datetime

from rdapview.registry.models import (
    ContactRecord,
    DomainRecord,
    HistoryEntry,
    HostRecord,
    RegistrarRecord,
)
from rdapview.registry.store import RegistrarMutation, RegistrarStore, RegistryStore


class InMemoryRegistryStore(RegistryStore, RegistrarStore):
    """In-memory registry for testing and development."""

    def __init__(self) -> None:
        self._domains: dict[str, DomainRecord] = {}
        self._hosts: dict[str, HostRecord] = {}
        self._contacts: dict[str, ContactRecord] = {}
        self._registrars: dict[str, RegistrarRecord] = {}
        self._history: dict[str, list[HistoryEntry]] = {}
        self._registrar_lock = asyncio.Lock()

    # Population

    def add_domain(self, domain: DomainRecord) -> DomainRecord:
        self._domains[domain.repo_id] = domain
        return domain

    def add_host(self, host: HostRecord) -> HostRecord:
        self._hosts[host.repo_id] = host
        return host

    def add_contact(self, contact: ContactRecord) -> ContactRecord:
        self._contacts[contact.repo_id] = contact
        return contact

    def add_registrar(self, registrar: RegistrarRecord) -> RegistrarRecord:
        self._registrars[registrar.client_id] = registrar
        return registrar

    def remove_registrar(self, client_id: str) -> bool:
        return self._registrars.pop(client_id, None) is not None

    def add_history(self, entry: HistoryEntry) -> HistoryEntry:
        self._history.setdefault(entry.parent_key, []).append(entry)
        return entry

    # RegistryStore

    def load_domain(self, key: str) -> DomainRecord | None:
        return self._domains.get(key)

    def load_contacts(self, keys: Iterable[str]) -> dict[str, ContactRecord]:
        return {key: self._contacts[key] for key in keys if key in self._contacts}

    def load_hosts(self, keys: Iterable[str]) -> dict[str, HostRecord]:
        return {key: self._hosts[key] for key in keys if key in self._hosts}

    def load_registrar(self, client_id: str) -> RegistrarRecord | None:
        return self._registrars.get(client_id)

    def load_history(self, parent_key: str) -> list[HistoryEntry]:
        # sorted() is stable, so entries sharing a timestamp keep log order
        return sorted(
            self._history.get(parent_key, []),
            key=lambda entry: entry.modification_time,
        )

    def is_linked(self, key: str, at: datetime) -> bool:
        for domain in self._domains.values():
            if domain.creation_time > at or domain.is_deleted_at(at):
                continue
            if key in domain.nameservers or key in domain.referenced_contacts():
                return True
        return False

    # RegistrarStore

    async def list_client_ids(self) -> list[str]:
        return list(self._registrars)

    async def update_registrar(
        self, client_id: str, mutate: RegistrarMutation
    ) -> bool:
        async with self._registrar_lock:
            registrar = self._registrars.get(client_id)
            if registrar is None:
                return False
            replacement = mutate(registrar)
            if replacement is None:
                return False
            self._registrars[client_id] = replacement
            return True
