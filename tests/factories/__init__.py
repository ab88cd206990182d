"""Test factories for creating test data."""

from tests.factories.registry import (
    ContactFactory,
    DomainFactory,
    HistoryEntryFactory,
    HostFactory,
    RegistrarFactory,
)

__all__ = [
    "ContactFactory",
    "DomainFactory",
    "HistoryEntryFactory",
    "HostFactory",
    "RegistrarFactory",
]
