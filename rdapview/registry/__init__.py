"""Registry records: domains, hosts, contacts, registrars and their history.

Owned by the data store; rdapview only reads them.
"""

from rdapview.registry.enums import (
    DesignatedContactType,
    HistoryEntryType,
    PostalInfoType,
    RegistrarState,
    RegistrarType,
    StatusValue,
)
from rdapview.registry.models import (
    Address,
    ContactRecord,
    DelegationSignerData,
    DesignatedContact,
    DomainRecord,
    EppResource,
    HistoryEntry,
    HostRecord,
    PhoneNumber,
    PostalInfo,
    RegistrarContactRecord,
    RegistrarRecord,
)
from rdapview.registry.store import RegistrarMutation, RegistrarStore, RegistryStore

__all__ = [
    # Enums
    "DesignatedContactType",
    "HistoryEntryType",
    "PostalInfoType",
    "RegistrarState",
    "RegistrarType",
    "StatusValue",
    # Models
    "Address",
    "ContactRecord",
    "DelegationSignerData",
    "DesignatedContact",
    "DomainRecord",
    "EppResource",
    "HistoryEntry",
    "HostRecord",
    "PhoneNumber",
    "PostalInfo",
    "RegistrarContactRecord",
    "RegistrarRecord",
    # Stores
    "RegistrarMutation",
    "RegistrarStore",
    "RegistryStore",
]
