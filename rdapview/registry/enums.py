"""Enums for the registry domain (the stored EPP side)."""

from enum import Enum


class StatusValue(str, Enum):
    """EPP status values as stored on domains, hosts and contacts."""

    CLIENT_DELETE_PROHIBITED = "clientDeleteProhibited"
    CLIENT_HOLD = "clientHold"
    CLIENT_RENEW_PROHIBITED = "clientRenewProhibited"
    CLIENT_TRANSFER_PROHIBITED = "clientTransferProhibited"
    CLIENT_UPDATE_PROHIBITED = "clientUpdateProhibited"
    INACTIVE = "inactive"
    LINKED = "linked"
    OK = "ok"
    PENDING_CREATE = "pendingCreate"
    PENDING_DELETE = "pendingDelete"
    PENDING_TRANSFER = "pendingTransfer"
    PENDING_UPDATE = "pendingUpdate"
    SERVER_DELETE_PROHIBITED = "serverDeleteProhibited"
    SERVER_HOLD = "serverHold"
    SERVER_RENEW_PROHIBITED = "serverRenewProhibited"
    SERVER_TRANSFER_PROHIBITED = "serverTransferProhibited"
    SERVER_UPDATE_PROHIBITED = "serverUpdateProhibited"


class DesignatedContactType(str, Enum):
    """Role of a contact on a domain.

    Declaration order is the order contacts are listed in responses.
    """

    REGISTRANT = "registrant"
    ADMIN = "admin"
    TECH = "tech"
    BILLING = "billing"

    @property
    def sort_index(self) -> int:
        return list(DesignatedContactType).index(self)


class HistoryEntryType(str, Enum):
    """Kind of change recorded in an object's history log."""

    CONTACT_CREATE = "CONTACT_CREATE"
    CONTACT_DELETE = "CONTACT_DELETE"
    CONTACT_TRANSFER_APPROVE = "CONTACT_TRANSFER_APPROVE"
    CONTACT_UPDATE = "CONTACT_UPDATE"
    DOMAIN_AUTORENEW = "DOMAIN_AUTORENEW"
    DOMAIN_CREATE = "DOMAIN_CREATE"
    DOMAIN_DELETE = "DOMAIN_DELETE"
    DOMAIN_RENEW = "DOMAIN_RENEW"
    DOMAIN_RESTORE = "DOMAIN_RESTORE"
    DOMAIN_TRANSFER_APPROVE = "DOMAIN_TRANSFER_APPROVE"
    DOMAIN_TRANSFER_REQUEST = "DOMAIN_TRANSFER_REQUEST"
    DOMAIN_UPDATE = "DOMAIN_UPDATE"
    HOST_CREATE = "HOST_CREATE"
    HOST_DELETE = "HOST_DELETE"
    HOST_UPDATE = "HOST_UPDATE"


class PostalInfoType(str, Enum):
    """EPP postal info flavour."""

    INTERNATIONALIZED = "int"
    LOCALIZED = "loc"


class RegistrarType(str, Enum):
    """Registrar account type. Only REAL registrars are ICANN accredited."""

    REAL = "REAL"
    PDT = "PDT"
    OTE = "OTE"
    TEST = "TEST"
    MONITORING = "MONITORING"
    EXTERNAL_MONITORING = "EXTERNAL_MONITORING"
    INTERNAL = "INTERNAL"


class RegistrarState(str, Enum):
    """Registrar account lifecycle state."""

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    DISABLED = "DISABLED"
