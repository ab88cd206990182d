"""Enums for the RDAP output side (RFC 7483, RFC 8056)."""

from enum import Enum


class OutputTier(str, Enum):
    """How much of the object graph a view expands.

    - FULL: the object is the subject of the query; everything is expanded
    - SUMMARY: one of many search results; minimal fields plus a link to FULL
    - INTERNAL: embedded inside another object's response; smaller still
    """

    FULL = "full"
    SUMMARY = "summary"
    INTERNAL = "internal"


class Role(str, Enum):
    """Relationship of an entity to the object containing it (RFC 7483 10.2.4).

    Declaration order is the order roles are listed within one entity.
    """

    REGISTRANT = "registrant"
    ADMIN = "administrative"
    TECH = "technical"
    BILLING = "billing"
    ABUSE = "abuse"
    REGISTRAR = "registrar"


class RdapStatus(str, Enum):
    """RDAP status tokens (RFC 8056). The value is the display name."""

    VALIDATED = "validated"
    RENEW_PROHIBITED = "renew prohibited"
    UPDATE_PROHIBITED = "update prohibited"
    TRANSFER_PROHIBITED = "transfer prohibited"
    DELETE_PROHIBITED = "delete prohibited"
    PROXY = "proxy"
    PRIVATE = "private"
    REMOVED = "removed"
    OBSCURED = "obscured"
    ASSOCIATED = "associated"
    ACTIVE = "active"
    INACTIVE = "inactive"
    LOCKED = "locked"
    PENDING_CREATE = "pending create"
    PENDING_RENEW = "pending renew"
    PENDING_TRANSFER = "pending transfer"
    PENDING_UPDATE = "pending update"
    PENDING_DELETE = "pending delete"
    ADD_PERIOD = "add period"
    AUTO_RENEW_PERIOD = "auto renew period"
    CLIENT_DELETE_PROHIBITED = "client delete prohibited"
    CLIENT_HOLD = "client hold"
    CLIENT_RENEW_PROHIBITED = "client renew prohibited"
    CLIENT_TRANSFER_PROHIBITED = "client transfer prohibited"
    CLIENT_UPDATE_PROHIBITED = "client update prohibited"
    PENDING_RESTORE = "pending restore"
    REDEMPTION_PERIOD = "redemption period"
    RENEW_PERIOD = "renew period"
    SERVER_DELETE_PROHIBITED = "server delete prohibited"
    SERVER_RENEW_PROHIBITED = "server renew prohibited"
    SERVER_TRANSFER_PROHIBITED = "server transfer prohibited"
    SERVER_UPDATE_PROHIBITED = "server update prohibited"
    SERVER_HOLD = "server hold"
    TRANSFER_PERIOD = "transfer period"

    @property
    def display_name(self) -> str:
        return self.value


class EventAction(str, Enum):
    """Event actions (RFC 7483 10.2.3).

    Declaration order is the order optional events are emitted in.
    """

    REGISTRATION = "registration"
    REREGISTRATION = "reregistration"
    LAST_CHANGED = "last changed"
    EXPIRATION = "expiration"
    DELETION = "deletion"
    REINSTANTIATION = "reinstantiation"
    TRANSFER = "transfer"
    LOCKED = "locked"
    UNLOCKED = "unlocked"
    LAST_UPDATE_OF_RDAP_DATABASE = "last update of RDAP database"


class ObjectClassName(str, Enum):
    """RDAP object class names."""

    DOMAIN = "domain"
    NAMESERVER = "nameserver"
    ENTITY = "entity"


class RemarkType(str, Enum):
    """Notice and remark types (RFC 7483 10.2.1)."""

    RESULT_TRUNCATED_AUTHORIZATION = "result set truncated due to authorization"
    RESULT_TRUNCATED_LOAD = "result set truncated due to excessive load"
    RESULT_TRUNCATED_UNEXPLAINABLE = "result set truncated due to unexplainable reasons"
    OBJECT_TRUNCATED_AUTHORIZATION = "object truncated due to authorization"
    OBJECT_TRUNCATED_LOAD = "object truncated due to excessive load"
    OBJECT_TRUNCATED_UNEXPLAINABLE = "object truncated due to unexplainable reasons"
    OBJECT_REDACTED_AUTHORIZATION = "object redacted due to authorization"


class PublicIdType(str, Enum):
    """Public identifier registries."""

    IANA_REGISTRAR_ID = "IANA Registrar ID"
