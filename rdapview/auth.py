"""RDAP authorization: who may see unredacted contact data."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AuthorizationRole(str, Enum):
    """Caller roles, decided by the authentication layer.

    - ADMINISTRATOR: registry staff, sees everything
    - REGISTRAR: logged-in registrar, sees objects it sponsors
    - PUBLIC: anonymous, sees redacted contacts only
    """

    ADMINISTRATOR = "administrator"
    REGISTRAR = "registrar"
    PUBLIC = "public"


class RdapAuthorization(BaseModel):
    """Authorization decision for one request."""

    model_config = ConfigDict(frozen=True)

    role: AuthorizationRole = AuthorizationRole.PUBLIC
    client_ids: frozenset[str] = Field(default_factory=frozenset)

    @classmethod
    def public(cls) -> "RdapAuthorization":
        return cls(role=AuthorizationRole.PUBLIC)

    @classmethod
    def administrator(cls) -> "RdapAuthorization":
        return cls(role=AuthorizationRole.ADMINISTRATOR)

    @classmethod
    def for_registrars(cls, *client_ids: str) -> "RdapAuthorization":
        return cls(role=AuthorizationRole.REGISTRAR, client_ids=frozenset(client_ids))

    def is_authorized_for(self, client_id: str | None) -> bool:
        """Whether the caller may see data sponsored by `client_id`."""
        if self.role == AuthorizationRole.ADMINISTRATOR:
            return True
        if self.role == AuthorizationRole.REGISTRAR:
            return client_id is not None and client_id in self.client_ids
        return False
