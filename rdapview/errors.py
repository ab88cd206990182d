"""Exception hierarchy for rdapview."""


class RdapError(Exception):
    """Base exception for rdapview errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvariantViolationError(RdapError):
    """Code and data disagree; the response must not be built.

    Raised for values with no entry in a fixed conversion table (for example
    a contact type with no RDAP role) and for record kinds the formatter
    cannot dispatch.
    """


class RegistrarNotFoundError(InvariantViolationError):
    """A record references a sponsoring registrar the store does not have."""

    def __init__(self, client_id: str) -> None:
        super().__init__(f"Registrar not found: {client_id}")
        self.client_id = client_id


class MosapiError(RdapError):
    """Reading the registrar base-URL directory failed.

    The sync run that hit it is aborted without applying anything.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
