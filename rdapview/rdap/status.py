"""Mapping of stored EPP statuses to RDAP status tokens."""

from collections.abc import Iterable
from types import MappingProxyType

from rdapview.rdap.enums import RdapStatus
from rdapview.registry.enums import StatusValue

# add period, auto renew period, pending renew, pending restore, redemption
# period, renew period and transfer period have no stored counterpart.
STATUS_TO_RDAP_STATUS: MappingProxyType[StatusValue, RdapStatus] = MappingProxyType({
    StatusValue.CLIENT_DELETE_PROHIBITED: RdapStatus.CLIENT_DELETE_PROHIBITED,
    StatusValue.CLIENT_HOLD: RdapStatus.CLIENT_HOLD,
    StatusValue.CLIENT_RENEW_PROHIBITED: RdapStatus.CLIENT_RENEW_PROHIBITED,
    StatusValue.CLIENT_TRANSFER_PROHIBITED: RdapStatus.CLIENT_TRANSFER_PROHIBITED,
    StatusValue.CLIENT_UPDATE_PROHIBITED: RdapStatus.CLIENT_UPDATE_PROHIBITED,
    StatusValue.INACTIVE: RdapStatus.INACTIVE,
    StatusValue.LINKED: RdapStatus.ASSOCIATED,
    StatusValue.OK: RdapStatus.ACTIVE,
    StatusValue.PENDING_CREATE: RdapStatus.PENDING_CREATE,
    StatusValue.PENDING_DELETE: RdapStatus.PENDING_DELETE,
    StatusValue.PENDING_TRANSFER: RdapStatus.PENDING_TRANSFER,
    StatusValue.PENDING_UPDATE: RdapStatus.PENDING_UPDATE,
    StatusValue.SERVER_DELETE_PROHIBITED: RdapStatus.SERVER_DELETE_PROHIBITED,
    StatusValue.SERVER_HOLD: RdapStatus.SERVER_HOLD,
    StatusValue.SERVER_RENEW_PROHIBITED: RdapStatus.SERVER_RENEW_PROHIBITED,
    StatusValue.SERVER_TRANSFER_PROHIBITED: RdapStatus.SERVER_TRANSFER_PROHIBITED,
    StatusValue.SERVER_UPDATE_PROHIBITED: RdapStatus.SERVER_UPDATE_PROHIBITED,
})

STATUS_LIST_ACTIVE: tuple[RdapStatus, ...] = (RdapStatus.ACTIVE,)
STATUS_LIST_INACTIVE: tuple[RdapStatus, ...] = (RdapStatus.INACTIVE,)


def to_rdap_status(status: StatusValue | str) -> RdapStatus:
    """Map one stored status; anything unknown becomes OBSCURED."""
    return STATUS_TO_RDAP_STATUS.get(status, RdapStatus.OBSCURED)  # type: ignore[arg-type]


def make_status_values(
    status_values: Iterable[StatusValue | str],
    *,
    is_redacted: bool,
    is_deleted: bool,
) -> list[RdapStatus]:
    """Build the RDAP status list of an object.

    OK is reported as "active". Redacted objects gain "removed"; deleted
    objects lose "active" and gain "inactive". The result is duplicate-free
    and sorted by display name, whatever the input order.
    """
    statuses = {to_rdap_status(status) for status in status_values}
    if is_redacted:
        statuses.add(RdapStatus.REMOVED)
    if is_deleted:
        statuses.discard(RdapStatus.ACTIVE)
        statuses.add(RdapStatus.INACTIVE)
    return sorted(statuses, key=lambda status: status.display_name)
