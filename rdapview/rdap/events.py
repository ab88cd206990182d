"""Derivation of RDAP events from an object's history log."""

from collections.abc import Iterable
from datetime import datetime
from types import MappingProxyType

from rdapview.rdap.enums import EventAction
from rdapview.rdap.models import Event
from rdapview.registry.enums import HistoryEntryType
from rdapview.registry.models import EppResource, HistoryEntry

# Optional events only. Required events (domain registration and
# expiration) come from the record itself so SUMMARY views never need history.
HISTORY_TYPE_TO_EVENT_ACTION: MappingProxyType[HistoryEntryType, EventAction] = MappingProxyType({
    HistoryEntryType.CONTACT_CREATE: EventAction.REGISTRATION,
    HistoryEntryType.CONTACT_DELETE: EventAction.DELETION,
    HistoryEntryType.CONTACT_TRANSFER_APPROVE: EventAction.TRANSFER,
    HistoryEntryType.DOMAIN_AUTORENEW: EventAction.REREGISTRATION,
    HistoryEntryType.DOMAIN_DELETE: EventAction.DELETION,
    HistoryEntryType.DOMAIN_RENEW: EventAction.REREGISTRATION,
    HistoryEntryType.DOMAIN_RESTORE: EventAction.REINSTANTIATION,
    HistoryEntryType.DOMAIN_TRANSFER_APPROVE: EventAction.TRANSFER,
    HistoryEntryType.HOST_CREATE: EventAction.REGISTRATION,
    HistoryEntryType.HOST_DELETE: EventAction.DELETION,
})


def make_event(
    action: EventAction,
    date: datetime,
    actor: str | None = None,
) -> Event:
    """Create an RDAP event; the actor is omitted when unknown."""
    return Event(event_action=action, event_actor=actor, event_date=date)


def make_last_update_event(request_time: datetime) -> Event:
    """The "last update of RDAP database" event, dated at request time."""
    return make_event(EventAction.LAST_UPDATE_OF_RDAP_DATABASE, request_time)


def make_optional_events(
    resource: EppResource,
    history: Iterable[HistoryEntry],
    request_time: datetime,
) -> list[Event]:
    """Optional events of a domain, host or contact.

    Only the latest history entry of each event action counts. Entries older
    than the resource's creation time belong to a previous owner of a reused
    identifier and are ignored. Events come out in EventAction declaration
    order, followed by "last changed" when the resource changed after it was
    created.
    """
    last_entry_of_action: dict[EventAction, HistoryEntry] = {}
    for entry in history:
        action = HISTORY_TYPE_TO_EVENT_ACTION.get(entry.type)
        if action is None:
            continue
        current = last_entry_of_action.get(action)
        if current is None or entry.modification_time >= current.modification_time:
            last_entry_of_action[action] = entry

    creation_time = resource.creation_time
    last_change_time = resource.last_epp_update_time or creation_time

    events: list[Event] = []
    for action in EventAction:
        entry = last_entry_of_action.get(action)
        if entry is None:
            continue
        modification_time = entry.modification_time
        if modification_time < creation_time:
            continue
        events.append(make_event(action, modification_time, entry.client_id))
        # Some changes (autorenew, transfers) happen without an EPP update
        if last_change_time < modification_time < request_time:
            last_change_time = modification_time

    if last_change_time > creation_time:
        events.append(make_event(EventAction.LAST_CHANGED, last_change_time))
    return events
