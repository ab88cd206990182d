"""Contact versions of the RDAP entity object.

Whether a contact is shown redacted is decided once, by authorization,
when the view is created; the tier never changes it. The two variants are
separate types so that the redacted one cannot reach contact data at all.
"""

from dataclasses import dataclass
from typing import Any

from rdapview.rdap.builder import JsonBuilder
from rdapview.rdap.context import RequestContext
from rdapview.rdap.enums import ObjectClassName, OutputTier, RdapStatus, Role
from rdapview.rdap.events import make_optional_events
from rdapview.rdap.models import Event, Link
from rdapview.rdap.standard import (
    CONTACT_EMAIL_REDACTED_FOR_DOMAIN,
    CONTACT_PERSONAL_DATA_HIDDEN_DATA_REMARK,
    CONTACT_REDACTED_VALUE,
    make_summary_remark,
)
from rdapview.rdap.status import make_status_values
from rdapview.rdap.vcard import (
    VcardArray,
    make_address_entry,
    make_fax_phone_entry,
    make_voice_phone_entry,
)
from rdapview.registry.enums import StatusValue
from rdapview.registry.models import (
    Address,
    ContactRecord,
    HistoryEntry,
    PhoneNumber,
    PostalInfo,
)

REDACTED_POSTAL_INFO = PostalInfo(
    name=CONTACT_REDACTED_VALUE,
    org=CONTACT_REDACTED_VALUE,
    address=Address(
        street=(CONTACT_REDACTED_VALUE,),
        city=CONTACT_REDACTED_VALUE,
        state=CONTACT_REDACTED_VALUE,
        zip=CONTACT_REDACTED_VALUE,
        country_code="XX",
    ),
)
REDACTED_PHONE_NUMBER = PhoneNumber(phone_number=CONTACT_REDACTED_VALUE)


def make_contact_vcard(
    postal_info: PostalInfo | None,
    voice_number: PhoneNumber | None,
    fax_number: PhoneNumber | None,
) -> VcardArray:
    """fn, org, adr and tel properties of a contact.

    Email is never included; contact views carry a remark instead.
    """
    vcard = VcardArray()
    if postal_info is not None:
        vcard.add_text("fn", postal_info.name)
        vcard.add_text("org", postal_info.org)
        vcard.add(make_address_entry(postal_info.address))
    if voice_number is not None:
        vcard.add(make_voice_phone_entry(voice_number.phone_number, voice_number.extension))
    if fax_number is not None:
        vcard.add(make_fax_phone_entry(fax_number.phone_number, fax_number.extension))
    return vcard


@dataclass(frozen=True)
class UnredactedContactView:
    """Contact as seen by its sponsoring registrar or an administrator."""

    record: ContactRecord
    roles: tuple[Role, ...]
    tier: OutputTier
    context: RequestContext
    is_linked: bool = False
    history: tuple[HistoryEntry, ...] = ()

    object_class_name = ObjectClassName.ENTITY
    is_redacted = False

    @property
    def handle(self) -> str:
        return self.record.repo_id

    def self_link(self) -> Link:
        return self.context.self_link("entity", self.record.repo_id)

    def vcard_array(self) -> VcardArray:
        return make_contact_vcard(
            self.record.postal_info, self.record.voice_number, self.record.fax_number
        )

    def status(self) -> list[RdapStatus]:
        """Statuses shown for FULL contacts only."""
        if self.tier != OutputTier.FULL:
            return []
        statuses = set(self.record.status_values)
        if self.is_linked:
            statuses.add(StatusValue.LINKED)
        return make_status_values(
            statuses,
            is_redacted=False,
            is_deleted=self.record.is_deleted_at(self.context.request_time),
        )

    def events(self) -> list[Event]:
        if self.tier != OutputTier.FULL:
            return []
        return make_optional_events(self.record, self.history, self.context.request_time)

    def to_json(self) -> dict[str, Any]:
        self_link = self.self_link()
        builder = JsonBuilder()
        builder.add("objectClassName", self.object_class_name)
        builder.add("handle", self.handle)
        builder.extend("roles", self.roles)
        builder.add("vcardArray", self.vcard_array())
        builder.extend("links", [self_link])
        builder.extend("status", self.status())
        builder.extend("events", self.events())
        builder.extend("remarks", [CONTACT_EMAIL_REDACTED_FOR_DOMAIN])
        if self.tier != OutputTier.FULL:
            builder.extend("remarks", [make_summary_remark(self_link)])
        return builder.build()


@dataclass(frozen=True)
class RedactedContactView:
    """Contact as seen by anyone else.

    Built without the contact record. There is no self link because the
    ROID itself identifies the person, and no status or events because
    timestamps can fingerprint a contact.
    """

    roles: tuple[Role, ...]
    tier: OutputTier
    context: RequestContext

    object_class_name = ObjectClassName.ENTITY
    is_redacted = True

    @property
    def handle(self) -> str:
        return CONTACT_REDACTED_VALUE

    def vcard_array(self) -> VcardArray:
        return make_contact_vcard(
            REDACTED_POSTAL_INFO, REDACTED_PHONE_NUMBER, REDACTED_PHONE_NUMBER
        )

    def to_json(self) -> dict[str, Any]:
        return (
            JsonBuilder()
            .add("objectClassName", self.object_class_name)
            .add("handle", self.handle)
            .extend("roles", self.roles)
            .add("vcardArray", self.vcard_array())
            .extend("remarks", [CONTACT_PERSONAL_DATA_HIDDEN_DATA_REMARK])
            .build()
        )


ContactView = UnredactedContactView | RedactedContactView
