"""Registrar and registrar-contact versions of the RDAP entity object."""

from dataclasses import dataclass
from typing import Any

from rdapview.observability.logging import get_logger
from rdapview.rdap.builder import JsonBuilder
from rdapview.rdap.context import RequestContext
from rdapview.rdap.enums import ObjectClassName, OutputTier, PublicIdType, Role
from rdapview.rdap.models import Link, PublicId
from rdapview.rdap.standard import (
    REGISTRAR_HANDLE_NOT_APPLICABLE,
    UNKNOWN_NAME,
    make_summary_remark,
)
from rdapview.rdap.status import STATUS_LIST_ACTIVE, STATUS_LIST_INACTIVE
from rdapview.rdap.vcard import (
    Vcard,
    VcardArray,
    make_address_entry,
    make_email_entry,
    make_fax_phone_entry,
    make_voice_phone_entry,
)
from rdapview.registry.models import RegistrarContactRecord, RegistrarRecord

logger = get_logger(__name__)


def make_registrar_contact_roles(contact: RegistrarContactRecord) -> tuple[Role, ...]:
    """Roles a registrar contact is published under, from its visibility flags.

    A contact with no roles is not shown at all.
    """
    roles: list[Role] = []
    if contact.visible_in_whois_as_admin:
        roles.append(Role.ADMIN)
    if contact.visible_in_whois_as_tech:
        roles.append(Role.TECH)
    if contact.visible_in_domain_whois_as_abuse:
        roles.append(Role.ABUSE)
    return tuple(roles)


@dataclass(frozen=True)
class RegistrarContactView:
    """A person at a registrar.

    Only ever embedded in a registrar and never queryable on its own, so it
    has no handle, no links and no summary remark. GDPR redaction does not
    apply to registrar contacts.
    """

    record: RegistrarContactRecord
    roles: tuple[Role, ...]

    object_class_name = ObjectClassName.ENTITY

    @property
    def tier(self) -> OutputTier:
        return OutputTier.INTERNAL

    @classmethod
    def create(cls, record: RegistrarContactRecord) -> "RegistrarContactView":
        return cls(record=record, roles=make_registrar_contact_roles(record))

    def vcard_array(self) -> VcardArray:
        vcard = VcardArray()
        vcard.add_text("fn", self.record.name)
        if self.record.phone_number:
            vcard.add(make_voice_phone_entry(self.record.phone_number))
        if self.record.fax_number:
            vcard.add(make_fax_phone_entry(self.record.fax_number))
        vcard.add(make_email_entry(self.record.email_address))
        return vcard

    def to_json(self) -> dict[str, Any]:
        return (
            JsonBuilder()
            .add("objectClassName", self.object_class_name)
            .extend("roles", self.roles)
            .extend("status", STATUS_LIST_ACTIVE)
            .add("vcardArray", self.vcard_array())
            .build()
        )


@dataclass(frozen=True)
class RegistrarView:
    """Registrar version of the RDAP entity object.

    The IANA ID is the handle. Registrars without one (test and internal
    accounts) get the "not applicable" handle and no self link or public ID.
    """

    record: RegistrarRecord
    tier: OutputTier
    context: RequestContext
    contacts: tuple[RegistrarContactView, ...] = ()

    object_class_name = ObjectClassName.ENTITY

    @classmethod
    def create(
        cls,
        record: RegistrarRecord,
        tier: OutputTier,
        context: RequestContext,
    ) -> "RegistrarView":
        """Build the view with the contacts this tier shows.

        SUMMARY shows no contacts, INTERNAL only the abuse contacts a domain
        response needs, FULL every contact with a visible role.
        """
        contacts: tuple[RegistrarContactView, ...] = ()
        if tier != OutputTier.SUMMARY:
            candidates = [RegistrarContactView.create(contact) for contact in record.contacts]
            if tier == OutputTier.FULL:
                contacts = tuple(view for view in candidates if view.roles)
            else:
                contacts = tuple(view for view in candidates if Role.ABUSE in view.roles)
            if not any(Role.ABUSE in view.roles for view in contacts):
                logger.warning(
                    "registrar_missing_abuse_contact",
                    client_id=record.client_id,
                    iana_identifier=record.iana_identifier,
                )
        return cls(record=record, tier=tier, context=context, contacts=contacts)

    @property
    def handle(self) -> str:
        if self.record.iana_identifier is None:
            return REGISTRAR_HANDLE_NOT_APPLICABLE
        return str(self.record.iana_identifier)

    def public_ids(self) -> list[PublicId]:
        if self.record.iana_identifier is None:
            return []
        return [
            PublicId(
                type=PublicIdType.IANA_REGISTRAR_ID,
                identifier=str(self.record.iana_identifier),
            )
        ]

    def self_link(self) -> Link | None:
        if self.record.iana_identifier is None:
            return None
        return self.context.self_link("entity", str(self.record.iana_identifier))

    def vcard_array(self) -> VcardArray:
        vcard = VcardArray()
        vcard.add(Vcard("fn", "text", self.record.registrar_name or UNKNOWN_NAME))
        # adr, tel and email are only required outside embedded responses
        if self.tier != OutputTier.INTERNAL:
            vcard.add(make_address_entry(self.record.address))
            if self.record.phone_number:
                vcard.add(make_voice_phone_entry(self.record.phone_number))
            if self.record.fax_number:
                vcard.add(make_fax_phone_entry(self.record.fax_number))
            vcard.add(make_email_entry(self.record.email_address))
        return vcard

    def to_json(self) -> dict[str, Any]:
        builder = JsonBuilder()
        builder.add("objectClassName", self.object_class_name)
        builder.add("handle", self.handle)
        builder.extend("roles", [Role.REGISTRAR])
        builder.extend("publicIds", self.public_ids())
        self_link = self.self_link()
        builder.extend("links", [self_link])
        builder.add("vcardArray", self.vcard_array())
        if self.tier == OutputTier.FULL:
            builder.extend(
                "status",
                STATUS_LIST_ACTIVE if self.record.is_live else STATUS_LIST_INACTIVE,
            )
        builder.extend("entities", self.contacts)
        if self.tier != OutputTier.FULL and self_link is not None:
            builder.extend("remarks", [make_summary_remark(self_link)])
        return builder.build()
