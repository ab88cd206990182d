"""Domain version of the RDAP object."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from rdapview.errors import InvariantViolationError
from rdapview.observability.logging import get_logger
from rdapview.rdap.builder import JsonBuilder
from rdapview.rdap.context import RequestContext
from rdapview.rdap.enums import EventAction, ObjectClassName, OutputTier, RdapStatus, Role
from rdapview.rdap.events import make_event, make_optional_events
from rdapview.rdap.idn import to_unicode_name
from rdapview.rdap.links import make_related_link
from rdapview.rdap.models import DelegationSigner, Event, Link, SecureDns
from rdapview.rdap.standard import UNKNOWN_NAME, make_summary_remark
from rdapview.rdap.status import make_status_values
from rdapview.rdap.views.contact import ContactView
from rdapview.rdap.views.nameserver import NameserverView
from rdapview.rdap.views.registrar import RegistrarView
from rdapview.registry.enums import DesignatedContactType
from rdapview.registry.models import DesignatedContact, DomainRecord, HistoryEntry

logger = get_logger(__name__)

CONTACT_TYPE_TO_ROLE: MappingProxyType[DesignatedContactType, Role] = MappingProxyType({
    DesignatedContactType.REGISTRANT: Role.REGISTRANT,
    DesignatedContactType.ADMIN: Role.ADMIN,
    DesignatedContactType.TECH: Role.TECH,
    DesignatedContactType.BILLING: Role.BILLING,
})


def convert_contact_type_to_role(contact_type: DesignatedContactType) -> Role:
    """Map a designated contact type to its RDAP role.

    Raises:
        InvariantViolationError: If the type has no role
    """
    try:
        return CONTACT_TYPE_TO_ROLE[contact_type]
    except KeyError:
        raise InvariantViolationError(
            f"Unknown contact type: {contact_type!r}"
        ) from None


def group_contact_roles(domain: DomainRecord) -> list[tuple[str, tuple[Role, ...]]]:
    """Distinct contact keys of a domain, each with all the roles it holds.

    The registrant is scanned together with the designated contacts and the
    whole list is ordered REGISTRANT, ADMIN, TECH, BILLING before grouping,
    so both the contacts and each contact's roles come out in that order.
    """
    designated = list(domain.contacts)
    if domain.registrant is not None:
        designated.append(
            DesignatedContact(
                type=DesignatedContactType.REGISTRANT, contact_key=domain.registrant
            )
        )
    designated.sort(key=lambda contact: contact.type.sort_index)

    roles_by_key: dict[str, list[Role]] = {}
    for contact in designated:
        role = convert_contact_type_to_role(contact.type)
        roles = roles_by_key.setdefault(contact.contact_key, [])
        if role not in roles:
            roles.append(role)
    return [(key, tuple(roles)) for key, roles in roles_by_key.items() if roles]


@dataclass(frozen=True)
class DomainView:
    """A domain, as a query subject or as a search result.

    Registrar, contacts, nameservers and history are loaded by the formatter
    and only present for FULL views.
    """

    record: DomainRecord
    tier: OutputTier
    context: RequestContext
    registrar: RegistrarView | None = None
    contacts: tuple[ContactView, ...] = ()
    nameservers: tuple[NameserverView, ...] = ()
    history: tuple[HistoryEntry, ...] = ()

    object_class_name = ObjectClassName.DOMAIN

    @property
    def handle(self) -> str:
        return self.record.repo_id

    @property
    def ldh_name(self) -> str:
        return self.record.fully_qualified_domain_name

    def self_link(self) -> Link:
        return self.context.self_link("domain", self.ldh_name)

    def registrar_links(self) -> list[Link]:
        """One related link per RDAP base URL of the sponsoring registrar."""
        if self.registrar is None:
            return []
        return [
            make_related_link(base_url, "domain", self.ldh_name)
            for base_url in sorted(self.registrar.record.rdap_base_urls)
        ]

    def status(self) -> list[RdapStatus]:
        request_time = self.context.request_time
        statuses = make_status_values(
            self.record.status_values_at(request_time),
            is_redacted=False,
            is_deleted=self.record.is_deleted_at(request_time),
        )
        if not statuses:
            logger.warning(
                "domain_missing_status",
                domain=self.ldh_name,
                repo_id=self.handle,
            )
        return statuses

    def required_events(self) -> list[Event]:
        return [
            make_event(
                EventAction.REGISTRATION,
                self.record.creation_time,
                self.record.creation_client_id or UNKNOWN_NAME,
            ),
            make_event(EventAction.EXPIRATION, self.record.registration_expiration_time),
        ]

    def events(self) -> list[Event]:
        return self.required_events() + make_optional_events(
            self.record, self.history, self.context.request_time
        )

    def secure_dns(self) -> SecureDns:
        ds_data = tuple(
            DelegationSigner(
                key_tag=ds.key_tag,
                algorithm=ds.algorithm,
                digest=ds.digest,
                digest_type=ds.digest_type,
            )
            for ds in self.record.ds_data
        )
        return SecureDns(
            zone_signed=self.context.config.zone_signed,
            delegation_signed=bool(ds_data),
            ds_data=ds_data or None,
        )

    def to_json(self) -> dict[str, Any]:
        self_link = self.self_link()
        builder = JsonBuilder()
        builder.add("objectClassName", self.object_class_name)
        builder.add("handle", self.handle)
        builder.add("ldhName", self.ldh_name)
        builder.add("unicodeName", to_unicode_name(self.ldh_name))
        builder.extend("links", [self_link])
        if self.tier == OutputTier.FULL:
            builder.extend("links", self.registrar_links())
            builder.extend("status", self.status())
            builder.extend("events", self.events())
            builder.extend("entities", [self.registrar, *self.contacts])
            builder.extend(
                "nameservers",
                sorted(self.nameservers, key=lambda nameserver: nameserver.ldh_name),
            )
            builder.add("secureDNS", self.secure_dns())
        else:
            builder.extend("remarks", [make_summary_remark(self_link)])
        return builder.build()
