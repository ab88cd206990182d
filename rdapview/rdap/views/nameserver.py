"""Nameserver (host) version of the RDAP object."""

from dataclasses import dataclass
from ipaddress import IPv4Address
from typing import Any

from rdapview.rdap.builder import JsonBuilder
from rdapview.rdap.context import RequestContext
from rdapview.rdap.enums import ObjectClassName, OutputTier, RdapStatus
from rdapview.rdap.idn import to_unicode_name
from rdapview.rdap.models import IpAddresses, Link
from rdapview.rdap.standard import make_summary_remark
from rdapview.rdap.status import make_status_values
from rdapview.rdap.views.registrar import RegistrarView
from rdapview.registry.enums import StatusValue
from rdapview.registry.models import HostRecord


@dataclass(frozen=True)
class NameserverView:
    """A host, as a query subject or embedded in a domain.

    `is_linked` and `parent_pending_transfer` are computed by the formatter
    as of request time; the view only renders them.
    """

    record: HostRecord
    tier: OutputTier
    context: RequestContext
    is_linked: bool = False
    parent_pending_transfer: bool = False
    registrar: RegistrarView | None = None

    object_class_name = ObjectClassName.NAMESERVER

    @property
    def handle(self) -> str:
        return self.record.repo_id

    @property
    def ldh_name(self) -> str:
        return self.record.fully_qualified_host_name

    def self_link(self) -> Link:
        return self.context.self_link("nameserver", self.ldh_name)

    def status(self) -> list[RdapStatus]:
        statuses = set(self.record.status_values)
        if self.is_linked:
            statuses.add(StatusValue.LINKED)
        if self.parent_pending_transfer:
            statuses.add(StatusValue.PENDING_TRANSFER)
        return make_status_values(
            statuses,
            is_redacted=False,
            is_deleted=self.record.is_deleted_at(self.context.request_time),
        )

    def ip_addresses(self) -> IpAddresses | None:
        """v4 and v6 addresses, None when the host has neither.

        Each family is sorted by its text form, so 192.0.2.10 comes
        before 192.0.2.9.
        """
        addresses = self.record.inet_addresses
        v4 = sorted({str(address) for address in addresses if isinstance(address, IPv4Address)})
        v6 = sorted({str(address) for address in addresses if not isinstance(address, IPv4Address)})
        if not v4 and not v6:
            return None
        return IpAddresses(
            v4=tuple(v4) or None,
            v6=tuple(v6) or None,
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
            builder.extend("status", self.status())
        if self.tier != OutputTier.INTERNAL:
            builder.add("ipAddresses", self.ip_addresses())
        if self.tier == OutputTier.FULL:
            builder.extend("entities", [self.registrar])
        else:
            builder.extend("remarks", [make_summary_remark(self_link)])
        return builder.build()
