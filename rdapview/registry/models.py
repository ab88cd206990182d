"""Registry record models.

These mirror what the data store holds. They are read-only snapshots:
rendering never mutates them, and the base-URL job replaces a registrar
with `model_copy` rather than editing it in place.
"""

from datetime import datetime
from ipaddress import IPv4Address, IPv6Address

from pydantic import BaseModel, ConfigDict, Field

from rdapview.registry.enums import (
    DesignatedContactType,
    HistoryEntryType,
    PostalInfoType,
    RegistrarState,
    RegistrarType,
    StatusValue,
)


class RecordModel(BaseModel):
    """Base for all stored records: immutable, unknown fields ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Address(RecordModel):
    """Postal address. Street holds zero to three lines."""

    street: tuple[str, ...] = ()
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country_code: str | None = None


class PostalInfo(RecordModel):
    """Contact postal info, internationalized or localized."""

    name: str | None = None
    org: str | None = None
    address: Address | None = None
    type: PostalInfoType = PostalInfoType.INTERNATIONALIZED


class PhoneNumber(RecordModel):
    """EPP phone number (`+1.2125551234`) with optional extension."""

    phone_number: str
    extension: str | None = None


class DesignatedContact(RecordModel):
    """A contact reference on a domain, tagged with its role."""

    type: DesignatedContactType
    contact_key: str


class DelegationSignerData(RecordModel):
    """One DS record of a signed delegation."""

    key_tag: int
    algorithm: int
    digest_type: int
    digest: str


class EppResource(RecordModel):
    """Fields shared by domains, hosts and contacts."""

    repo_id: str = Field(..., description="ROID, the canonical handle")
    status_values: frozenset[StatusValue] = Field(default_factory=frozenset)
    current_sponsor_client_id: str
    creation_client_id: str | None = None
    creation_time: datetime
    last_epp_update_time: datetime | None = None
    deletion_time: datetime | None = Field(
        default=None, description="None while the resource exists"
    )

    def is_deleted_at(self, instant: datetime) -> bool:
        """Whether the deletion time has already passed at `instant`."""
        return self.deletion_time is not None and self.deletion_time < instant


class DomainRecord(EppResource):
    """A registered domain."""

    fully_qualified_domain_name: str
    registration_expiration_time: datetime
    registrant: str | None = None
    contacts: tuple[DesignatedContact, ...] = ()
    nameservers: tuple[str, ...] = Field(default=(), description="Host keys")
    ds_data: tuple[DelegationSignerData, ...] = ()
    pending_transfer_expiration_time: datetime | None = None

    def status_values_at(self, instant: datetime) -> frozenset[StatusValue]:
        """Statuses projected to `instant`.

        A pending transfer whose expiration has passed is treated as
        resolved and no longer reported.
        """
        statuses = self.status_values
        if (
            StatusValue.PENDING_TRANSFER in statuses
            and self.pending_transfer_expiration_time is not None
            and self.pending_transfer_expiration_time <= instant
        ):
            return statuses - {StatusValue.PENDING_TRANSFER}
        return statuses

    def referenced_contacts(self) -> list[str]:
        """Distinct contact keys, registrant included, in reference order."""
        keys = [contact.contact_key for contact in self.contacts]
        if self.registrant is not None:
            keys.append(self.registrant)
        return list(dict.fromkeys(keys))


class HostRecord(EppResource):
    """A nameserver host."""

    fully_qualified_host_name: str
    inet_addresses: tuple[IPv4Address | IPv6Address, ...] = ()
    superordinate_domain: str | None = Field(
        default=None, description="Key of the in-registry parent domain"
    )

    @property
    def is_subordinate(self) -> bool:
        return self.superordinate_domain is not None


class ContactRecord(EppResource):
    """A registrant / admin / tech / billing contact."""

    contact_id: str
    internationalized_postal_info: PostalInfo | None = None
    localized_postal_info: PostalInfo | None = None
    voice_number: PhoneNumber | None = None
    fax_number: PhoneNumber | None = None
    email_address: str | None = None

    @property
    def postal_info(self) -> PostalInfo | None:
        """Internationalized postal info, falling back to localized."""
        return self.internationalized_postal_info or self.localized_postal_info


class RegistrarContactRecord(RecordModel):
    """A person at a registrar, published according to its visibility flags."""

    name: str | None = None
    email_address: str | None = None
    phone_number: str | None = None
    fax_number: str | None = None
    visible_in_whois_as_admin: bool = False
    visible_in_whois_as_tech: bool = False
    visible_in_domain_whois_as_abuse: bool = False


class RegistrarRecord(RecordModel):
    """A registrar account."""

    client_id: str
    iana_identifier: int | None = None
    registrar_name: str | None = None
    type: RegistrarType = RegistrarType.REAL
    state: RegistrarState = RegistrarState.ACTIVE
    internationalized_address: Address | None = None
    localized_address: Address | None = None
    phone_number: str | None = None
    fax_number: str | None = None
    email_address: str | None = None
    rdap_base_urls: frozenset[str] = Field(default_factory=frozenset)
    contacts: tuple[RegistrarContactRecord, ...] = ()

    @property
    def address(self) -> Address | None:
        """Internationalized address, falling back to localized."""
        return self.internationalized_address or self.localized_address

    @property
    def is_live(self) -> bool:
        return self.state in (RegistrarState.ACTIVE, RegistrarState.SUSPENDED)


class HistoryEntry(RecordModel):
    """One entry in an object's append-only change log."""

    parent_key: str
    type: HistoryEntryType
    client_id: str | None = Field(default=None, description="Acting registrar")
    modification_time: datetime
