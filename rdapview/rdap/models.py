"""RDAP output value objects.

Each renders itself with `to_json()`; JSON member names are the camelCase
aliases and absent optional members are dropped.
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from rdapview.rdap.enums import EventAction, PublicIdType, RemarkType

RDAP_JSON_MEDIA_TYPE = "application/rdap+json"


def format_timestamp(instant: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2000-01-01T00:00:00.000Z."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    instant = instant.astimezone(UTC)
    return instant.strftime("%Y-%m-%dT%H:%M:%S.") + f"{instant.microsecond // 1000:03d}Z"


class RdapModel(BaseModel):
    """Base for output objects."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Link(RdapModel):
    """RFC 7483 4.2 link."""

    value: str | None = None
    rel: str | None = None
    href: str
    type: str | None = None


class Remark(RdapModel):
    """RFC 7483 4.3 remark."""

    title: str | None = None
    description: tuple[str, ...] = ()
    type: RemarkType | None = None
    links: tuple[Link, ...] | None = None


class Notice(Remark):
    """RFC 7483 4.3 notice; same shape as a remark, top level only."""


class Event(RdapModel):
    """RFC 7483 4.5 event."""

    event_action: EventAction = Field(alias="eventAction")
    event_actor: str | None = Field(default=None, alias="eventActor")
    event_date: datetime = Field(alias="eventDate")

    @field_serializer("event_date")
    def _serialize_date(self, value: datetime) -> str:
        return format_timestamp(value)


class PublicId(RdapModel):
    """RFC 7483 4.8 public ID."""

    type: PublicIdType
    identifier: str


class DelegationSigner(RdapModel):
    """RFC 7483 5.3 dsData member."""

    key_tag: int = Field(alias="keyTag")
    algorithm: int
    digest: str
    digest_type: int = Field(alias="digestType")


class SecureDns(RdapModel):
    """RFC 7483 5.3 secureDNS member."""

    zone_signed: bool = Field(alias="zoneSigned")
    delegation_signed: bool = Field(alias="delegationSigned")
    ds_data: tuple[DelegationSigner, ...] | None = Field(default=None, alias="dsData")


class IpAddresses(RdapModel):
    """RFC 7483 5.2 ipAddresses member; each list is sorted, empty ones omitted."""

    v4: tuple[str, ...] | None = None
    v6: tuple[str, ...] | None = None
