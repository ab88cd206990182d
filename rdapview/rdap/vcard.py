"""jCard (RFC 7095) assembly for entity views.

Entries are `[name, parameters, value type, value]`; the card renders as
`["vcard", [["version", {}, "text", "4.0"], *entries]]`.
"""

from dataclasses import dataclass, field
from typing import Any

import pycountry

from rdapview.registry.models import Address

VCARD_VERSION = "4.0"
PHONE_TYPE_VOICE: dict[str, list[str]] = {"type": ["voice"]}
PHONE_TYPE_FAX: dict[str, list[str]] = {"type": ["fax"]}


@dataclass(frozen=True)
class Vcard:
    """A single jCard property."""

    name: str
    value_type: str
    value: Any
    parameters: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> list[Any]:
        return [self.name, dict(self.parameters), self.value_type, self.value]


class VcardArray:
    """Ordered list of jCard properties with the mandatory version header."""

    def __init__(self) -> None:
        self._entries: list[Vcard] = []

    def add(self, entry: Vcard | None) -> "VcardArray":
        if entry is not None:
            self._entries.append(entry)
        return self

    def add_text(self, name: str, value: str | None) -> "VcardArray":
        """Add a single-value text property unless the value is empty."""
        if value:
            self._entries.append(Vcard(name, "text", value))
        return self

    @property
    def entries(self) -> list[Vcard]:
        return list(self._entries)

    def to_json(self) -> list[Any]:
        version = Vcard("version", "text", VCARD_VERSION)
        return ["vcard", [entry.to_json() for entry in [version, *self._entries]]]


def country_display_name(country_code: str | None) -> str:
    """English name of an ISO 3166 alpha-2 code, "" when unknown."""
    if not country_code:
        return ""
    country = pycountry.countries.get(alpha_2=country_code.upper())
    if country is None:
        return ""
    return getattr(country, "common_name", None) or country.name


def make_address_entry(address: Address | None) -> Vcard | None:
    """Build the `adr` property from an address, or None without one.

    The value has seven slots: PO box, extended address, street, city,
    state, postal code, country name. One street line is a bare string,
    several lines are a nested list, no lines is an empty string.
    """
    if address is None:
        return None
    street: str | list[str]
    if not address.street:
        street = ""
    elif len(address.street) == 1:
        street = address.street[0]
    else:
        street = list(address.street)
    value = [
        "",
        "",
        street,
        address.city or "",
        address.state or "",
        address.zip or "",
        country_display_name(address.country_code),
    ]
    return Vcard("adr", "text", value)


def make_phone_string(phone_number: str, extension: str | None = None) -> str:
    """Phone number in URI form, as the jCard `tel` property wants it."""
    phone = f"tel:{phone_number}"
    if extension:
        phone = f"{phone};ext={extension}"
    return phone


def make_voice_phone_entry(phone_number: str, extension: str | None = None) -> Vcard:
    return Vcard(
        "tel", "uri", make_phone_string(phone_number, extension), dict(PHONE_TYPE_VOICE)
    )


def make_fax_phone_entry(phone_number: str, extension: str | None = None) -> Vcard:
    return Vcard(
        "tel", "uri", make_phone_string(phone_number, extension), dict(PHONE_TYPE_FAX)
    )


def make_email_entry(email_address: str | None) -> Vcard | None:
    if not email_address:
        return None
    return Vcard("email", "text", email_address)
