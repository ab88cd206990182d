"""Per-kind RDAP views.

Each view is an immutable snapshot of one record at one output tier,
rendered on demand with `to_json()`.
"""

from rdapview.rdap.views.contact import (
    ContactView,
    RedactedContactView,
    UnredactedContactView,
)
from rdapview.rdap.views.domain import DomainView, group_contact_roles
from rdapview.rdap.views.nameserver import NameserverView
from rdapview.rdap.views.registrar import RegistrarContactView, RegistrarView

RdapView = DomainView | NameserverView | ContactView | RegistrarView

__all__ = [
    "ContactView",
    "DomainView",
    "NameserverView",
    "RdapView",
    "RedactedContactView",
    "RegistrarContactView",
    "RegistrarView",
    "UnredactedContactView",
    "group_contact_roles",
]
