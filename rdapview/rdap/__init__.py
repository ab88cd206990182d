"""RDAP (RFC 7483) output: views, formatter and helpers."""

from rdapview.rdap.context import RequestContext
from rdapview.rdap.enums import (
    EventAction,
    ObjectClassName,
    OutputTier,
    RdapStatus,
    Role,
)
from rdapview.rdap.formatter import RdapJsonFormatter

__all__ = [
    "EventAction",
    "ObjectClassName",
    "OutputTier",
    "RdapJsonFormatter",
    "RdapStatus",
    "RequestContext",
    "Role",
]
