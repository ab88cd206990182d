"""rdapview: RDAP (RFC 7483) responses from registry records."""

__version__ = "0.1.0"
