"""RDAP response configuration."""

from pydantic import BaseModel, Field


class RdapConfig(BaseModel):
    """Static configuration shared by every RDAP response."""

    base_url: str = Field(
        default="https://rdap.example/rdap/",
        description="Full path of the RDAP server, prefix of every self link",
    )
    tos: list[str] = Field(
        default_factory=list,
        description="Terms of service paragraphs, in display order",
    )
    tos_static_url: str | None = Field(
        default=None,
        description="External HTML terms of service page, resolved against base_url",
    )
    zone_signed: bool = Field(
        default=True,
        description="Whether the TLD zone is DNSSEC signed",
    )
