"""Job configuration models.

Configuration for the registrar base-URL synchronization job.
"""

from pydantic import BaseModel, Field, SecretStr


class MosapiConfig(BaseModel):
    """ICANN MoSAPI directory access.

    The login user is derived from the TLD as `<tld>_ry`; any TLD with
    reporting access works.
    """

    base_url: str = Field(
        default="https://mosapi.icann.org/mosapi/v1/{tld}/",
        description="MoSAPI endpoint template, {tld} is substituted",
    )
    tld: str = Field(default="example", description="TLD used to log in")
    password: SecretStr | None = Field(
        default=None,
        description="ICANN reporting password (from RDAPVIEW_JOBS__MOSAPI__PASSWORD)",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout for each MoSAPI request",
    )

    @property
    def endpoint(self) -> str:
        """Base URL with the TLD filled in."""
        return self.base_url.format(tld=self.tld)


class JobsConfig(BaseModel):
    """Top-level jobs configuration."""

    mosapi: MosapiConfig = Field(
        default_factory=MosapiConfig,
        description="MoSAPI configuration",
    )
