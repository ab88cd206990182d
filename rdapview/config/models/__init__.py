"""Configuration model exports.

    from rdapview.config.models import RdapConfig, MosapiConfig
"""

from rdapview.config.models.jobs import JobsConfig, MosapiConfig
from rdapview.config.models.observability import LoggingConfig, ObservabilityConfig
from rdapview.config.models.rdap import RdapConfig

__all__ = [
    # Jobs
    "JobsConfig",
    "MosapiConfig",
    # Observability
    "LoggingConfig",
    "ObservabilityConfig",
    # RDAP
    "RdapConfig",
]
