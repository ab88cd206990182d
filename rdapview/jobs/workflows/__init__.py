"""Scheduled workflow definitions.

- UpdateRegistrarRdapBaseUrlsWorkflow: syncs registrar RDAP base URLs from MoSAPI
"""

from rdapview.jobs.workflows.update_rdap_base_urls import (
    UpdateBaseUrlsInput,
    UpdateBaseUrlsOutput,
    UpdateRegistrarRdapBaseUrlsWorkflow,
)

__all__ = [
    "UpdateRegistrarRdapBaseUrlsWorkflow",
    "UpdateBaseUrlsInput",
    "UpdateBaseUrlsOutput",
]
