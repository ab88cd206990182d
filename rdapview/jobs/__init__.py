"""Background jobs.

Usage:
    from rdapview.jobs import MosapiClient
    from rdapview.jobs.workflows import UpdateRegistrarRdapBaseUrlsWorkflow

    async with MosapiClient(settings.jobs.mosapi) as client:
        workflow = UpdateRegistrarRdapBaseUrlsWorkflow(client, store)
        await workflow.run(UpdateBaseUrlsInput())
"""

from rdapview.jobs.mosapi import MosapiClient

__all__ = ["MosapiClient"]
