"""ICANN MoSAPI client for the registrar RDAP base-URL directory.

MoSAPI is a login / query / logout service: log in with the ICANN reporting
credentials, receive an `id` session cookie, send it with the list request,
then log out. The user name is `<tld>_ry` for any TLD with reporting access.

Usage:
    async with MosapiClient(settings.jobs.mosapi) as client:
        base_urls = await client.fetch_rdap_base_urls()
"""

from typing import Any

import httpx

from rdapview.config.models.jobs import MosapiConfig
from rdapview.errors import MosapiError
from rdapview.observability.logging import get_logger

logger = get_logger(__name__)

LOGIN_PATH = "login"
LIST_PATH = "registrarRdapBaseUrl/list"
LOGOUT_PATH = "logout"
SESSION_COOKIE = "id"


def parse_rdap_base_url_list(payload: Any) -> dict[str, frozenset[str]]:
    """Map each IANA ID to its set of RDAP base URLs.

    `services` is a list of `[ianaIds, baseUrls]` pairs; every ID in a pair
    gets every URL of that pair. IDs listed in several pairs accumulate.

    Raises:
        MosapiError: If the payload does not have that shape
    """
    base_urls: dict[str, set[str]] = {}
    try:
        for iana_ids, urls in payload["services"]:
            for iana_id in iana_ids:
                base_urls.setdefault(str(iana_id), set()).update(str(url) for url in urls)
    except (KeyError, TypeError, ValueError) as e:
        raise MosapiError(f"Malformed RDAP base URL list: {e}") from e
    return {iana_id: frozenset(urls) for iana_id, urls in base_urls.items()}


class MosapiClient:
    """Async client for the MoSAPI registrar base-URL list.

    Attributes:
        username: Login user derived from the configured TLD
    """

    def __init__(
        self,
        config: MosapiConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: MoSAPI configuration
            transport: Optional transport override, used by tests
        """
        self._config = config
        self.username = f"{config.tld}_ry"
        self._client = httpx.AsyncClient(
            base_url=config.endpoint,
            timeout=config.timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "MosapiClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    def _session_headers(self, session_id: str) -> dict[str, str]:
        return {"Cookie": f"{SESSION_COOKIE}={session_id}"}

    async def login(self) -> str:
        """Log in and return the session ID.

        Raises:
            MosapiError: On transport failure, error status or missing cookie
        """
        password = (
            self._config.password.get_secret_value() if self._config.password else ""
        )
        logger.info("mosapi_login", tld=self._config.tld)
        try:
            response = await self._client.get(LOGIN_PATH, auth=(self.username, password))
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise MosapiError(
                f"Error logging in to MoSAPI server: {e}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise MosapiError(f"Error logging in to MoSAPI server: {e}") from e

        session_id = response.cookies.get(SESSION_COOKIE)
        if session_id is None:
            raise MosapiError(
                "Didn't get the ID cookie from the login response",
                status_code=response.status_code,
            )
        return session_id

    async def list_rdap_base_urls(self, session_id: str) -> dict[str, frozenset[str]]:
        """Fetch the IANA ID to base-URL directory.

        Raises:
            MosapiError: On transport failure, error status or bad payload
        """
        try:
            response = await self._client.get(
                LIST_PATH, headers=self._session_headers(session_id)
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise MosapiError(
                f"Error reading RDAP list from MoSAPI server: {e}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise MosapiError(f"Error reading RDAP list from MoSAPI server: {e}") from e
        except ValueError as e:
            raise MosapiError(f"RDAP list is not JSON: {e}") from e

        base_urls = parse_rdap_base_url_list(payload)
        logger.info("mosapi_list_received", iana_id_count=len(base_urls))
        return base_urls

    async def logout(self, session_id: str) -> None:
        """Log out; a failure is logged and otherwise ignored."""
        try:
            response = await self._client.get(
                LOGOUT_PATH, headers=self._session_headers(session_id)
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("mosapi_logout_failed", error=str(e))

    async def fetch_rdap_base_urls(self) -> dict[str, frozenset[str]]:
        """Login, list and logout in one go; logout runs even if listing fails."""
        session_id = await self.login()
        try:
            return await self.list_rdap_base_urls(session_id)
        finally:
            await self.logout(session_id)
