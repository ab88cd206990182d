"""Request-scoped context shared by every view of one response."""

from datetime import datetime

from rdapview.auth import RdapAuthorization
from rdapview.clock import Clock
from rdapview.config.models.rdap import RdapConfig
from rdapview.rdap.links import make_self_link, make_tos_notice
from rdapview.rdap.models import Link, Notice


class RequestContext:
    """Time, authorization and configuration for one response.

    The request time is read from the clock on first access and frozen, so
    every nested object of the response is projected to the same "now".
    A context belongs to exactly one response and is not shared between
    concurrent requests; the freeze needs no lock for that reason.
    """

    def __init__(
        self,
        clock: Clock,
        authorization: RdapAuthorization,
        config: RdapConfig,
    ) -> None:
        self._clock = clock
        self._authorization = authorization
        self._config = config
        self._request_time: datetime | None = None

    @property
    def request_time(self) -> datetime:
        if self._request_time is None:
            self._request_time = self._clock.now()
        return self._request_time

    @property
    def config(self) -> RdapConfig:
        return self._config

    @property
    def authorization(self) -> RdapAuthorization:
        return self._authorization

    def is_authorized_for(self, client_id: str | None) -> bool:
        return self._authorization.is_authorized_for(client_id)

    def self_link(self, object_type: str, name: str) -> Link:
        return make_self_link(self._config.base_url, object_type, name)

    def tos_notice(self) -> Notice:
        return make_tos_notice(
            self._config.base_url, self._config.tos, self._config.tos_static_url
        )
