"""Links and the terms-of-service notice."""

from urllib.parse import urljoin

from rdapview.rdap.models import RDAP_JSON_MEDIA_TYPE, Link, Notice

TOS_PATH = "tos"
TOS_TITLE = "RDAP Terms of Service"


def make_server_relative_url(base_server: str, part: str, *more_parts: str) -> str:
    """Join path parts onto a server base URL with exactly one slash between."""
    relative_path = "/".join(segment.strip("/") for segment in (part, *more_parts))
    if base_server.endswith("/"):
        return base_server + relative_path
    return f"{base_server}/{relative_path}"


def make_self_link(base_url: str, object_type: str, name: str) -> Link:
    """Link an object to its own FULL RDAP representation."""
    url = make_server_relative_url(base_url, object_type, name)
    return Link(value=url, rel="self", href=url, type=RDAP_JSON_MEDIA_TYPE)


def make_related_link(registrar_base_url: str, object_type: str, name: str) -> Link:
    """Link an object to the same object on a registrar's own RDAP server."""
    url = make_server_relative_url(registrar_base_url, object_type, name)
    return Link(value=url, rel="related", href=url, type=RDAP_JSON_MEDIA_TYPE)


def make_tos_notice(
    base_url: str,
    tos: list[str] | tuple[str, ...],
    tos_static_url: str | None = None,
) -> Notice:
    """The terms-of-service notice attached to every response.

    Without a static URL the link points at the server's own help query;
    with one it points at that HTML page, resolved against the base URL.
    """
    link_value = make_server_relative_url(base_url, "help", TOS_PATH)
    if tos_static_url is None:
        link = Link(value=link_value, rel="self", href=link_value, type=RDAP_JSON_MEDIA_TYPE)
    else:
        link = Link(
            value=link_value,
            rel="alternate",
            href=urljoin(base_url, tos_static_url),
            type="text/html",
        )
    return Notice(title=TOS_TITLE, description=tuple(tos), links=(link,))
