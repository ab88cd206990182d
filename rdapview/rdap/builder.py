"""Ordered JSON object builder used by every view.

Members appear in the order they are added. `None` values and empty
list contributions are skipped, so optional members simply never appear.
"""

from collections.abc import Iterable
from typing import Any


def to_json_value(value: Any) -> Any:
    """Convert output objects, enums and sequences into plain JSON values."""
    if hasattr(value, "to_json"):
        return value.to_json()
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        # str-based enums serialize as their value
        return getattr(value, "value", value)
    if isinstance(value, dict):
        return {key: to_json_value(item) for key, item in value.items()}
    raise TypeError(f"Cannot render {type(value).__name__} as JSON")


class JsonBuilder:
    """Accumulates (name, value) pairs into an ordered dict."""

    def __init__(self) -> None:
        self._members: dict[str, Any] = {}

    def add(self, name: str, value: Any) -> "JsonBuilder":
        """Set a single-valued member; skipped when value is None."""
        if value is not None:
            self._members[name] = to_json_value(value)
        return self

    def extend(self, name: str, items: Iterable[Any]) -> "JsonBuilder":
        """Append items to a list-valued member, creating it on first use.

        Several contributors may extend the same member (links, events,
        entities, remarks). Nothing is emitted if no contributor adds items.
        """
        rendered = [to_json_value(item) for item in items if item is not None]
        if rendered:
            self._members.setdefault(name, []).extend(rendered)
        return self

    def __contains__(self, name: str) -> bool:
        return name in self._members

    def build(self) -> dict[str, Any]:
        return dict(self._members)
