"""Injectable clocks.

Response construction reads the clock at most once, through
`RequestContext.request_time`.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime: ...


class SystemClock:
    """Clock backed by the system time."""

    def now(self) -> datetime:
        return utc_now()


@dataclass
class FakeClock:
    """Clock frozen at a settable instant, for tests and replays.

    `reads` counts calls to now() so callers can assert the clock was
    consulted only once.
    """

    current: datetime
    reads: int = 0

    def now(self) -> datetime:
        self.reads += 1
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current = self.current + delta

    def set(self, instant: datetime) -> None:
        self.current = instant
