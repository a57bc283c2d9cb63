"""Calendar-day clock used by the vote ledger.

All "what day is it" questions go through this module so the quota and the
one-vote-per-day rule agree on the boundary, and tests can pin a fixed day.
"""

from __future__ import annotations

from datetime import date, datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

from neta_promise.core.settings import settings


class DayClock:
    """Return the current calendar day in a configured time zone."""

    def __init__(self, timezone: str = "UTC") -> None:
        self.timezone = ZoneInfo(timezone)

    def today(self) -> date:
        """Return today's date as seen by the server."""
        return datetime.now(self.timezone).date()


class FixedDayClock(DayClock):
    """Clock frozen on a single day; advance it explicitly."""

    def __init__(self, day: date) -> None:
        super().__init__("UTC")
        self.day = day

    def today(self) -> date:
        return self.day


@lru_cache(maxsize=1)
def get_day_clock() -> DayClock:
    """Return the shared process clock."""
    return DayClock(settings.vote_timezone)
