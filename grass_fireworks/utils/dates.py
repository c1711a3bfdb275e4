# grass_fireworks/utils/dates.py
"""
Calendar helpers and the injectable clock.

Wall-clock time is read only through a Clock. The HTTP layer hands a
SystemClock to the request path; tests hand in a FixedClock.
"""
from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

LUCKY_DAY_INTERVAL = 10


def day_of_year(day: date) -> int:
    """Ordinal day within the calendar year: Jan 1 is 1, Dec 31 is 365 or 366."""
    return day.timetuple().tm_yday


def is_lucky_day(day: date) -> bool:
    return day_of_year(day) % LUCKY_DAY_INTERVAL == 0


class SystemClock:
    """Real clock, UTC based."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return self.now().date()


class FixedClock:
    """Clock pinned to one instant."""

    def __init__(self, moment: datetime | date):
        if not isinstance(moment, datetime):
            moment = datetime(moment.year, moment.month, moment.day, tzinfo=timezone.utc)
        self._moment = moment

    def now(self) -> datetime:
        return self._moment

    def today(self) -> date:
        return self._moment.date()


Clock = SystemClock | FixedClock


def default_seed(clock: Optional[Clock] = None) -> int:
    """Millisecond timestamp from ``clock``, used only when a caller supplies no seed."""
    clock = clock or SystemClock()
    return int(clock.now().timestamp() * 1000)
