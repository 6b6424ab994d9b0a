"""Calendar implementations for counting qualifying days."""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta
from typing import Iterable, Iterator


def _day(dt: date) -> tuple[int, int, int]:
    """(year, month, day) of a date or datetime, ignoring time-of-day.

    Timestamps past year 9999 have no ``date()``, so days are compared as tuples.
    """
    return (dt.year, dt.month, dt.day)


class Calendar(ABC):
    """Abstract base class for calendars.

    A calendar decides which days count toward a day total. Values are
    treated as wall-clock time; callers deal with timezones.
    """

    @abstractmethod
    def is_session(self, dt: date) -> bool:
        """Return True if the calendar day of ``dt`` counts."""
        pass

    def dt_range(self, start_dt: datetime, end_dt: datetime) -> Iterator[datetime]:
        """Generate qualifying dates in range [start_dt, end_dt]."""
        current = start_dt
        while current <= end_dt:
            if self.is_session(current):
                yield current
            current += timedelta(days=1)

    def dt_offset(self, dt: datetime, periods: int) -> datetime:
        """Shift datetime by N qualifying days.

        Walks one calendar day at a time in the direction of ``periods``,
        counting only days for which ``is_session`` holds. ``dt`` itself is
        never counted; the returned day always qualifies.
        """
        if periods == 0:
            return dt
        step = timedelta(days=1 if periods > 0 else -1)
        remaining = abs(periods)
        current = dt
        while remaining > 0:
            current += step
            if self.is_session(current):
                remaining -= 1
        return current


class DateCalendar(Calendar):
    """Calendar that includes all dates."""

    def is_session(self, dt: date) -> bool:
        return True

    def dt_offset(self, dt: datetime, periods: int) -> datetime:
        return dt + timedelta(days=periods)


class BDateCalendar(Calendar):
    """Business date calendar - excludes weekends (Sat/Sun)."""

    def is_session(self, dt: date) -> bool:
        return dt.weekday() < 5  # Mon-Fri = 0-4


class ExcludedDatesCalendar(Calendar):
    """Calendar that skips specific days, and optionally weekends.

    Args:
        excluded_dates: Days that never count. Only their calendar day is
            used, so ``datetime(2024, 12, 25, 18)`` excludes all of Dec 25.
        exclude_weekends: Also skip Saturdays and Sundays.
    """

    def __init__(
        self,
        excluded_dates: Iterable[date],
        exclude_weekends: bool = False,
    ) -> None:
        self.excluded_dates = frozenset(
            d.date() if isinstance(d, datetime) else d for d in excluded_dates
        )
        self._excluded_days = frozenset(_day(d) for d in self.excluded_dates)
        self.exclude_weekends = exclude_weekends

    def __repr__(self) -> str:
        return (
            f"ExcludedDatesCalendar(excluded_dates={sorted(self.excluded_dates)!r}, "
            f"exclude_weekends={self.exclude_weekends!r})"
        )

    def is_session(self, dt: date) -> bool:
        if self.exclude_weekends and dt.weekday() >= 5:
            return False
        return _day(dt) not in self._excluded_days
