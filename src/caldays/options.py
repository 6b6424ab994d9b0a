"""Options accepted by the day adder."""

from dataclasses import dataclass, field
from datetime import date, tzinfo
from typing import Any, Iterable

from caldays.calendar import BDateCalendar, Calendar, DateCalendar, ExcludedDatesCalendar
from caldays.config import check_tz
from caldays.dates import calendar_day, parse_date_list
from caldays.logging import get_logger

_log = get_logger(__name__)


@dataclass(frozen=True)
class AddDaysOptions:
    """How ``add_days`` counts days.

    ``excluded_dates`` accepts any iterable of date-like values (or a
    newline-delimited string). Entries are resolved once, here: those that
    do not describe a valid day are dropped, the rest are reduced to their
    calendar day. After construction the field is a ``frozenset[date]``.

    Attributes:
        exclude_weekends: Saturdays and Sundays never count.
        excluded_dates: Calendar days that never count.
        tz: Timezone context for the input date and the excluded dates.
            An unknown timezone raises ValueError here, not at use.
    """

    exclude_weekends: bool = False
    excluded_dates: frozenset[date] = field(default_factory=frozenset)
    tz: str | tzinfo | None = None

    def __post_init__(self) -> None:
        check_tz(self.tz)
        object.__setattr__(self, "exclude_weekends", bool(self.exclude_weekends))
        object.__setattr__(
            self, "excluded_dates", _resolve_excluded(self.excluded_dates, self.tz)
        )

    def calendar(self) -> Calendar:
        """Calendar implementing these options."""
        if self.excluded_dates:
            return ExcludedDatesCalendar(
                self.excluded_dates, exclude_weekends=self.exclude_weekends
            )
        if self.exclude_weekends:
            return BDateCalendar()
        return DateCalendar()


def _resolve_excluded(entries: Any, tz: str | tzinfo | None) -> frozenset[date]:
    if entries is None:
        return frozenset()
    if isinstance(entries, str):
        entries = parse_date_list(entries, tz=tz)
    if not isinstance(entries, Iterable):
        entries = [entries]
    days = set()
    for entry in entries:
        day = calendar_day(entry, tz=tz)
        if day is None:
            _log.debug("excluded_date_dropped", value=repr(entry))
            continue
        days.add(day)
    return frozenset(days)
