"""Date construction and calendar-day helpers.

Every date value handled by caldays is a ``pandas.Timestamp``. Anything that
cannot be turned into one becomes ``pandas.NaT``, which doubles as the
invalid-result sentinel: functions in this package return it instead of
raising on bad data.
"""

import math
import numbers
from datetime import date, datetime, tzinfo
from typing import Any

import pandas as pd

from caldays.config import get_default_tz, get_timestamp_unit
from caldays.logging import get_logger

NaT = pd.NaT

# Relative keywords pandas accepts but that do not name a date
_RELATIVE_WORDS = frozenset({"now", "today"})

_log = get_logger(__name__)


def to_date(value: Any, tz: str | tzinfo | None = None) -> pd.Timestamp:
    """Normalize a date-like value into a ``Timestamp``.

    Accepts datetimes, dates, Timestamps, ``numpy.datetime64``, ISO-like
    strings and numeric epochs (read in the configured unit, UTC).

    Args:
        value: The value to convert.
        tz: Timezone context. Aware values are converted into it, naive
            values are taken as wall-clock time in it. Falls back to the
            configured default; None on both keeps naive values naive.

    Returns:
        A Timestamp, or ``NaT`` if ``value`` does not describe a date.
    """
    if tz is None:
        tz = get_default_tz()
    return _coerce(value, tz)


def construct_from(reference: Any, value: Any) -> pd.Timestamp:
    """Build a Timestamp from ``value`` in the timezone of ``reference``.

    An invalid ``value`` yields ``NaT``. When ``reference`` is naive or
    invalid the result stays naive.
    """
    ref_tz = getattr(reference, "tzinfo", None) if is_valid(reference) else None
    return _coerce(value, ref_tz)


def is_valid(value: Any) -> bool:
    """Check whether ``value`` is a usable date (not None, not NaT)."""
    return isinstance(value, (date, datetime)) and not pd.isna(value)


def calendar_day(value: Any, tz: str | tzinfo | None = None) -> date | None:
    """Return the (year, month, day) of ``value`` as a ``date``, or None."""
    ts = to_date(value, tz=tz)
    if ts is NaT:
        return None
    try:
        return ts.date()
    except NotImplementedError:
        # past year 9999, outside what datetime.date can hold
        return None


def localize(wall: pd.Timestamp, tz: str | tzinfo) -> pd.Timestamp:
    """Attach ``tz`` to a naive wall-clock Timestamp.

    Wall-clock times that fall in a DST gap move forward to the first valid
    instant; repeated times resolve to the first (DST) occurrence.
    """
    return wall.tz_localize(tz, ambiguous=True, nonexistent="shift_forward")


def parse_date_list(text: str | None, tz: str | tzinfo | None = None) -> list[pd.Timestamp]:
    """Parse newline-delimited dates, dropping blank and unparseable lines."""
    if not text:
        return []
    result = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        ts = to_date(line, tz=tz)
        if ts is NaT:
            _log.debug("date_line_dropped", line=lineno, value=line)
            continue
        result.append(ts)
    return result


def _coerce(value: Any, tz: str | tzinfo | None) -> pd.Timestamp:
    """Convert ``value`` into ``tz`` (or leave it as parsed). Never raises on bad data."""
    if value is None or isinstance(value, bool):
        return NaT
    if isinstance(value, numbers.Real):
        return _from_epoch(value, tz)
    if isinstance(value, str):
        value = value.strip()
        if not value or value.lower() in _RELATIVE_WORDS:
            return NaT
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError, OverflowError):
        return NaT
    if pd.isna(ts):
        return NaT
    if tz is None:
        return ts
    if ts.tzinfo is None:
        return localize(ts, tz)
    return ts.tz_convert(tz)


def _from_epoch(value: numbers.Real, tz: str | tzinfo | None) -> pd.Timestamp:
    """Epochs are UTC instants; without a context they become naive UTC wall-clock."""
    if not math.isfinite(value):
        return NaT
    try:
        ts = pd.Timestamp(value, unit=get_timestamp_unit(), tz="UTC")
    except (ValueError, OverflowError):
        return NaT
    if tz is None:
        return ts.tz_localize(None)
    return ts.tz_convert(tz)
