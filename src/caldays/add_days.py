"""Add or subtract days, optionally skipping weekends and excluded dates."""

import math
import numbers
from datetime import tzinfo
from typing import Any

import pandas as pd

from caldays.dates import NaT, localize, to_date
from caldays.logging import get_logger
from caldays.options import AddDaysOptions

_log = get_logger(__name__)


def add_days(
    date: Any,
    amount: Any,
    options: AddDaysOptions | None = None,
    **option_kwargs: Any,
) -> pd.Timestamp:
    """Add the specified number of days to the given date.

    Without exclusions this is ordinary calendar addition: the day-of-month
    moves by ``amount`` with month and year rollover, and the local
    wall-clock time is kept across DST transitions. With
    ``exclude_weekends`` or ``excluded_dates`` the result is the
    ``abs(amount)``-th qualifying day walking away from ``date``; the
    starting day itself is never counted.

    Args:
        date: Anything ``to_date`` accepts.
        amount: Days to add, negative to subtract. Fractions are truncated
            toward zero.
        options: An ``AddDaysOptions``. Alternatively pass its fields
            (``exclude_weekends``, ``excluded_dates``, ``tz``) as keywords.

    Returns:
        A new Timestamp, or ``NaT`` if ``date`` or ``amount`` is invalid.

    Example:
        >>> add_days(datetime(2014, 9, 1), 10)
        Timestamp('2014-09-11 00:00:00')
        >>> add_days(datetime(2023, 1, 6), 1, exclude_weekends=True)
        Timestamp('2023-01-09 00:00:00')
    """
    if options is None:
        options = AddDaysOptions(**option_kwargs)
    elif option_kwargs:
        raise TypeError("Pass either options or option keywords, not both")

    start = to_date(date, tz=options.tz)
    if start is NaT:
        _log.debug("invalid_input", reason="date", date=repr(date))
        return NaT

    periods = _coerce_amount(amount)
    if periods is None:
        _log.debug("invalid_input", reason="amount", amount=repr(amount))
        return NaT

    # Fresh copy of the same instant; avoids changing times in the hour before DST ends
    if periods == 0:
        return start + pd.Timedelta(0)

    # Walk in wall-clock time, re-attach the timezone at the end
    tz = start.tzinfo
    wall = start if tz is None else start.tz_localize(None)
    try:
        shifted = options.calendar().dt_offset(wall, periods)
    except (OverflowError, pd.errors.OutOfBoundsDatetime):
        _log.debug("invalid_input", reason="out_of_bounds", date=repr(date), amount=periods)
        return NaT

    return shifted if tz is None else localize(shifted, tz)


def add_business_days(
    date: Any,
    amount: Any,
    tz: str | tzinfo | None = None,
) -> pd.Timestamp:
    """Add the specified number of business days (Mon-Fri) to the given date.

    Same as ``add_days(date, amount, exclude_weekends=True, tz=tz)``.
    """
    return add_days(date, amount, AddDaysOptions(exclude_weekends=True, tz=tz))


def _coerce_amount(amount: Any) -> int | None:
    """Truncate ``amount`` to an int; None if it is not a finite number."""
    if isinstance(amount, numbers.Integral):
        return int(amount)
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return math.trunc(value)
