"""Shift a date column of a DataFrame with ``add_days``."""

from datetime import date, datetime
from typing import Any

import pandas as pd
import polars as pl

from caldays.add_days import add_days
from caldays.dates import is_valid
from caldays.logging import get_logger, timed_block
from caldays.options import AddDaysOptions

_log = get_logger(__name__)


def shift_dates(
    df: Any,
    amount: Any,
    options: AddDaysOptions | None = None,
    column: str = "as_of_date",
    **option_kwargs: Any,
) -> Any:
    """Return a copy of ``df`` with every date in ``column`` moved by ``amount`` days.

    Args:
        df: pandas or polars DataFrame. For pandas, ``column`` may be a
            column or an index level.
        amount: Days to add, as for ``add_days``.
        options: ``AddDaysOptions``, or pass its fields as keywords.
        column: Name of the date column.

    Returns:
        A new DataFrame of the same type. Entries that are null or do not
        resolve to a date become null.

    Raises:
        KeyError: If ``column`` is not in ``df``.
        TypeError: If ``df`` is neither a pandas nor a polars DataFrame.
    """
    if options is None:
        options = AddDaysOptions(**option_kwargs)
    elif option_kwargs:
        raise TypeError("Pass either options or option keywords, not both")

    if isinstance(df, pl.DataFrame):
        return _shift_dates_polars(df, amount, options, column)
    if isinstance(df, pd.DataFrame):
        return _shift_dates_pandas(df, amount, options, column)
    raise TypeError(f"Unknown DataFrame type: {type(df)}")


def _shifter(amount: Any, options: AddDaysOptions):
    """Memoized ``add_days`` for columns with many repeated dates.

    Keys carry type and timezone: equal instants in different zones, or
    ``1`` and ``True``, compare equal but shift differently.
    """
    cache: dict[tuple, pd.Timestamp] = {}

    def shift(value: Any) -> pd.Timestamp:
        key = (type(value), value, getattr(value, "tzinfo", None))
        try:
            return cache[key]
        except KeyError:
            pass
        except TypeError:  # unhashable
            return add_days(value, amount, options)
        cache[key] = result = add_days(value, amount, options)
        return result

    return shift


def _shift_dates_pandas(
    df: pd.DataFrame, amount: Any, options: AddDaysOptions, column: str
) -> pd.DataFrame:
    """Shift dates for pandas DataFrame."""
    index_names = list(df.index.names)
    in_index = column in index_names
    if not in_index and column not in df.columns:
        raise KeyError(f"DataFrame has no column or index level {column!r}")
    if df.empty:
        return df

    shift = _shifter(amount, options)
    with timed_block(_log, "shift_dates", backend="pandas", rows=len(df)):
        # Move only the date level out of the index; other levels, named or not, stay put
        result = df.reset_index(level=column) if in_index else df.copy()
        result[column] = pd.Series(
            [shift(v) if not pd.isna(v) else pd.NaT for v in result[column]],
            index=result.index,
        )
        if in_index:
            result = _restore_level(result, column, index_names.index(column), df.index.nlevels)
    return result


def _shift_dates_polars(df: Any, amount: Any, options: AddDaysOptions, column: str) -> Any:
    """Shift dates for polars DataFrame."""
    if column not in df.columns:
        raise KeyError(f"DataFrame has no column {column!r}")
    if df.height == 0:
        return df

    dtype = df.schema[column]
    keep_dtype = dtype.is_temporal()
    shift = _shifter(amount, options)
    with timed_block(_log, "shift_dates", backend="polars", rows=df.height):
        values = [
            _to_polars_value(shift(v), as_date=dtype == pl.Date) if v is not None else None
            for v in df.get_column(column).to_list()
        ]
        shifted = pl.Series(column, values, dtype=dtype if keep_dtype else None)
        return df.with_columns(shifted)


def _to_polars_value(ts: pd.Timestamp, as_date: bool) -> date | datetime | None:
    if not is_valid(ts):
        return None
    try:
        return ts.date() if as_date else ts.to_pydatetime()
    except (NotImplementedError, ValueError):
        # past year 9999, polars gets a null like any other invalid entry
        return None


def _restore_level(df: pd.DataFrame, column: str, position: int, nlevels: int) -> pd.DataFrame:
    """Put ``column`` back into the index at ``position``."""
    if nlevels == 1:
        return df.set_index(column)
    result = df.set_index(column, append=True)
    # The level was appended last; move it back to where it came from
    order = list(range(nlevels - 1))
    order.insert(position, nlevels - 1)
    return result.reorder_levels(order)
