"""caldays - Calendar day arithmetic with weekend and holiday skipping."""

from caldays.add_days import add_business_days, add_days
from caldays.calendar import BDateCalendar, Calendar, DateCalendar, ExcludedDatesCalendar
from caldays.config import (
    configure_caldays,
    get_caldays_config,
    get_default_tz,
    get_timestamp_unit,
    reset_caldays_config,
)
from caldays.dates import (
    NaT,
    calendar_day,
    construct_from,
    is_valid,
    parse_date_list,
    to_date,
)
from caldays.frames import shift_dates
from caldays.logging import configure_logging, get_logger
from caldays.options import AddDaysOptions

__all__ = [
    # Primary API
    "add_days",
    "add_business_days",
    "AddDaysOptions",
    # Calendar
    "Calendar",
    "BDateCalendar",
    "DateCalendar",
    "ExcludedDatesCalendar",
    # Dates
    "NaT",
    "calendar_day",
    "construct_from",
    "is_valid",
    "parse_date_list",
    "to_date",
    # DataFrames
    "shift_dates",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "configure_caldays",
    "get_caldays_config",
    "get_default_tz",
    "get_timestamp_unit",
    "reset_caldays_config",
]
__version__ = "0.1.0"
