"""Module-level configuration for caldays defaults."""

import threading
from dataclasses import dataclass
from datetime import tzinfo
from typing import Any

import pandas as pd

TIMESTAMP_UNITS = ("s", "ms", "us", "ns")

_UNSET: Any = object()


@dataclass
class CaldaysConfig:
    """Configuration for caldays defaults."""

    timestamp_unit: str = "ms"  # unit of numeric epoch inputs
    default_tz: str | tzinfo | None = None  # None = naive wall-clock


# Module-level singleton
_caldays_config: CaldaysConfig | None = None
_config_lock = threading.Lock()


def get_caldays_config() -> CaldaysConfig:
    """Get the global caldays configuration singleton."""
    global _caldays_config
    if _caldays_config is None:
        with _config_lock:
            if _caldays_config is None:
                _caldays_config = CaldaysConfig()
    return _caldays_config


def configure_caldays(
    timestamp_unit: str | None = None,
    default_tz: str | tzinfo | None = _UNSET,
) -> None:
    """Configure default caldays settings.

    Args:
        timestamp_unit: Unit used to read numeric timestamps passed as dates.
            One of "s", "ms", "us", "ns". Defaults to "ms".
        default_tz: Timezone context applied when a call does not supply
            one. Pass None to clear it; omit it to leave it unchanged.

    Example:
        from caldays import configure_caldays

        configure_caldays(timestamp_unit="s", default_tz="America/Sao_Paulo")

        # Epoch seconds are now accepted and results are Sao Paulo local
        add_days(1_700_000_000, 3)
    """
    if timestamp_unit is not None and timestamp_unit not in TIMESTAMP_UNITS:
        raise ValueError(
            f"timestamp_unit must be one of {TIMESTAMP_UNITS}, got {timestamp_unit!r}"
        )
    if default_tz is not _UNSET:
        check_tz(default_tz)
    config = get_caldays_config()
    with _config_lock:
        if timestamp_unit is not None:
            config.timestamp_unit = timestamp_unit
        if default_tz is not _UNSET:
            config.default_tz = default_tz


def check_tz(tz: str | tzinfo | None) -> None:
    """Raise ValueError if pandas cannot use ``tz`` as a timezone."""
    if tz is None:
        return
    try:
        pd.Timestamp("2000-01-01").tz_localize(tz)
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {tz!r}") from exc


def get_timestamp_unit() -> str:
    """Get the unit numeric timestamps are read in."""
    return get_caldays_config().timestamp_unit


def get_default_tz() -> str | tzinfo | None:
    """Get the default timezone context."""
    return get_caldays_config().default_tz


def reset_caldays_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _caldays_config
    with _config_lock:
        _caldays_config = CaldaysConfig()
