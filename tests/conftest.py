"""Pytest configuration and shared fixtures."""

import pytest
import structlog

from caldays.config import reset_caldays_config


@pytest.fixture(autouse=True)
def reset_config_for_all_tests():
    """Reset module-level configuration before and after each test.

    The config is a module-level singleton and ``configure_logging`` changes
    global structlog state, so both are restored for isolation.
    """
    reset_caldays_config()
    yield
    reset_caldays_config()
    structlog.reset_defaults()
