"""Pytest configuration and shared fixtures."""

import pytest

from calgrid import CalendarDate
from calgrid.config import reset_calendar_config


@pytest.fixture(autouse=True)
def reset_calendar_config_for_all_tests():
    """Reset the calendar config before and after each test for isolation.

    The config is a module-level singleton that persists across tests.
    This fixture ensures each test starts with default settings.
    """
    reset_calendar_config()
    yield
    reset_calendar_config()


@pytest.fixture
def today():
    """Fixed 'today' for deterministic item flags."""
    return CalendarDate(2021, 6, 15)


@pytest.fixture
def today_func(today):
    """Callable returning the fixed today."""
    return lambda: today


class RecordingListener:
    """ItemsListener that records every event it receives."""

    def __init__(self):
        self.events = []

    def on_items_reset(self, count):
        self.events.append(("reset", count))

    def on_items_inserted(self, position, count):
        self.events.append(("inserted", position, count))

    def on_item_changed(self, position):
        self.events.append(("changed", position))


@pytest.fixture
def listener():
    """Provide a recording items listener."""
    return RecordingListener()
