"""Module-level configuration for calgrid defaults."""

import calendar
import threading
from dataclasses import dataclass

DEFAULT_MONTHS_PER_PAGE = 6
DEFAULT_SCROLL_THRESHOLD = 42  # six grid rows of seven days


@dataclass
class CalendarConfig:
    """Configuration for calendar defaults."""

    months_per_page: int = DEFAULT_MONTHS_PER_PAGE
    scroll_threshold: int = DEFAULT_SCROLL_THRESHOLD
    first_day_of_week: int | None = None  # None = calendar.firstweekday()


# Module-level singleton
_calendar_config: CalendarConfig | None = None
_config_lock = threading.Lock()


def get_calendar_config() -> CalendarConfig:
    """Get the global calendar configuration singleton."""
    global _calendar_config
    if _calendar_config is None:
        with _config_lock:
            if _calendar_config is None:
                _calendar_config = CalendarConfig()
    return _calendar_config


def configure_calendar(
    months_per_page: int | None = None,
    scroll_threshold: int | None = None,
    first_day_of_week: int | None = None,
) -> None:
    """Configure default calendar settings.

    Args:
        months_per_page: Number of months generated by one paging step.
        scroll_threshold: Distance in items from either end of the list at
            which the next page is requested.
        first_day_of_week: First weekday of the grid, 0 (Monday) to
            6 (Sunday), following the ``calendar`` module convention.

    Raises:
        ValueError: If a value is out of range.

    Example:
        from calgrid import configure_calendar

        # Sunday-first grid, larger pages
        configure_calendar(first_day_of_week=6, months_per_page=12)
    """
    if months_per_page is not None:
        _check_months_per_page(months_per_page)
    if scroll_threshold is not None:
        _check_scroll_threshold(scroll_threshold)
    if first_day_of_week is not None and not 0 <= first_day_of_week <= 6:
        raise ValueError(
            f"first_day_of_week must be between 0 and 6, got {first_day_of_week}"
        )

    config = get_calendar_config()
    with _config_lock:
        if months_per_page is not None:
            config.months_per_page = months_per_page
        if scroll_threshold is not None:
            config.scroll_threshold = scroll_threshold
        if first_day_of_week is not None:
            config.first_day_of_week = first_day_of_week


def get_default_first_day_of_week() -> int:
    """Get the default first day of week."""
    config = get_calendar_config()
    if config.first_day_of_week is not None:
        return config.first_day_of_week
    return calendar.firstweekday()


def reset_calendar_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _calendar_config
    with _config_lock:
        _calendar_config = CalendarConfig()


def resolve_months_per_page(months_per_page: int | None = None) -> int:
    """Return an explicit months-per-page override, or the configured default.

    Raises:
        ValueError: If the override is not positive.
    """
    if months_per_page is None:
        return get_calendar_config().months_per_page
    return _check_months_per_page(months_per_page)


def resolve_scroll_threshold(scroll_threshold: int | None = None) -> int:
    """Return an explicit scroll threshold override, or the configured default.

    Raises:
        ValueError: If the override is negative.
    """
    if scroll_threshold is None:
        return get_calendar_config().scroll_threshold
    return _check_scroll_threshold(scroll_threshold)


def _check_months_per_page(months_per_page: int) -> int:
    if months_per_page < 1:
        raise ValueError(f"months_per_page must be positive, got {months_per_page}")
    return months_per_page


def _check_scroll_threshold(scroll_threshold: int) -> int:
    if scroll_threshold < 0:
        raise ValueError(
            f"scroll_threshold must not be negative, got {scroll_threshold}"
        )
    return scroll_threshold
