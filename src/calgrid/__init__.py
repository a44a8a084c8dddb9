"""calgrid - Calendar widget core: month item generation, paging and selection."""

from calgrid.adapter import CalendarItemsAdapter, ItemsListener
from calgrid.calendar import CalendarDate, date_range, month_starts
from calgrid.config import (
    CalendarConfig,
    configure_calendar,
    get_calendar_config,
    get_default_first_day_of_week,
    reset_calendar_config,
)
from calgrid.core import CalendarController
from calgrid.generator import DAYS_IN_WEEK, CalendarItemsGenerator
from calgrid.items import CalendarItem, DayItem, MonthItem
from calgrid.logging import configure_logging, get_logger
from calgrid.paging import PageDirection, PageResult, PagingController
from calgrid.ranges import (
    UNBOUNDED,
    DateLimit,
    DisplayDatesRange,
    MinMaxDatesRange,
    NullableDatesRange,
    Unbounded,
    is_bounded,
)
from calgrid.selection import SelectedDatesHolder
from calgrid.state import CalendarState
from calgrid.validation import CalendarError, InvalidRangeError, UnsupportedStateError
from calgrid.year_selection import (
    YearSelectionControl,
    can_select_next_year,
    can_select_prev_year,
)

__all__ = [
    # Primary API - hosts interact with CalendarController
    "CalendarController",
    # Dates and ranges
    "CalendarDate",
    "date_range",
    "month_starts",
    "DateLimit",
    "DisplayDatesRange",
    "MinMaxDatesRange",
    "NullableDatesRange",
    "Unbounded",
    "UNBOUNDED",
    "is_bounded",
    # Items
    "CalendarItem",
    "DayItem",
    "MonthItem",
    "CalendarItemsGenerator",
    "DAYS_IN_WEEK",
    "CalendarItemsAdapter",
    "ItemsListener",
    # Paging
    "PageDirection",
    "PageResult",
    "PagingController",
    # Selection and state
    "SelectedDatesHolder",
    "CalendarState",
    # Year selection
    "YearSelectionControl",
    "can_select_next_year",
    "can_select_prev_year",
    # Errors
    "CalendarError",
    "InvalidRangeError",
    "UnsupportedStateError",
    # Config
    "CalendarConfig",
    "configure_calendar",
    "get_calendar_config",
    "get_default_first_day_of_week",
    "reset_calendar_config",
    # Logging
    "configure_logging",
    "get_logger",
]
__version__ = "0.1.0"
