"""Calendar item generation for month grids."""

import calendar
from typing import Callable

from calgrid.calendar import CalendarDate, date_range, month_starts
from calgrid.config import get_default_first_day_of_week
from calgrid.items import CalendarItem, DayItem, MonthItem
from calgrid.logging import get_logger
from calgrid.ranges import MinMaxDatesRange
from calgrid.validation import validate_range

DAYS_IN_WEEK = 7


class CalendarItemsGenerator:
    """Produces month header and day items for a date window.

    The generator holds no paging state. Its output depends only on the
    requested window, the first day of week, the limits and today's date.
    """

    def __init__(
        self,
        first_day_of_week: int | None = None,
        today: Callable[[], CalendarDate] | None = None,
    ) -> None:
        """Initialize a generator.

        Args:
            first_day_of_week: First weekday of the grid (0 = Monday,
                6 = Sunday). Defaults to the configured first day of week.
            today: Callable returning today's date, used to flag the
                current day. Defaults to CalendarDate.today.
        """
        if first_day_of_week is None:
            first_day_of_week = get_default_first_day_of_week()
        self._first_day_of_week = first_day_of_week
        self._today = today or CalendarDate.today
        self._positioned_days_of_week = list(
            calendar.Calendar(firstweekday=first_day_of_week).iterweekdays()
        )
        self._log = get_logger(__name__, component="generator")

    @property
    def first_day_of_week(self) -> int:
        return self._first_day_of_week

    @property
    def positioned_days_of_week(self) -> list[int]:
        """Weekday numbers in grid column order, starting at the first day of week."""
        return list(self._positioned_days_of_week)

    def month_offset(self, year: int, month: int) -> int:
        """Number of empty grid cells before the first day of the month."""
        weekday = CalendarDate(year, month, 1).day_of_week
        return self._positioned_days_of_week.index(weekday)

    def generate_calendar_items(
        self,
        date_from: CalendarDate,
        date_to: CalendarDate,
        limits: MinMaxDatesRange | None = None,
    ) -> list[CalendarItem]:
        """Generate items for every month touched by [date_from, date_to].

        Each month contributes one MonthItem followed by a DayItem for each of
        its days in ascending order.

        Args:
            date_from: First date of the window (inclusive).
            date_to: Last date of the window (inclusive).
            limits: Min/max limits used to flag days as active. All days are
                active when omitted.

        Returns:
            Chronologically ordered list of items.

        Raises:
            InvalidRangeError: If date_from > date_to
        """
        validate_range(date_from, date_to)
        today = self._today()

        items: list[CalendarItem] = []
        for month_start in month_starts(date_from, date_to):
            items.append(MonthItem(month_start.year, month_start.month))
            for day in date_range(month_start, month_start.last_day_of_month()):
                items.append(
                    DayItem(
                        date=day,
                        is_today=day == today,
                        in_active_range=limits is None or limits.contains(day),
                    )
                )

        self._log.debug(
            "calendar_items_generated",
            date_from=date_from,
            date_to=date_to,
            item_count=len(items),
        )
        return items
