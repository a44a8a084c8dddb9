"""Year selection control layered on CalendarDate."""

from typing import Callable

from calgrid.calendar import CalendarDate
from calgrid.logging import get_logger
from calgrid.ranges import MinMaxDatesRange


def can_select_prev_year(year: int, limits: MinMaxDatesRange) -> bool:
    """Check if the year before ``year`` is within the limits."""
    return not limits.has_min or limits.min_date.year <= year - 1


def can_select_next_year(year: int, limits: MinMaxDatesRange) -> bool:
    """Check if the year after ``year`` is within the limits."""
    return not limits.has_max or limits.max_date.year >= year + 1


class YearSelectionControl:
    """Holds the displayed year and moves it one year at a time.

    A move that would cross a limit lands on the limit's exact date instead.
    Listeners hear about a move only when the year actually changes.
    """

    def __init__(
        self,
        displayed_date: CalendarDate | None = None,
        limits: MinMaxDatesRange | None = None,
        on_year_change: Callable[[CalendarDate], None] | None = None,
        on_year_click: Callable[[int], None] | None = None,
    ) -> None:
        self._limits = limits or MinMaxDatesRange()
        self._displayed_date = displayed_date or CalendarDate.today()
        self.on_year_change = on_year_change
        self.on_year_click = on_year_click
        self._log = get_logger(__name__, component="year_selection")

    def setup(self, displayed_date: CalendarDate, limits: MinMaxDatesRange) -> None:
        """Set the displayed date and limits without emitting events."""
        self._limits = limits
        self._displayed_date = displayed_date

    @property
    def displayed_date(self) -> CalendarDate:
        return self._displayed_date

    @property
    def displayed_year(self) -> int:
        return self._displayed_date.year

    @property
    def limits(self) -> MinMaxDatesRange:
        return self._limits

    @property
    def is_prev_enabled(self) -> bool:
        return can_select_prev_year(self.displayed_year, self._limits)

    @property
    def is_next_enabled(self) -> bool:
        return can_select_next_year(self.displayed_year, self._limits)

    def prev(self) -> bool:
        """Move one year back. Returns True if the year changed."""
        if not self.is_prev_enabled:
            return False
        target = self._displayed_date.minus_months(CalendarDate.MONTHS_IN_YEAR)
        if self._limits.has_min and target < self._limits.min_date:
            target = self._limits.min_date
        return self._move_to(target)

    def next(self) -> bool:
        """Move one year forward. Returns True if the year changed."""
        if not self.is_next_enabled:
            return False
        target = self._displayed_date.plus_months(CalendarDate.MONTHS_IN_YEAR)
        if self._limits.has_max and target > self._limits.max_date:
            target = self._limits.max_date
        return self._move_to(target)

    def click(self) -> None:
        """Report a tap on the displayed year."""
        if self.on_year_click is not None:
            self.on_year_click(self.displayed_year)

    def _move_to(self, target: CalendarDate) -> bool:
        old_year = self.displayed_year
        self._displayed_date = target
        if target.year == old_year:
            return False
        self._log.debug("year_changed", old_year=old_year, new_year=target.year)
        if self.on_year_change is not None:
            self.on_year_change(target)
        return True
