"""Displayable calendar items."""

from dataclasses import dataclass
from typing import Union

from calgrid.calendar import CalendarDate


@dataclass(frozen=True)
class MonthItem:
    """Header row for a month."""

    year: int
    month: int


@dataclass(frozen=True)
class DayItem:
    """A single day cell."""

    date: CalendarDate
    is_today: bool = False
    in_active_range: bool = True


CalendarItem = Union[MonthItem, DayItem]
