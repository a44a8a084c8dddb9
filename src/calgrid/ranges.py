"""Date range holders with explicit unbounded limits."""

from dataclasses import dataclass, replace
from typing import Union

from calgrid.calendar import CalendarDate
from calgrid.validation import validate_limits, validate_range


class Unbounded:
    """Marker for a missing date limit. Use the ``UNBOUNDED`` instance."""

    _instance: "Unbounded | None" = None

    def __new__(cls) -> "Unbounded":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNBOUNDED"

    def __reduce__(self) -> str:
        return "UNBOUNDED"


UNBOUNDED = Unbounded()

DateLimit = Union[CalendarDate, Unbounded]


def is_bounded(limit: DateLimit) -> bool:
    """Check if a limit is a concrete date."""
    return isinstance(limit, CalendarDate)


@dataclass(frozen=True)
class DisplayDatesRange:
    """The currently materialized window of calendar items."""

    date_from: CalendarDate
    date_to: CalendarDate

    def __post_init__(self) -> None:
        validate_range(self.date_from, self.date_to)

    def with_date_from(self, date_from: CalendarDate) -> "DisplayDatesRange":
        return replace(self, date_from=date_from)

    def with_date_to(self, date_to: CalendarDate) -> "DisplayDatesRange":
        return replace(self, date_to=date_to)

    def contains_month(self, year: int, month: int) -> bool:
        first = (self.date_from.year, self.date_from.month)
        last = (self.date_to.year, self.date_to.month)
        return first <= (year, month) <= last


@dataclass(frozen=True)
class MinMaxDatesRange:
    """Hard limits for the calendar, each either a date or ``UNBOUNDED``."""

    min_date: DateLimit = UNBOUNDED
    max_date: DateLimit = UNBOUNDED

    def __post_init__(self) -> None:
        if is_bounded(self.min_date) and is_bounded(self.max_date):
            validate_limits(self.min_date, self.max_date)

    @property
    def has_min(self) -> bool:
        return is_bounded(self.min_date)

    @property
    def has_max(self) -> bool:
        return is_bounded(self.max_date)

    def contains(self, date: CalendarDate) -> bool:
        """Check if date lies within the limits (inclusive)."""
        if self.has_min and date < self.min_date:
            return False
        if self.has_max and date > self.max_date:
            return False
        return True

    def clamp(self, date: CalendarDate) -> CalendarDate:
        """Return the nearest date within the limits."""
        if self.has_min and date < self.min_date:
            return self.min_date
        if self.has_max and date > self.max_date:
            return self.max_date
        return date

    def to_nullable(self) -> "NullableDatesRange":
        return NullableDatesRange(
            date_from=self.min_date if self.has_min else None,
            date_to=self.max_date if self.has_max else None,
        )


@dataclass(frozen=True)
class NullableDatesRange:
    """Host-facing range where None means no limit."""

    date_from: CalendarDate | None = None
    date_to: CalendarDate | None = None

    def to_min_max(self) -> MinMaxDatesRange:
        return MinMaxDatesRange(
            min_date=UNBOUNDED if self.date_from is None else self.date_from,
            max_date=UNBOUNDED if self.date_to is None else self.date_to,
        )
