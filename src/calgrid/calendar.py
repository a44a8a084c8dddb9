"""Day-precision calendar date used throughout calgrid."""

from calendar import monthrange
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator

from dateutil.relativedelta import relativedelta

_EPOCH_ORDINAL = date(1970, 1, 1).toordinal()


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Immutable calendar day ordered by (year, month, day).

    Month arithmetic clamps the day to the last day of the target month,
    so ``CalendarDate(2021, 1, 31).plus_months(1)`` is Feb 28, 2021.
    """

    year: int
    month: int
    day: int

    MONTHS_IN_YEAR = 12

    def __post_init__(self) -> None:
        # Raises ValueError for impossible days
        date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: date | datetime) -> "CalendarDate":
        """Build from a datetime.date or datetime.datetime (time is dropped)."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> "CalendarDate":
        return cls.from_date(date.today())

    @classmethod
    def from_day_key(cls, key: int) -> "CalendarDate":
        """Inverse of ``day_key``."""
        return cls.from_date(date.fromordinal(_EPOCH_ORDINAL + key))

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def day_key(self) -> int:
        """Days since 1970-01-01."""
        return self.to_date().toordinal() - _EPOCH_ORDINAL

    @property
    def day_of_week(self) -> int:
        """Weekday, Monday is 0 and Sunday is 6."""
        return self.to_date().weekday()

    @property
    def days_in_month(self) -> int:
        return monthrange(self.year, self.month)[1]

    def first_day_of_month(self) -> "CalendarDate":
        return CalendarDate(self.year, self.month, 1)

    def last_day_of_month(self) -> "CalendarDate":
        return CalendarDate(self.year, self.month, self.days_in_month)

    def plus_months(self, months: int) -> "CalendarDate":
        return CalendarDate.from_date(self.to_date() + relativedelta(months=months))

    def minus_months(self, months: int) -> "CalendarDate":
        return self.plus_months(-months)

    def plus_days(self, days: int) -> "CalendarDate":
        return CalendarDate.from_date(self.to_date() + timedelta(days=days))

    def same_month(self, other: "CalendarDate") -> bool:
        return (self.year, self.month) == (other.year, other.month)

    def __str__(self) -> str:
        return self.to_date().isoformat()


def date_range(start: CalendarDate, end: CalendarDate) -> Iterator[CalendarDate]:
    """Generate every day in [start, end]."""
    current = start.to_date()
    last = end.to_date()
    while current <= last:
        yield CalendarDate.from_date(current)
        current += timedelta(days=1)


def month_starts(start: CalendarDate, end: CalendarDate) -> Iterator[CalendarDate]:
    """Generate the first day of every month touched by [start, end]."""
    current = start.first_day_of_month()
    last = end.first_day_of_month()
    while current <= last:
        yield current
        current = current.plus_months(1)
