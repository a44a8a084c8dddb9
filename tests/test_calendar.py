"""Tests for CalendarDate and day iteration."""

from datetime import date, datetime

import pytest

from calgrid import CalendarDate, date_range, month_starts


class TestCalendarDate:
    """Test CalendarDate value semantics."""

    def test_fields(self):
        """Exposes year, month and day."""
        d = CalendarDate(2021, 3, 9)

        assert (d.year, d.month, d.day) == (2021, 3, 9)

    def test_invalid_day_raises(self):
        """Impossible days are rejected."""
        with pytest.raises(ValueError):
            CalendarDate(2021, 2, 29)

    def test_from_date_and_datetime(self):
        """Builds from date or datetime, dropping the time."""
        assert CalendarDate.from_date(date(2024, 1, 5)) == CalendarDate(2024, 1, 5)
        assert CalendarDate.from_date(datetime(2024, 1, 5, 23, 59)) == CalendarDate(2024, 1, 5)

    def test_to_date(self):
        """Converts back to datetime.date."""
        assert CalendarDate(2024, 1, 5).to_date() == date(2024, 1, 5)

    def test_total_order(self):
        """Ordering follows (year, month, day)."""
        dates = [
            CalendarDate(2021, 1, 2),
            CalendarDate(2020, 12, 31),
            CalendarDate(2021, 1, 1),
            CalendarDate(2020, 2, 29),
        ]

        assert sorted(dates) == [
            CalendarDate(2020, 2, 29),
            CalendarDate(2020, 12, 31),
            CalendarDate(2021, 1, 1),
            CalendarDate(2021, 1, 2),
        ]
        assert CalendarDate(2021, 1, 1) <= CalendarDate(2021, 1, 1)
        assert CalendarDate(2021, 1, 1) > CalendarDate(2020, 12, 31)

    def test_hashable(self):
        """Equal dates hash equally."""
        assert len({CalendarDate(2021, 1, 1), CalendarDate(2021, 1, 1)}) == 1

    def test_str_is_iso(self):
        """str() gives the ISO format."""
        assert str(CalendarDate(2021, 3, 9)) == "2021-03-09"

    def test_day_of_week(self):
        """Monday is 0, Sunday is 6."""
        assert CalendarDate(2024, 1, 1).day_of_week == 0
        assert CalendarDate(2024, 1, 7).day_of_week == 6

    def test_days_in_month(self):
        """Month length accounts for leap years."""
        assert CalendarDate(2020, 2, 10).days_in_month == 29
        assert CalendarDate(2021, 2, 10).days_in_month == 28
        assert CalendarDate(2021, 4, 10).days_in_month == 30

    def test_first_and_last_day_of_month(self):
        """Month boundaries of a date."""
        d = CalendarDate(2021, 4, 17)

        assert d.first_day_of_month() == CalendarDate(2021, 4, 1)
        assert d.last_day_of_month() == CalendarDate(2021, 4, 30)


class TestMonthArithmetic:
    """Test plus_months/minus_months clamping."""

    def test_plus_months_clamps_to_month_end(self):
        """Jan 31 + 1 month is the last day of February."""
        assert CalendarDate(2021, 1, 31).plus_months(1) == CalendarDate(2021, 2, 28)

    def test_plus_months_leap_year(self):
        """Clamping lands on Feb 29 in leap years."""
        assert CalendarDate(2020, 1, 31).plus_months(1) == CalendarDate(2020, 2, 29)

    def test_plus_months_crosses_year(self):
        """Adding months rolls over the year."""
        assert CalendarDate(2021, 11, 15).plus_months(3) == CalendarDate(2022, 2, 15)

    def test_minus_months_clamps(self):
        """Mar 31 - 1 month is the last day of February."""
        assert CalendarDate(2021, 3, 31).minus_months(1) == CalendarDate(2021, 2, 28)

    def test_minus_months_crosses_year(self):
        """Subtracting months rolls back the year."""
        assert CalendarDate(2021, 2, 10).minus_months(6) == CalendarDate(2020, 8, 10)

    def test_twelve_months_from_leap_day(self):
        """A year after Feb 29 is Feb 28."""
        d = CalendarDate(2020, 2, 29)

        assert d.plus_months(CalendarDate.MONTHS_IN_YEAR) == CalendarDate(2021, 2, 28)

    def test_zero_months(self):
        """Adding zero months returns an equal date."""
        d = CalendarDate(2021, 5, 5)

        assert d.plus_months(0) == d

    def test_plus_days(self):
        """plus_days crosses month boundaries."""
        assert CalendarDate(2021, 1, 31).plus_days(1) == CalendarDate(2021, 2, 1)
        assert CalendarDate(2021, 3, 1).plus_days(-1) == CalendarDate(2021, 2, 28)


class TestDayKey:
    """Test day-key encoding."""

    def test_epoch_is_zero(self):
        """1970-01-01 encodes to 0."""
        assert CalendarDate(1970, 1, 1).day_key == 0

    def test_known_values(self):
        """Day-keys count days since the epoch."""
        assert CalendarDate(1970, 1, 11).day_key == 10
        assert CalendarDate(2000, 1, 1).day_key == 10957
        assert CalendarDate(1969, 12, 31).day_key == -1

    def test_from_day_key(self):
        """from_day_key inverts day_key."""
        d = CalendarDate(2021, 6, 15)

        assert CalendarDate.from_day_key(d.day_key) == d

    def test_day_key_preserves_order(self):
        """Later dates have larger keys."""
        assert CalendarDate(2021, 1, 1).day_key < CalendarDate(2021, 1, 2).day_key


class TestDateRange:
    """Test day and month iteration helpers."""

    def test_date_range_inclusive(self):
        """date_range yields every day including both ends."""
        days = list(date_range(CalendarDate(2021, 2, 27), CalendarDate(2021, 3, 2)))

        assert days == [
            CalendarDate(2021, 2, 27),
            CalendarDate(2021, 2, 28),
            CalendarDate(2021, 3, 1),
            CalendarDate(2021, 3, 2),
        ]

    def test_date_range_empty_when_reversed(self):
        """A reversed window yields nothing."""
        assert list(date_range(CalendarDate(2021, 3, 2), CalendarDate(2021, 3, 1))) == []

    def test_month_starts(self):
        """month_starts yields the first day of each touched month."""
        starts = list(month_starts(CalendarDate(2020, 11, 30), CalendarDate(2021, 2, 1)))

        assert starts == [
            CalendarDate(2020, 11, 1),
            CalendarDate(2020, 12, 1),
            CalendarDate(2021, 1, 1),
            CalendarDate(2021, 2, 1),
        ]

    def test_month_starts_single_month(self):
        """Window within one month yields that month."""
        starts = list(month_starts(CalendarDate(2021, 5, 3), CalendarDate(2021, 5, 20)))

        assert starts == [CalendarDate(2021, 5, 1)]
