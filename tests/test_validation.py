"""Tests for error types and range validation."""

import pytest

from calgrid import CalendarDate, CalendarError, InvalidRangeError, UnsupportedStateError
from calgrid.validation import validate_limits, validate_range


class TestValidateRange:
    """Test validate_range function."""

    def test_valid_range(self):
        """Ordered range passes."""
        validate_range(CalendarDate(2021, 1, 1), CalendarDate(2021, 2, 1))  # Should not raise

    def test_single_day_range(self):
        """date_from == date_to passes."""
        d = CalendarDate(2021, 1, 1)
        validate_range(d, d)  # Should not raise

    def test_reversed_range(self):
        """date_from > date_to raises InvalidRangeError."""
        with pytest.raises(InvalidRangeError, match="is after date_to"):
            validate_range(CalendarDate(2021, 2, 1), CalendarDate(2021, 1, 1))


class TestValidateLimits:
    """Test validate_limits function."""

    def test_reversed_limits(self):
        """min_date > max_date raises InvalidRangeError."""
        with pytest.raises(InvalidRangeError, match="is after max_date"):
            validate_limits(CalendarDate(2022, 1, 1), CalendarDate(2021, 1, 1))

    def test_equal_limits(self):
        """Equal limits pass."""
        d = CalendarDate(2021, 1, 1)
        validate_limits(d, d)  # Should not raise


class TestErrorHierarchy:
    """Test error class relationships."""

    def test_invalid_range_is_value_error(self):
        """InvalidRangeError can be caught as ValueError."""
        assert issubclass(InvalidRangeError, ValueError)
        assert issubclass(InvalidRangeError, CalendarError)

    def test_unsupported_state_is_calendar_error(self):
        """UnsupportedStateError derives from CalendarError."""
        assert issubclass(UnsupportedStateError, CalendarError)
