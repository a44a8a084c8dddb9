"""Calendar error types and range validation."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calgrid.calendar import CalendarDate


class CalendarError(Exception):
    """Base class for calgrid errors."""
    pass


class InvalidRangeError(CalendarError, ValueError):
    """Raised when a range starts after it ends."""
    pass


class UnsupportedStateError(CalendarError):
    """Raised when persisted calendar state cannot be restored."""
    pass


def validate_range(date_from: "CalendarDate", date_to: "CalendarDate") -> None:
    """Validate that date_from is not after date_to.

    Raises:
        InvalidRangeError: If date_from > date_to
    """
    if date_from > date_to:
        raise InvalidRangeError(
            f"date_from {date_from} is after date_to {date_to}"
        )


def validate_limits(min_date: "CalendarDate", max_date: "CalendarDate") -> None:
    """Validate that min_date is not after max_date.

    Raises:
        InvalidRangeError: If min_date > max_date
    """
    if min_date > max_date:
        raise InvalidRangeError(
            f"min_date {min_date} is after max_date {max_date}"
        )
