"""Calendar widget state and its persisted form."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from calgrid.calendar import CalendarDate
from calgrid.ranges import (
    UNBOUNDED,
    DateLimit,
    DisplayDatesRange,
    MinMaxDatesRange,
    is_bounded,
)
from calgrid.selection import SelectedDatesHolder
from calgrid.validation import CalendarError, UnsupportedStateError


@dataclass
class CalendarState:
    """Mutable state owned by one calendar controller.

    The paging controller replaces ``display_dates_range`` as pages are
    generated. ``min_max_dates_range`` is fixed at setup.
    """

    display_dates_range: DisplayDatesRange
    min_max_dates_range: MinMaxDatesRange = field(default_factory=MinMaxDatesRange)
    selected_dates: SelectedDatesHolder = field(default_factory=SelectedDatesHolder)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict of day-keys.

        Unbounded limits are stored as None.
        """
        limits = self.min_max_dates_range
        return {
            "display_dates_range": {
                "date_from": self.display_dates_range.date_from.day_key,
                "date_to": self.display_dates_range.date_to.day_key,
            },
            "min_max_dates_range": {
                "min_date": _limit_to_key(limits.min_date),
                "max_date": _limit_to_key(limits.max_date),
            },
            "selected_date_keys": self.selected_dates.to_array(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CalendarState":
        """Rebuild state from ``to_dict`` output.

        Raises:
            UnsupportedStateError: If data is malformed or its ranges are
                inconsistent (reversed, or a display window outside the limits).
        """
        try:
            _check_mapping(data, "state")
            display = _check_mapping(data["display_dates_range"], "display_dates_range")
            limits_data = _check_mapping(
                data["min_max_dates_range"], "min_max_dates_range"
            )
            display_range = DisplayDatesRange(
                date_from=_date_from_key(display["date_from"]),
                date_to=_date_from_key(display["date_to"]),
            )
            limits = MinMaxDatesRange(
                min_date=_limit_from_key(limits_data.get("min_date")),
                max_date=_limit_from_key(limits_data.get("max_date")),
            )
            selected = SelectedDatesHolder()
            selected.restore_from_array(
                _check_key(key) for key in data.get("selected_date_keys", [])
            )
        except (KeyError, TypeError, ValueError, OverflowError, CalendarError) as e:
            raise UnsupportedStateError(f"Cannot restore calendar state: {e}") from e

        if limits.has_min and display_range.date_from < limits.min_date.first_day_of_month():
            raise UnsupportedStateError(
                f"display_dates_range starts before min_date {limits.min_date}"
            )
        if limits.has_max and display_range.date_to > limits.max_date.last_day_of_month():
            raise UnsupportedStateError(
                f"display_dates_range ends after max_date {limits.max_date}"
            )

        return cls(
            display_dates_range=display_range,
            min_max_dates_range=limits,
            selected_dates=selected,
        )


def _check_mapping(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(f"{name} must be a mapping, got {type(value).__name__}")
    return value


def _check_key(key: Any) -> int:
    # bool is an int subclass but never a valid key
    if isinstance(key, bool) or not isinstance(key, int):
        raise TypeError(f"Day-key must be an int, got {key!r}")
    return key


def _date_from_key(key: Any) -> CalendarDate:
    return CalendarDate.from_day_key(_check_key(key))


def _limit_to_key(limit: DateLimit) -> int | None:
    return limit.day_key if is_bounded(limit) else None


def _limit_from_key(key: Any) -> DateLimit:
    if key is None:
        return UNBOUNDED
    return _date_from_key(key)
