"""Selected dates tracking."""

from typing import Iterable, Iterator

from calgrid.calendar import CalendarDate


class SelectedDatesHolder:
    """Set of selected dates with a day-key array form for persistence."""

    def __init__(self, dates: Iterable[CalendarDate] = ()) -> None:
        self._dates: set[CalendarDate] = set(dates)

    def add(self, date: CalendarDate) -> None:
        self._dates.add(date)

    def remove(self, date: CalendarDate) -> None:
        self._dates.discard(date)

    def contains(self, date: CalendarDate) -> bool:
        return date in self._dates

    def toggle(self, date: CalendarDate) -> bool:
        """Flip membership of date. Returns True if it is now selected."""
        if date in self._dates:
            self._dates.remove(date)
            return False
        self._dates.add(date)
        return True

    def clear(self) -> None:
        self._dates.clear()

    @property
    def selected_dates(self) -> list[CalendarDate]:
        """Selected dates in ascending order."""
        return sorted(self._dates)

    def to_array(self) -> list[int]:
        """Return ascending day-keys of the selected dates."""
        return sorted(d.day_key for d in self._dates)

    def restore_from_array(self, keys: Iterable[int]) -> None:
        """Replace the selection with the dates encoded by keys."""
        self._dates = {CalendarDate.from_day_key(key) for key in keys}

    def __contains__(self, date: object) -> bool:
        return date in self._dates

    def __iter__(self) -> Iterator[CalendarDate]:
        return iter(self.selected_dates)

    def __len__(self) -> int:
        return len(self._dates)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectedDatesHolder):
            return NotImplemented
        return self._dates == other._dates

    def __repr__(self) -> str:
        return f"SelectedDatesHolder({[str(d) for d in self.selected_dates]})"
