"""Materialized calendar item list with splice notifications."""

from typing import Iterable, Protocol

from calgrid.calendar import CalendarDate
from calgrid.generator import DAYS_IN_WEEK
from calgrid.items import CalendarItem, DayItem, MonthItem
from calgrid.logging import get_logger


class ItemsListener(Protocol):
    """Receives index-based change events for the rendered list."""

    def on_items_reset(self, count: int) -> None: ...

    def on_items_inserted(self, position: int, count: int) -> None: ...

    def on_item_changed(self, position: int) -> None: ...


class CalendarItemsAdapter:
    """Ordered list of calendar items shown by the host.

    The host renders items by position. Every mutation is reported to the
    registered listeners synchronously, before the mutating call returns.
    """

    def __init__(self) -> None:
        self._items: list[CalendarItem] = []
        self._listeners: list[ItemsListener] = []
        self._log = get_logger(__name__, component="adapter")

    def add_listener(self, listener: ItemsListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ItemsListener) -> None:
        self._listeners.remove(listener)

    @property
    def items(self) -> list[CalendarItem]:
        return list(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, position: int) -> CalendarItem:
        return self._items[position]

    def set_items(self, items: Iterable[CalendarItem]) -> None:
        """Replace all items."""
        self._items = list(items)
        self._log.debug("items_reset", count=len(self._items))
        for listener in self._listeners:
            listener.on_items_reset(len(self._items))

    def add_prev_items(self, items: Iterable[CalendarItem]) -> int:
        """Prepend items. Returns the insert position (always 0)."""
        new_items = list(items)
        self._items[0:0] = new_items
        self._notify_inserted(0, len(new_items))
        return 0

    def add_next_items(self, items: Iterable[CalendarItem]) -> int:
        """Append items. Returns the insert position."""
        new_items = list(items)
        position = len(self._items)
        self._items.extend(new_items)
        self._notify_inserted(position, len(new_items))
        return position

    def notify_item_changed(self, position: int) -> None:
        for listener in self._listeners:
            listener.on_item_changed(position)

    def find_month_position(self, year: int, month: int) -> int | None:
        """Position of the month header, or None if not materialized."""
        for position, item in enumerate(self._items):
            if isinstance(item, MonthItem) and (item.year, item.month) == (year, month):
                return position
        return None

    def find_day_position(self, date: CalendarDate) -> int | None:
        """Position of the day item for date, or None if not materialized."""
        month_position = self.find_month_position(date.year, date.month)
        if month_position is None:
            return None
        return month_position + date.day

    def span_size(self, position: int) -> int:
        """Grid columns occupied by the item: a month header fills a row."""
        if isinstance(self._items[position], MonthItem):
            return DAYS_IN_WEEK
        return 1

    def day_item(self, position: int) -> DayItem | None:
        item = self._items[position]
        return item if isinstance(item, DayItem) else None

    def _notify_inserted(self, position: int, count: int) -> None:
        self._log.debug("items_inserted", position=position, count=count)
        if count == 0:
            return
        for listener in self._listeners:
            listener.on_items_inserted(position, count)
