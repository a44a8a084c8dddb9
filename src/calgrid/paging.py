"""Scroll-driven paging of calendar items."""

from typing import Literal, NamedTuple

from calgrid.adapter import CalendarItemsAdapter
from calgrid.calendar import CalendarDate
from calgrid.config import resolve_months_per_page, resolve_scroll_threshold
from calgrid.generator import CalendarItemsGenerator
from calgrid.logging import get_logger, timed_block
from calgrid.state import CalendarState

PageDirection = Literal["prev", "next"]


class PageResult(NamedTuple):
    """Result of one paging step, reported so the host can keep its scroll anchor."""

    direction: PageDirection
    position: int
    count: int
    date_from: CalendarDate
    date_to: CalendarDate


def _month_index(date: CalendarDate) -> int:
    return date.year * CalendarDate.MONTHS_IN_YEAR + date.month - 1


class PagingController:
    """Extends the materialized item list as the user nears either end.

    A page is ``months_per_page`` whole months placed directly before the
    current ``date_from`` or after the current ``date_to``. Pages never reach
    past a bound limit; once the limit's month is materialized the trigger is a
    no-op. While a page for a direction is being spliced, further triggers for
    that direction are suppressed.
    """

    def __init__(
        self,
        state: CalendarState,
        generator: CalendarItemsGenerator,
        adapter: CalendarItemsAdapter,
        months_per_page: int | None = None,
        scroll_threshold: int | None = None,
    ) -> None:
        """Initialize a paging controller.

        Args:
            state: Shared calendar state. ``display_dates_range`` is replaced
                on every generated page.
            generator: Generator used to build pages.
            adapter: Item list receiving the pages.
            months_per_page: Months per page. Defaults to config.
            scroll_threshold: Items from either end at which ``on_scrolled``
                requests a page. Defaults to config.
        """
        self._state = state
        self._generator = generator
        self._adapter = adapter
        self._months_per_page = resolve_months_per_page(months_per_page)
        self._scroll_threshold = resolve_scroll_threshold(scroll_threshold)
        self._in_flight: set[PageDirection] = set()
        self._log = get_logger(__name__, component="paging")

    @property
    def months_per_page(self) -> int:
        return self._months_per_page

    @property
    def scroll_threshold(self) -> int:
        return self._scroll_threshold

    def is_in_flight(self, direction: PageDirection) -> bool:
        return direction in self._in_flight

    def can_generate_prev(self) -> bool:
        limits = self._state.min_max_dates_range
        if not limits.has_min:
            return True
        date_from = self._state.display_dates_range.date_from
        return _month_index(limits.min_date) < _month_index(date_from)

    def can_generate_next(self) -> bool:
        limits = self._state.min_max_dates_range
        if not limits.has_max:
            return True
        date_to = self._state.display_dates_range.date_to
        return _month_index(limits.max_date) > _month_index(date_to)

    def generate_prev_page(self) -> PageResult | None:
        """Prepend the page before the current window.

        Returns:
            PageResult, or None if the min limit is reached or a previous page
            is still being spliced.
        """
        if not self._begin("prev"):
            return None
        try:
            if not self.can_generate_prev():
                self._log.debug(
                    "page_skipped_at_bound",
                    direction="prev",
                    bound=self._state.min_max_dates_range.min_date,
                )
                return None

            limits = self._state.min_max_dates_range
            current_from = self._state.display_dates_range.date_from
            date_to = current_from.minus_months(1)
            date_from = current_from.minus_months(self._months_per_page)
            if limits.has_min:
                date_from = max(date_from, limits.min_date)
                date_to = max(date_to, limits.min_date)

            with timed_block(
                self._log, "page_generated", direction="prev",
                date_from=date_from, date_to=date_to,
            ) as log_fields:
                items = self._generator.generate_calendar_items(
                    date_from, date_to, limits=limits
                )
                log_fields["count"] = len(items)
                self._state.display_dates_range = (
                    self._state.display_dates_range.with_date_from(date_from)
                )
                position = self._adapter.add_prev_items(items)

            return PageResult("prev", position, len(items), date_from, date_to)
        finally:
            self._in_flight.discard("prev")

    def generate_next_page(self) -> PageResult | None:
        """Append the page after the current window.

        Returns:
            PageResult, or None if the max limit is reached or a previous page
            is still being spliced.
        """
        if not self._begin("next"):
            return None
        try:
            if not self.can_generate_next():
                self._log.debug(
                    "page_skipped_at_bound",
                    direction="next",
                    bound=self._state.min_max_dates_range.max_date,
                )
                return None

            limits = self._state.min_max_dates_range
            current_to = self._state.display_dates_range.date_to
            date_from = current_to.plus_months(1)
            date_to = current_to.plus_months(self._months_per_page)
            if limits.has_max:
                date_from = min(date_from, limits.max_date)
                date_to = min(date_to, limits.max_date)

            with timed_block(
                self._log, "page_generated", direction="next",
                date_from=date_from, date_to=date_to,
            ) as log_fields:
                items = self._generator.generate_calendar_items(
                    date_from, date_to, limits=limits
                )
                log_fields["count"] = len(items)
                self._state.display_dates_range = (
                    self._state.display_dates_range.with_date_to(date_to)
                )
                position = self._adapter.add_next_items(items)

            return PageResult("next", position, len(items), date_from, date_to)
        finally:
            self._in_flight.discard("next")

    def extend_to(self, date: CalendarDate) -> PageResult | None:
        """Grow the window so that the month of date is materialized.

        The date is clamped to the limits first. The gap between the window
        and the date is generated as a single batch.

        Returns:
            PageResult, or None if the month is already materialized or a page
            in that direction is still being spliced.
        """
        limits = self._state.min_max_dates_range
        target = limits.clamp(date)
        display = self._state.display_dates_range

        if _month_index(target) < _month_index(display.date_from):
            direction: PageDirection = "prev"
            date_from, date_to = target, max(target, display.date_from.minus_months(1))
        elif _month_index(target) > _month_index(display.date_to):
            direction = "next"
            date_from, date_to = min(target, display.date_to.plus_months(1)), target
        else:
            return None

        if not self._begin(direction):
            return None
        try:
            with timed_block(
                self._log, "window_extended", direction=direction, target=target,
            ) as log_fields:
                items = self._generator.generate_calendar_items(
                    date_from, date_to, limits=limits
                )
                log_fields["count"] = len(items)
                if direction == "prev":
                    self._state.display_dates_range = display.with_date_from(date_from)
                    position = self._adapter.add_prev_items(items)
                else:
                    self._state.display_dates_range = display.with_date_to(date_to)
                    position = self._adapter.add_next_items(items)
            return PageResult(direction, position, len(items), date_from, date_to)
        finally:
            self._in_flight.discard(direction)

    def on_scrolled(self, first_visible: int, last_visible: int) -> list[PageResult]:
        """Request pages when the visible range is near either end of the list.

        Args:
            first_visible: Position of the first visible item.
            last_visible: Position of the last visible item.

        Returns:
            Pages generated by this scroll event, in order.
        """
        results: list[PageResult] = []
        if first_visible <= self._scroll_threshold:
            result = self.generate_prev_page()
            if result is not None:
                results.append(result)
                # Prepending shifts every visible position
                last_visible += result.count

        remaining = self._adapter.item_count - 1 - last_visible
        if remaining <= self._scroll_threshold:
            result = self.generate_next_page()
            if result is not None:
                results.append(result)
        return results

    def _begin(self, direction: PageDirection) -> bool:
        if direction in self._in_flight:
            self._log.debug("page_request_suppressed", direction=direction)
            return False
        self._in_flight.add(direction)
        return True
