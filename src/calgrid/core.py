"""Main CalendarController class for the calendar widget core."""

from datetime import date
from typing import Any, Callable

from calgrid.adapter import CalendarItemsAdapter
from calgrid.calendar import CalendarDate
from calgrid.config import resolve_months_per_page, resolve_scroll_threshold
from calgrid.generator import CalendarItemsGenerator
from calgrid.items import CalendarItem
from calgrid.logging import get_logger
from calgrid.paging import PageResult, PagingController
from calgrid.ranges import DisplayDatesRange, MinMaxDatesRange, UNBOUNDED
from calgrid.selection import SelectedDatesHolder
from calgrid.state import CalendarState
from calgrid.validation import UnsupportedStateError, validate_limits
from calgrid.year_selection import YearSelectionControl

DateLike = CalendarDate | date


def _to_calendar_date(value: DateLike | None) -> CalendarDate | None:
    if value is None or isinstance(value, CalendarDate):
        return value
    return CalendarDate.from_date(value)


class CalendarController:
    """Calendar widget core driven by the host UI.

    Owns the calendar state, the item list shown by the host, the selection
    and the year selection control. The host calls ``setup`` once, forwards
    scroll and tap events, and renders the positions reported through
    ``adapter`` listeners.
    """

    def __init__(
        self,
        first_day_of_week: int | None = None,
        months_per_page: int | None = None,
        scroll_threshold: int | None = None,
        today: Callable[[], CalendarDate] | None = None,
        on_year_click: Callable[[int], None] | None = None,
    ) -> None:
        """Initialize a CalendarController.

        Args:
            first_day_of_week: First weekday of the grid (0 = Monday,
                6 = Sunday). Defaults to config.
            months_per_page: Months generated per paging step and around the
                initial date. Defaults to config.
            scroll_threshold: Items from either end at which a page is
                requested by ``on_scrolled``. Defaults to config.
            today: Callable returning today's date. Defaults to
                CalendarDate.today.
            on_year_click: Host callback invoked with the year when the year
                header is tapped.

        Raises:
            ValueError: If months_per_page is not positive or scroll_threshold
                is negative.
        """
        self._today = today or CalendarDate.today
        self._months_per_page = resolve_months_per_page(months_per_page)
        self._scroll_threshold = resolve_scroll_threshold(scroll_threshold)
        self._generator = CalendarItemsGenerator(first_day_of_week, today=self._today)
        self._adapter = CalendarItemsAdapter()
        self._year_selection = YearSelectionControl(
            displayed_date=self._today(),
            on_year_change=self.on_year_changed,
            on_year_click=self.on_year_header_tapped,
        )
        self.on_year_click = on_year_click
        self._state: CalendarState | None = None
        self._paging: PagingController | None = None
        self._log = get_logger(__name__, component="controller")

    @property
    def is_initialized(self) -> bool:
        return self._state is not None

    @property
    def adapter(self) -> CalendarItemsAdapter:
        return self._adapter

    @property
    def generator(self) -> CalendarItemsGenerator:
        return self._generator

    @property
    def year_selection(self) -> YearSelectionControl:
        return self._year_selection

    @property
    def items(self) -> list[CalendarItem]:
        return self._adapter.items

    @property
    def positioned_days_of_week(self) -> list[int]:
        return self._generator.positioned_days_of_week

    @property
    def state(self) -> CalendarState:
        return self._require_state()

    @property
    def display_dates_range(self) -> DisplayDatesRange:
        return self._require_state().display_dates_range

    @property
    def min_max_dates_range(self) -> MinMaxDatesRange:
        return self._require_state().min_max_dates_range

    @property
    def selected_dates(self) -> SelectedDatesHolder:
        return self._require_state().selected_dates

    def setup(
        self,
        initial_date: DateLike | None = None,
        min_date: DateLike | None = None,
        max_date: DateLike | None = None,
    ) -> int | None:
        """Materialize the initial window of items.

        Window by limits:
            - no limits: ``months_per_page`` months either side of initial_date
            - both limits: exactly [min_date, max_date]
            - min only: [min_date, min_date + months_per_page]
            - max only: [max_date - months_per_page, max_date]

        Args:
            initial_date: Date to show first. Defaults to today.
            min_date: Earliest selectable date, or None for no limit.
            max_date: Latest selectable date, or None for no limit.

        Returns:
            Position of the initial date's month header, or None if the
            initial date lies outside the window.

        Raises:
            InvalidRangeError: If min_date > max_date
        """
        initial = _to_calendar_date(initial_date) or self._today()
        min_limit = _to_calendar_date(min_date)
        max_limit = _to_calendar_date(max_date)
        page = self._months_per_page

        if min_limit is None and max_limit is None:
            display = DisplayDatesRange(initial.minus_months(page), initial.plus_months(page))
            limits = MinMaxDatesRange()
        elif min_limit is not None and max_limit is not None:
            validate_limits(min_limit, max_limit)
            display = DisplayDatesRange(min_limit, max_limit)
            limits = MinMaxDatesRange(min_date=min_limit, max_date=max_limit)
        elif min_limit is not None:
            display = DisplayDatesRange(min_limit, min_limit.plus_months(page))
            limits = MinMaxDatesRange(min_date=min_limit, max_date=UNBOUNDED)
        else:
            display = DisplayDatesRange(max_limit.minus_months(page), max_limit)
            limits = MinMaxDatesRange(min_date=UNBOUNDED, max_date=max_limit)

        self._log.info(
            "calendar_setup",
            initial_date=initial,
            min_date=limits.min_date,
            max_date=limits.max_date,
        )
        self._install(CalendarState(display, limits), limits.clamp(initial))
        return self._adapter.find_month_position(initial.year, initial.month)

    def on_approach_top(self) -> PageResult | None:
        """Host trigger: the list is scrolled near its first item."""
        return self._require_paging().generate_prev_page()

    def on_approach_bottom(self) -> PageResult | None:
        """Host trigger: the list is scrolled near its last item."""
        return self._require_paging().generate_next_page()

    def on_scrolled(self, first_visible: int, last_visible: int) -> list[PageResult]:
        """Host trigger: report the visible positions after a scroll."""
        return self._require_paging().on_scrolled(first_visible, last_visible)

    def on_date_tapped(self, date: DateLike) -> int | None:
        """Toggle selection of a tapped day.

        Returns:
            Position of the changed item, or None if the date is not shown
            or lies outside the limits (selection is left unchanged).
        """
        state = self._require_state()
        tapped = _to_calendar_date(date)
        if not state.min_max_dates_range.contains(tapped):
            self._log.debug("date_tap_outside_limits", date=tapped)
            return None

        position = self._adapter.find_day_position(tapped)
        if position is None:
            self._log.debug("date_tap_not_materialized", date=tapped)
            return None

        selected = state.selected_dates.toggle(tapped)
        self._log.debug("date_selection_toggled", date=tapped, selected=selected)
        self._adapter.notify_item_changed(position)
        return position

    def is_selected(self, date: DateLike) -> bool:
        return _to_calendar_date(date) in self._require_state().selected_dates

    def on_year_changed(self, date: DateLike) -> int | None:
        """Bring the month of date into the window.

        The date is clamped to the limits. Missing months between the window
        and the date are generated first.

        Returns:
            Position of the month header to scroll to, or None if a page in
            that direction is still being spliced.
        """
        state = self._require_state()
        target = state.min_max_dates_range.clamp(_to_calendar_date(date))
        if target.year != self._year_selection.displayed_year:
            self._year_selection.setup(target, state.min_max_dates_range)

        self._require_paging().extend_to(target)
        return self._adapter.find_month_position(target.year, target.month)

    def on_year_header_tapped(self, year: int) -> None:
        """Forward a tap on the year header to the host."""
        self._log.debug("year_header_tapped", year=year)
        if self.on_year_click is not None:
            self.on_year_click(year)

    def save_state(self) -> dict[str, Any]:
        """Return the persisted state shape for the host to store."""
        return self._require_state().to_dict()

    def restore_state(self, data: dict[str, Any]) -> None:
        """Restore state saved by ``save_state`` and regenerate the items.

        Inconsistent or malformed data is replaced by a fresh unbounded window
        around today with an empty selection.
        """
        try:
            state = CalendarState.from_dict(data)
        except UnsupportedStateError as e:
            self._log.warning("state_restore_failed", error=str(e))
            today = self._today()
            page = self._months_per_page
            state = CalendarState(
                DisplayDatesRange(today.minus_months(page), today.plus_months(page))
            )

        limits = state.min_max_dates_range
        self._install(state, limits.clamp(self._today()))
        self._log.info(
            "calendar_state_restored",
            date_from=state.display_dates_range.date_from,
            date_to=state.display_dates_range.date_to,
            selected_count=len(state.selected_dates),
        )

    def _install(self, state: CalendarState, displayed_date: CalendarDate) -> None:
        self._state = state
        self._paging = PagingController(
            state,
            self._generator,
            self._adapter,
            months_per_page=self._months_per_page,
            scroll_threshold=self._scroll_threshold,
        )
        items = self._generator.generate_calendar_items(
            state.display_dates_range.date_from,
            state.display_dates_range.date_to,
            limits=state.min_max_dates_range,
        )
        self._adapter.set_items(items)
        self._year_selection.setup(displayed_date, state.min_max_dates_range)

    def _require_state(self) -> CalendarState:
        if self._state is None:
            raise RuntimeError("Calendar is not set up; call setup() first")
        return self._state

    def _require_paging(self) -> PagingController:
        if self._paging is None:
            raise RuntimeError("Calendar is not set up; call setup() first")
        return self._paging

    def __repr__(self) -> str:
        """String representation."""
        if self._state is None:
            return "CalendarController(not set up)"
        display = self._state.display_dates_range
        return (
            f"CalendarController(date_from={display.date_from}, "
            f"date_to={display.date_to}, "
            f"selected={len(self._state.selected_dates)})"
        )
