"""Tests for logging helpers."""

import structlog
from structlog.testing import capture_logs

from calgrid import UNBOUNDED, CalendarDate
from calgrid.logging import render_calendar_values, timed_block


class TestRenderCalendarValues:
    """Test the calendar value processor."""

    def test_dates_and_limits_rendered(self):
        """CalendarDate and UNBOUNDED become strings, other values are kept."""
        event = {
            "event": "page_generated",
            "date_from": CalendarDate(2021, 1, 5),
            "bound": UNBOUNDED,
            "count": 32,
        }

        result = render_calendar_values(None, "debug", event)

        assert result == {
            "event": "page_generated",
            "date_from": "2021-01-05",
            "bound": "UNBOUNDED",
            "count": 32,
        }


class TestTimedBlock:
    """Test timed_block."""

    def test_logs_elapsed_and_extra_fields(self):
        """The event carries elapsed_ms and fields added inside the block."""
        with capture_logs() as logs:
            logger = structlog.get_logger("test")
            with timed_block(logger, "work_done", direction="prev") as fields:
                fields["count"] = 3

        assert len(logs) == 1
        assert logs[0]["event"] == "work_done"
        assert logs[0]["direction"] == "prev"
        assert logs[0]["count"] == 3
        assert logs[0]["elapsed_ms"] >= 0

    def test_logs_on_error(self):
        """The event is logged even when the block raises."""
        with capture_logs() as logs:
            logger = structlog.get_logger("test")
            try:
                with timed_block(logger, "work_failed"):
                    raise ValueError("boom")
            except ValueError:
                pass

        assert [entry["event"] for entry in logs] == ["work_failed"]
