"""Logging configuration for calgrid."""

import logging
import time
from contextlib import contextmanager
from typing import Any, Generator

import structlog

from calgrid.calendar import CalendarDate
from calgrid.ranges import Unbounded


def get_logger(name: str | None = None, **context: Any) -> structlog.BoundLogger:
    """Get a structlog logger bound to the given context."""
    logger = structlog.get_logger(name)
    return logger.bind(**context) if context else logger


def render_calendar_values(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Processor rendering CalendarDate values and UNBOUNDED limits as strings."""
    for key, value in event_dict.items():
        if isinstance(value, (CalendarDate, Unbounded)):
            event_dict[key] = str(value)
    return event_dict


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
) -> None:
    """Configure calgrid logging.

    Calendar dates in log events are rendered as ISO strings and unbounded
    limits as ``UNBOUNDED``.

    Args:
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR")
        json_output: True for JSON output (production), False for console
    """
    numeric_level = getattr(logging, level.upper())
    logging.basicConfig(format="%(message)s", level=numeric_level)

    processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        render_calendar_values,
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


@contextmanager
def timed_block(
    logger: structlog.BoundLogger,
    event: str,
    level: str = "debug",
    **fields: Any,
) -> Generator[dict[str, Any], None, None]:
    """Log event with its elapsed time once the block exits.

    Yields a dict the block can fill with extra fields for the event.
    """
    extra: dict[str, Any] = dict(fields)
    start = time.perf_counter()
    try:
        yield extra
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        getattr(logger, level)(event, elapsed_ms=round(elapsed_ms, 2), **extra)
