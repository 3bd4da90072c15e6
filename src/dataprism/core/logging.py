"""Structured logging for profiling runs.

Log events are snake_case names with keyword fields. Every event emitted
inside a profiling run carries that run's ``analysis_id``.

Usage:
    from dataprism.core.logging import get_logger, log_context

    logger = get_logger(__name__)

    with log_context(analysis_id="abc123"):
        logger.info("column_skipped", column="notes", reason="no_parsed_values")

Applications embedding the library pick the output with
``setup_logging(settings)`` (or ``configure_logging`` directly). Until then
the library logs INFO and above to stderr in console format.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.typing import FilteringBoundLogger

from dataprism.core.config import Settings, get_settings

# Fields bound by enclosing log_context() scopes
_analysis_context: ContextVar[dict[str, Any] | None] = ContextVar(
    "analysis_context", default=None
)


def _add_analysis_context(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Processor merging the scoped analysis context into each event."""
    bound = _analysis_context.get()
    if bound:
        for key, value in bound.items():
            event_dict.setdefault(key, value)
    return event_dict


def _renderer(log_format: str, color: bool) -> list[structlog.types.Processor]:
    if log_format == "json":
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [
        structlog.dev.ConsoleRenderer(
            colors=color,
            exception_formatter=structlog.dev.plain_traceback,
        )
    ]


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    show_timestamps: bool = True,
    color: bool = True,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: "console" for humans, "json" for log collectors
        show_timestamps: Prefix events with an ISO UTC timestamp
        color: Colorize console output
    """
    level = getattr(logging, log_level.upper())

    processors: list[structlog.types.Processor] = []
    if show_timestamps:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
    processors += [
        structlog.contextvars.merge_contextvars,
        _add_analysis_context,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    processors += _renderer(log_format, color)

    # Module-level loggers are created at import, so they must not cache the
    # configuration that was active then.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def setup_logging(settings: Settings | None = None) -> None:
    """Apply log level and format from settings.

    Args:
        settings: Settings (defaults to get_settings())
    """
    settings = settings or get_settings()
    configure_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
        color=settings.log_format == "console",
    )


def get_logger(name: str | None = None) -> FilteringBoundLogger:
    """Get a structured logger, typically with ``__name__``."""
    return cast(FilteringBoundLogger, structlog.get_logger(name))


class LogContext:
    """Scope that adds fields to every log event emitted inside it.

    Scopes nest; inner fields extend (and may override) outer ones and are
    dropped again on exit.
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.token: Any = None

    def __enter__(self) -> LogContext:
        merged = {**(_analysis_context.get() or {}), **self.fields}
        self.token = _analysis_context.set(merged)
        return self

    def __exit__(self, *args: Any) -> None:
        if self.token is not None:
            _analysis_context.reset(self.token)
            self.token = None


def log_context(**fields: Any) -> LogContext:
    """Create a LogContext.

    Usage:
        with log_context(analysis_id="abc"):
            logger.info("analysis_started")  # includes analysis_id
    """
    return LogContext(**fields)


def current_log_context() -> dict[str, Any]:
    """Return a copy of the fields bound by enclosing log_context() scopes.

    Threads started inside a scope do not see it; hand them this copy and
    re-enter it with log_context(**fields).
    """
    return dict(_analysis_context.get() or {})


configure_logging()
