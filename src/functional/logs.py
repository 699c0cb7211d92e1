"""
Structured logging for the library.

Library modules log only at debug level, with dotted event names and
key-value context (``effects.cancelled``, ``try_catch.fault_caught`` …).
Events are rendered by structlog and handed to the stdlib logger named after
the emitting module, below ``functional``. That logger carries a
``NullHandler``, so the library stays silent until an application calls
``configure_logging`` or attaches its own handlers.
"""

from __future__ import annotations

import logging
import sys

import structlog

from functional.config import FunctionalSettings, get_settings

LIBRARY_LOGGER = "functional"

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


class _ConsoleHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stdout`` is at emit time."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)
        self.setFormatter(logging.Formatter("%(message)s"))

    @property
    def stream(self):
        return sys.stdout


def configure_logging(log_level: str | None = None) -> None:
    """
    Configure structlog for human-readable console output.

    The level defaults to ``FunctionalSettings.log_level``
    (env: FUNCTIONAL_LOG_LEVEL). Library events at or above it are printed
    to stdout; calling again replaces the previous level and handler.
    """
    settings = get_settings() if log_level is None else FunctionalSettings(log_level=log_level)
    level = settings.log_level_number()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    library = logging.getLogger(LIBRARY_LOGGER)
    for handler in [h for h in library.handlers if isinstance(h, _ConsoleHandler)]:
        library.removeHandler(handler)
    library.addHandler(_ConsoleHandler())
    library.setLevel(level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Return a structlog logger for a library module, backed by the stdlib
    logger of the same name.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
