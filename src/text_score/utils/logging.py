"""
Logging configuration for text-score.

The library itself only emits events through structlog loggers; this module
is called by the CLI to route them through stdlib logging to stderr.
"""

import logging
import sys

import structlog
from structlog.typing import EventDict, WrappedLogger


def add_service_name(
    _logger: WrappedLogger,
    _method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Structlog processor that tags every event with the service name."""
    event_dict.setdefault("service", "text-score")
    return event_dict


def configure_logging(log_level: str = "WARNING", log_format: str = "console") -> None:
    """
    Configure structured logging.

    Args:
        log_level: Stdlib level name such as "DEBUG" or "INFO".
        log_format: "json" for JSON lines, anything else for console output.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_service_name,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
