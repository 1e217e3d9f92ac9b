"""Structured logging for the rates service, shared with uvicorn."""

import logging
import sys
from typing import Literal

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

SERVICE_NAME = "kakapo-lodge-rates"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def add_service_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Tag every event with the service name for log aggregation."""
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def setup_logging(
    level: str = "INFO",
    format_type: Literal["json", "console"] = "console",
) -> None:
    """
    Configure structlog and the uvicorn loggers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_type: 'json' for deployed instances, 'console' for local runs
    """
    log_level = getattr(logging, level.upper())

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_service_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    if format_type == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.rich_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    configure_uvicorn_logging(log_level)


def configure_uvicorn_logging(log_level: int) -> None:
    """Send uvicorn's stdlib records to stdout at the service's level."""
    logging.basicConfig(format="%(message)s", level=log_level, stream=sys.stdout)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.setLevel(log_level)
        uvicorn_logger.propagate = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, usually named after the calling module."""
    return structlog.get_logger(name)
