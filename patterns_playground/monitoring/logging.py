"""
Structured logging configuration.

structlog renders every event; the stdlib root logger carries the output
so uvicorn and library logs end up in the same stream. Production output
is JSON (python-json-logger on the stdlib side), debug output is the
structlog console renderer.
"""
import logging
import sys
from typing import Any, List, Optional

import structlog
from pythonjsonlogger import jsonlogger

from patterns_playground.config import get_settings

# Loggers that duplicate the request middleware or are too chatty at INFO
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def add_app_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Stamp every event with the application name and environment."""
    settings = get_settings()
    event_dict.setdefault("app_name", settings.app_name)
    event_dict.setdefault("app_env", settings.app_env)
    return event_dict


def bind_pattern_context(pattern: str, endpoint: str) -> None:
    """
    Tag the rest of the request's log events with the pattern being run.

    The request middleware clears contextvars when the request ends, so
    nothing bound here outlives the request.
    """
    structlog.contextvars.bind_contextvars(pattern=pattern, pattern_endpoint=endpoint)


def _processors(json_format: bool) -> List[Any]:
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_app_context,
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def setup_logging(json_format: Optional[bool] = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        json_format: Render JSON; defaults to JSON unless debug is enabled
    """
    settings = get_settings()
    if json_format is None:
        json_format = not settings.debug

    structlog.configure(
        processors=_processors(json_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        # structlog already rendered the event; the formatter wraps stdlib records
        handler.setFormatter(
            jsonlogger.JsonFormatter(
                "%(asctime)s %(levelname)s %(name)s %(message)s",
                rename_fields={"levelname": "level", "name": "logger"},
            )
        )
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.get_logger(__name__).info(
        "logging_configured",
        log_level=settings.log_level,
        json_format=json_format,
    )
