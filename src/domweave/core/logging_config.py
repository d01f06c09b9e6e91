"""
Structured Logging Configuration
Structured logging for element construction and bindings with structlog.

Library modules only call ``get_logger``; the embedding application decides
whether and how records are emitted by calling ``configure_logging``.
"""

import logging
import sys
from typing import Any, MutableMapping

import structlog
from pythonjsonlogger import jsonlogger

_PLAIN_TYPES = (str, int, float, bool, type(None))

# Silent until the host application configures handlers
logging.getLogger("domweave").addHandler(logging.NullHandler())


def render_objects(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Replace non-scalar values (nodes, handlers, configs) with their repr."""
    for key, value in event_dict.items():
        if key != "event" and not isinstance(value, _PLAIN_TYPES):
            event_dict[key] = repr(value)
    return event_dict


def _processors(json_logs: bool) -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        render_objects,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
    ]


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configure structured logging for the application embedding domweave.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown names mean INFO
        json_logs: One JSON object per line instead of console output
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        handler.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logging.basicConfig(level=log_level, handlers=[handler], force=True)

    structlog.configure(
        processors=_processors(json_logs),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings() -> None:
    """Configure logging from ``DOMWEAVE_LOG_LEVEL`` / ``DOMWEAVE_JSON_LOGS``."""
    from .config import get_settings

    settings = get_settings()
    configure_logging(settings.log_level, settings.json_logs)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger; ``name`` is typically ``__name__``.

    Records always go through the stdlib logger of the same name, so an
    application that never calls ``configure_logging`` sees nothing.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


class LogContext:
    """Bind key/value context to every record logged inside the block.

    Used by the blueprint builder so that each ``element_created`` record
    carries the blueprint it came from.
    """

    def __init__(self, **kwargs: Any):
        self.context = kwargs

    def __enter__(self) -> "LogContext":
        structlog.contextvars.bind_contextvars(**self.context)
        return self

    def __exit__(self, *args: Any) -> None:
        structlog.contextvars.unbind_contextvars(*self.context.keys())
