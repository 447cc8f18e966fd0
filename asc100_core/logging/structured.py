"""
Structured Logging
==================
JSON log output for services that embed the codec, with structlog routed
through the standard library so both share one handler.

Usage:
    from asc100_core.logging import setup_logging, log_error

    setup_logging(service_name="asc100-gateway")

    try:
        codec.decode(token)
    except Asc100Error as e:
        log_error(e, context="decode query token", token_length=len(token))
        raise
"""

import json
import logging
import sys
import traceback
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog

service_name_var: ContextVar[str] = ContextVar("service_name", default="asc100")


# =============================================================================
# JSON Formatter
# =============================================================================

class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON for structured logging.
    Key/value pairs bound through structlog arrive in ``extra_data``.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": service_name_var.get(),
        }

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        log_data["source"] = {
            "file": record.filename,
            "line": record.lineno,
            "function": record.funcName,
        }

        return json.dumps(log_data, default=str)


def _to_stdlib_kwargs(logger, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Last structlog processor: hand the event to stdlib as msg + extra_data."""
    event = event_dict.pop("event", "")
    exc_info = event_dict.pop("exc_info", None)
    kwargs: Dict[str, Any] = {"msg": event, "extra": {"extra_data": event_dict}}
    if exc_info:
        kwargs["exc_info"] = exc_info
    return kwargs


# =============================================================================
# Setup Functions
# =============================================================================

def setup_logging(
    service_name: str = "asc100",
    level: str = "INFO",
    json_output: bool = True,
    stream=None,
) -> logging.Logger:
    """
    Configure logging for a service using the codec.

    Args:
        service_name: Name reported in every record
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: JSON lines (production) or plain text
        stream: Output stream (stdout when omitted)

    Returns:
        Configured root logger
    """
    service_name_var.set(service_name)
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s %(extra_data)s",
            defaults={"extra_data": ""},
        ))
    root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.StackInfoRenderer(),
            _to_stdlib_kwargs,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    structlog.get_logger(__name__).info(
        "logging configured", service=service_name, level=level.upper()
    )
    return root_logger


def setup_logging_from_settings(settings=None, service_name: str = "asc100") -> logging.Logger:
    """Configure logging from CodecSettings (defaults to the environment)."""
    from ..config import load_settings

    settings = settings or load_settings()
    return setup_logging(
        service_name=service_name,
        level=settings.log_level,
        json_output=settings.json_logs,
    )


# =============================================================================
# Logging Functions
# =============================================================================

def get_logger(name: str):
    """Get a structlog logger with the given name."""
    return structlog.get_logger(name)


def log_error(
    error: Exception,
    context: Optional[str] = None,
    **kwargs,
) -> None:
    """
    Log an error with full context.

    Args:
        error: The exception
        context: Description of what was happening
        **kwargs: Additional context
    """
    logger = logging.getLogger("asc100.errors")

    extra_data = {
        "error": True,
        "error_type": type(error).__name__,
        "error_message": str(error),
        "context": context,
        "error_data": kwargs,
    }
    for attr in ("character", "position", "index"):
        value = getattr(error, attr, None)
        if value is not None:
            extra_data[attr] = value

    logger.error(
        f"Error: {context or type(error).__name__}",
        exc_info=error,
        extra={"extra_data": extra_data},
    )
