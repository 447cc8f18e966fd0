"""
ASC100 Logging Module

Structured logging shared by the codec's outer layers.
"""

from .structured import (
    # Setup
    setup_logging,
    setup_logging_from_settings,
    get_logger,

    # Logging functions
    log_error,

    # Formatting
    JSONFormatter,

    # Context
    service_name_var,
)

__all__ = [
    "setup_logging",
    "setup_logging_from_settings",
    "get_logger",
    "log_error",
    "JSONFormatter",
    "service_name_var",
]
