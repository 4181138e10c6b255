"""Logging API for stable errors.

Wraps Python's ``logging`` module with stdout defaults and ``contextvars``
context propagation so error identifiers ride along on every log line.
"""

from .config import (
    ContextFilter,
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    ordered_context,
)
from .context import bind_context, clear_context, get_context, log_context, record_context
from .reporting import log_stable_error, severity_to_level

__all__ = [
    "ContextFilter",
    "JsonFormatter",
    "PlainFormatter",
    "bind_context",
    "clear_context",
    "configure_logging",
    "configure_logging_from_settings",
    "get_context",
    "get_logger",
    "log_context",
    "log_stable_error",
    "ordered_context",
    "record_context",
    "severity_to_level",
]
