"""Stdout logging configuration for hosts embedding stable errors.

Log lines are either newline-delimited JSON (for log pipelines that group on
``error_id``) or plain text with the bound context appended as ``key=value``.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from . import fields
from .context import bind_context, get_context

if TYPE_CHECKING:
    from ..config import LoggingSettings


_LEADING_ERROR_FIELDS = (
    fields.ERROR_ID,
    fields.ERROR_CATEGORY,
    fields.SEVERITY,
    fields.STATUS_CODE,
)


class ContextFilter(logging.Filter):
    """Attach the bound context to each record without shadowing its own attributes."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = get_context()
        record.context = context
        for key, value in context.items():
            record.__dict__.setdefault(key, value)
        return True


def ordered_context(record: logging.LogRecord) -> list[tuple[str, str]]:
    """Return bound context with error identifier fields first, the rest sorted."""
    context = getattr(record, "context", None) or {}
    leading = [(key, context[key]) for key in _LEADING_ERROR_FIELDS if key in context]
    trailing = sorted(
        (key, value) for key, value in context.items() if key not in _LEADING_ERROR_FIELDS
    )
    return leading + trailing


class JsonFormatter(logging.Formatter):
    """One JSON object per line; error identifier fields follow the core fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        payload.update(ordered_context(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """``<time> <level> <logger> <message> error_id=... key=value`` lines."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = ordered_context(record)
        if not pairs:
            return line
        return line + " " + " ".join(f"{key}={value}" for key, value in pairs)


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
) -> None:
    """Install a single stdout handler on the root logger.

    Calling this again replaces the handler rather than adding a second one.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())
    root.addHandler(handler)

    bind_context(**{fields.SERVICE: service, fields.ENVIRONMENT: environment})


def configure_logging_from_settings(settings: LoggingSettings) -> None:
    """Apply a ``LoggingSettings`` block via ``configure_logging``."""
    configure_logging(
        level=settings.level,
        json_output=settings.json_output,
        service=settings.service,
        environment=settings.environment,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger from the standard logging hierarchy."""
    return logging.getLogger(name)
