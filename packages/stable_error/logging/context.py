"""Structured logging context for stable error log lines.

Context lives in a ``contextvars`` variable so fields bound while handling one
error never leak into log lines of another thread or asyncio task.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator, Mapping

from . import fields

if TYPE_CHECKING:
    from ..types import ErrorRecord

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar(
    "stable_error_log_context", default={}
)


def get_context() -> dict[str, str]:
    """Return a copy of the fields bound in the current context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind values into the current context, stringified; ``None`` is skipped."""
    merged = {**_LOG_CONTEXT.get()}
    merged.update({key: str(value) for key, value in values.items() if value is not None})
    _LOG_CONTEXT.set(merged)


def clear_context() -> None:
    """Drop every bound field."""
    _LOG_CONTEXT.set({})


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of a block, restoring the prior context."""
    token = _LOG_CONTEXT.set(dict(_LOG_CONTEXT.get()))
    try:
        bind_context(**dict(values))
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def record_context(record: ErrorRecord) -> dict[str, object]:
    """Map an error record onto canonical log field names."""
    context: dict[str, object] = {
        fields.ERROR_ID: record.id,
        fields.ERROR_NAME: record.name,
        fields.ERROR_CATEGORY: record.category,
        fields.SEVERITY: record.severity.value,
        fields.STATUS_CODE: record.status_code,
    }
    original_name = record.metadata.get("originalName")
    if original_name is not None:
        context[fields.ORIGINAL_NAME] = original_name
    return context
