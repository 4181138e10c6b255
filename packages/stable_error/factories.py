"""Construction of stable error records.

``create_stable_error`` accepts either a plain message or an existing error and
returns an ``ErrorRecord`` whose ``id`` depends only on the message, category
and allow-listed metadata. Everything else on the record (timestamp, stack,
severity, status code, extra metadata) is descriptive.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Mapping, NoReturn

from .config import get_settings
from .hashing import generate_stable_id
from .logging import fields, get_logger, log_context, record_context
from .types import (
    DEFAULT_CATEGORY,
    DEFAULT_SEVERITY,
    DEFAULT_STATUS_CODE,
    ErrorRecord,
    Severity,
)

ORIGINAL_NAME_KEY = "originalName"
ORIGINAL_STACK_KEY = "originalStack"

logger = get_logger(__name__)


@dataclass(frozen=True)
class _ResolvedSource:
    """Message and diagnostics extracted from a builder source."""

    message: str
    wrapped: bool = False
    name: str | None = None
    stack: str | None = None


def create_stable_error(
    message_or_error: Any,
    *,
    category: str | None = None,
    metadata: Mapping[str, Any] | None = None,
    severity: Severity | str | None = None,
    status_code: int | None = None,
) -> ErrorRecord:
    """Create an ``ErrorRecord`` with a stable identifier.

    ``message_or_error`` is a message string, an exception, or an error-like
    object exposing ``message`` (and optionally ``name`` and ``stack``). When
    an error is wrapped, its type name and traceback are added to the stored
    metadata as ``originalName`` and ``originalStack``.

    Raises ``TypeError`` for any other source and ``ValueError`` for a severity
    outside ``Severity``.
    """
    source = _resolve_source(message_or_error)

    resolved_category = category or DEFAULT_CATEGORY
    resolved_status_code = status_code or DEFAULT_STATUS_CODE
    resolved_severity = Severity(severity) if severity else DEFAULT_SEVERITY

    merged_metadata = dict(metadata) if isinstance(metadata, Mapping) else {}
    if source.wrapped:
        merged_metadata[ORIGINAL_NAME_KEY] = source.name
        merged_metadata[ORIGINAL_STACK_KEY] = source.stack

    timestamp = _iso_timestamp(datetime.now(UTC))
    error_id = generate_stable_id(source.message, resolved_category, merged_metadata)
    stack = source.stack if source.stack else _capture_stack(source.message)

    record = ErrorRecord(
        id=error_id,
        message=source.message,
        category=resolved_category,
        metadata=merged_metadata,
        severity=resolved_severity,
        status_code=resolved_status_code,
        timestamp=timestamp,
        stack=stack,
    )

    context = {fields.EVENT: fields.STABLE_ERROR_CREATED_EVENT, **record_context(record)}
    with log_context(context):
        logger.debug("Stable error created")

    return record


def raise_stable_error(
    message_or_error: Any,
    *,
    category: str | None = None,
    metadata: Mapping[str, Any] | None = None,
    severity: Severity | str | None = None,
    status_code: int | None = None,
) -> NoReturn:
    """Build a record and raise it as ``StableError``.

    A wrapped exception becomes the ``__cause__`` of the raised error.
    """
    record = create_stable_error(
        message_or_error,
        category=category,
        metadata=metadata,
        severity=severity,
        status_code=status_code,
    )
    if isinstance(message_or_error, BaseException):
        raise record.as_exception() from message_or_error
    raise record.as_exception()


def _resolve_source(message_or_error: Any) -> _ResolvedSource:
    """Extract message, name and stack from a builder source."""
    if isinstance(message_or_error, str):
        return _ResolvedSource(message=message_or_error)

    if isinstance(message_or_error, BaseException):
        stack = None
        if message_or_error.__traceback__ is not None:
            stack = "".join(
                traceback.format_exception(
                    type(message_or_error),
                    message_or_error,
                    message_or_error.__traceback__,
                )
            )
        return _ResolvedSource(
            message=str(message_or_error),
            wrapped=True,
            name=type(message_or_error).__name__,
            stack=stack,
        )

    if hasattr(message_or_error, "message"):
        message = getattr(message_or_error, "message")
        return _ResolvedSource(
            message="" if message is None else str(message),
            wrapped=True,
            name=getattr(message_or_error, "name", None) or type(message_or_error).__name__,
            stack=getattr(message_or_error, "stack", None),
        )

    raise TypeError(
        "create_stable_error expects a message string, an exception or an "
        f"error-like object with a 'message' attribute, got {type(message_or_error).__name__}"
    )


def _capture_stack(message: str) -> str | None:
    """Render the caller's stack in traceback form, or ``None`` when disabled."""
    capture = get_settings().capture
    if not capture.capture_stack:
        return None

    # Drop this helper and create_stable_error.
    frames = traceback.extract_stack()[:-2]
    if capture.stack_limit is not None:
        frames = frames[-capture.stack_limit :]

    rendered = "".join(traceback.format_list(frames))
    return f"Traceback (most recent call last):\n{rendered}StableError: {message}\n"


def _iso_timestamp(moment: datetime) -> str:
    """Format ``moment`` as ISO-8601 UTC with millisecond precision and ``Z``."""
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
