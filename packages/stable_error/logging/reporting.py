"""Emit stable error records as structured log lines."""

from __future__ import annotations

import logging

from . import fields
from .context import log_context, record_context
from ..types import ErrorRecord, Severity

_SEVERITY_LEVELS: dict[Severity, int] = {
    Severity.LOW: logging.INFO,
    Severity.MEDIUM: logging.WARNING,
    Severity.HIGH: logging.ERROR,
    Severity.CRITICAL: logging.CRITICAL,
}


def severity_to_level(severity: Severity) -> int:
    """Map an error severity onto a stdlib logging level."""
    return _SEVERITY_LEVELS[Severity(severity)]


def log_stable_error(
    logger: logging.Logger, record: ErrorRecord, *, level: int | None = None
) -> None:
    """Log ``record`` with its identifier fields bound as context.

    The level defaults to the one matching the record severity.
    """
    resolved_level = severity_to_level(record.severity) if level is None else level
    context = {fields.EVENT: fields.STABLE_ERROR_REPORTED_EVENT, **record_context(record)}
    with log_context(context):
        logger.log(resolved_level, record.message)
