"""Stable, deterministic identifiers for error occurrences.

Errors that differ only in variable detail (IDs, timestamps, UUIDs) collapse
to the same 8-character identifier, so error tracking can group and count
occurrences without matching full messages::

    from packages.stable_error import create_stable_error

    record = create_stable_error(
        "User 123 not found",
        category="validation",
        metadata={"userId": 123, "field": "email"},
    )
    record.id  # same for "User 456 not found" with the same category/field
"""

from .exceptions import StableError
from .factories import (
    ORIGINAL_NAME_KEY,
    ORIGINAL_STACK_KEY,
    create_stable_error,
    raise_stable_error,
)
from .hashing import build_canonical_string, generate_stable_id, rolling_hash32
from .metadata import STABLE_METADATA_KEYS, filter_metadata
from .normalize import normalize_message
from .types import (
    DEFAULT_CATEGORY,
    DEFAULT_SEVERITY,
    DEFAULT_STATUS_CODE,
    STABLE_ERROR_NAME,
    ErrorRecord,
    Severity,
)

__all__ = [
    "DEFAULT_CATEGORY",
    "DEFAULT_SEVERITY",
    "DEFAULT_STATUS_CODE",
    "ORIGINAL_NAME_KEY",
    "ORIGINAL_STACK_KEY",
    "STABLE_ERROR_NAME",
    "STABLE_METADATA_KEYS",
    "ErrorRecord",
    "Severity",
    "StableError",
    "build_canonical_string",
    "create_stable_error",
    "filter_metadata",
    "generate_stable_id",
    "normalize_message",
    "raise_stable_error",
    "rolling_hash32",
]
