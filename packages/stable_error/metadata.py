"""Allow-list filtering of error metadata for identifier derivation."""

from __future__ import annotations

from typing import Any, Mapping

STABLE_METADATA_KEYS: frozenset[str] = frozenset(
    {"type", "code", "field", "operation", "service", "component"}
)


def filter_metadata(metadata: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return only the allow-listed, non-``None`` entries of ``metadata``.

    Keys outside ``STABLE_METADATA_KEYS`` are dropped silently; they usually
    carry per-occurrence detail (user IDs, request timestamps) that would split
    one logical error into many identifiers. Non-mapping input yields ``{}``.
    """
    if not isinstance(metadata, Mapping):
        return {}

    return {
        key: value
        for key, value in metadata.items()
        if key in STABLE_METADATA_KEYS and value is not None
    }


__all__ = ["STABLE_METADATA_KEYS", "filter_metadata"]
