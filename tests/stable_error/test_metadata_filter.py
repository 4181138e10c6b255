"""Tests for allow-list metadata filtering."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from packages.stable_error import STABLE_METADATA_KEYS, filter_metadata


def test_filter_keeps_only_allowed_keys() -> None:
    """Per-occurrence keys are dropped without error."""
    metadata = {
        "type": "validation",
        "field": "email",
        "userId": 123,
        "timestamp": "2023-01-01",
        "sessionId": "abc123",
    }

    assert filter_metadata(metadata) == {"type": "validation", "field": "email"}


def test_filter_drops_none_values() -> None:
    """Allow-listed keys with ``None`` values do not survive."""
    metadata = {"type": "validation", "field": None, "operation": None, "service": "api"}

    assert filter_metadata(metadata) == {"type": "validation", "service": "api"}


def test_filter_keeps_falsy_non_none_values() -> None:
    """Only ``None`` is treated as absent; zero and empty strings are kept."""
    assert filter_metadata({"code": 0, "field": ""}) == {"code": 0, "field": ""}


def test_filter_accepts_any_mapping_and_returns_new_dict() -> None:
    """Read-only mappings are accepted and the input is never mutated."""
    source = MappingProxyType({"component": "billing", "extra": 1})

    filtered = filter_metadata(source)
    filtered["code"] = "E1"

    assert filtered == {"component": "billing", "code": "E1"}
    assert dict(source) == {"component": "billing", "extra": 1}


@pytest.mark.parametrize("value", [{}, None, "type=validation", [("type", "x")], 7])
def test_filter_returns_empty_for_empty_or_non_mapping(value: object) -> None:
    """Empty, absent and non-mapping metadata all filter to ``{}``."""
    assert filter_metadata(value) == {}  # type: ignore[arg-type]


def test_allow_list_is_fixed() -> None:
    """The allow-list is the documented closed set."""
    assert STABLE_METADATA_KEYS == {
        "type",
        "code",
        "field",
        "operation",
        "service",
        "component",
    }
