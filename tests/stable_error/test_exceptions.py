"""Tests for the raisable ``StableError`` adapter."""

from __future__ import annotations

import pytest

from packages.stable_error import (
    Severity,
    StableError,
    create_stable_error,
    raise_stable_error,
)


def test_record_as_exception_is_raisable() -> None:
    """The adapter raises with the record message."""
    record = create_stable_error("Test error")

    with pytest.raises(StableError, match="Test error") as exc_info:
        raise record.as_exception()

    assert exc_info.value.record is record
    assert str(exc_info.value) == "Test error"


def test_exception_proxies_record_fields() -> None:
    """Record fields are readable straight off the exception."""
    record = create_stable_error(
        "Payment declined",
        category="billing",
        severity="critical",
        status_code=402,
        metadata={"code": "card_declined"},
    )
    exc = StableError(record)

    assert exc.id == record.id
    assert exc.message == "Payment declined"
    assert exc.category == "billing"
    assert exc.severity is Severity.CRITICAL
    assert exc.status_code == 402
    assert exc.timestamp == record.timestamp
    assert exc.stack == record.stack
    assert exc.metadata == {"code": "card_declined"}
    assert exc.to_json() == record.to_json()


def test_raise_stable_error_from_message() -> None:
    """Messages are built into a record and raised."""
    with pytest.raises(StableError) as exc_info:
        raise_stable_error("User 7 not found", category="lookup")

    assert exc_info.value.category == "lookup"
    assert exc_info.value.id == create_stable_error("User 8 not found", category="lookup").id
    assert exc_info.value.__cause__ is None


def test_raise_stable_error_chains_wrapped_exception() -> None:
    """A wrapped exception becomes the cause of the raised adapter."""
    try:
        raise ConnectionError("connection reset")
    except ConnectionError as original:
        with pytest.raises(StableError) as exc_info:
            raise_stable_error(original, category="network")

        assert exc_info.value.__cause__ is original
        assert exc_info.value.metadata["originalName"] == "ConnectionError"
        assert exc_info.value.message == "connection reset"
