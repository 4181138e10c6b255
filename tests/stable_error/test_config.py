"""Tests for pydantic-settings-backed stable error configuration."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from packages.stable_error import create_stable_error
from packages.stable_error.config import get_settings, load_settings, reset_settings_cache


def test_load_settings_uses_model_defaults_when_sources_missing(tmp_path: Path) -> None:
    """Settings fall back to model defaults when env and YAML are absent."""
    settings = load_settings(config_path=tmp_path / "stable_error.yaml")

    assert settings.logging.level == "INFO"
    assert settings.logging.json_output is True
    assert settings.logging.service == "stable-error"
    assert settings.capture.capture_stack is True
    assert settings.capture.stack_limit is None


def test_load_settings_uses_precedence_cascade(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Params override env, env overrides YAML, YAML overrides defaults."""
    config_file = tmp_path / "stable_error.yaml"
    config_file.write_text(
        "\n".join(
            [
                "logging:",
                "  level: WARNING",
                "  service: from-yaml",
                "capture:",
                "  stack_limit: 3",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("STABLE_ERROR_LOGGING__LEVEL", "ERROR")
    monkeypatch.setenv("STABLE_ERROR_CAPTURE__STACK_LIMIT", "5")

    settings = load_settings(
        cli_params={"logging": {"level": "DEBUG"}},
        config_path=config_file,
    )

    assert settings.logging.level == "DEBUG"
    assert settings.logging.service == "from-yaml"
    assert settings.capture.stack_limit == 5


def test_load_settings_rejects_invalid_values(tmp_path: Path) -> None:
    """Malformed configuration surfaces as a validation error."""
    with pytest.raises(ValidationError):
        load_settings(
            cli_params={"capture": {"stack_limit": 0}},
            config_path=tmp_path / "stable_error.yaml",
        )

    with pytest.raises(ValidationError):
        load_settings(
            cli_params={"logging": {"level": "VERBOSE"}},
            config_path=tmp_path / "stable_error.yaml",
        )


def test_get_settings_is_cached_until_reset(monkeypatch: pytest.MonkeyPatch) -> None:
    """The process-wide settings are loaded once and reloaded after reset."""
    first = get_settings()
    monkeypatch.setenv("STABLE_ERROR_LOGGING__LEVEL", "DEBUG")

    assert get_settings() is first
    assert first.logging.level == "INFO"

    reset_settings_cache()

    assert get_settings().logging.level == "DEBUG"


def test_capture_settings_limit_fresh_stacks(monkeypatch: pytest.MonkeyPatch) -> None:
    """``stack_limit`` bounds the number of captured frames."""
    monkeypatch.setenv("STABLE_ERROR_CAPTURE__STACK_LIMIT", "1")

    record = create_stable_error("Limited")

    assert record.stack is not None
    assert record.stack.count('  File "') == 1
    assert "test_capture_settings_limit_fresh_stacks" in record.stack


def test_capture_settings_never_change_ids(monkeypatch: pytest.MonkeyPatch) -> None:
    """Configuration does not leak into identifier derivation."""
    baseline = create_stable_error("Same failure", category="test").id

    monkeypatch.setenv("STABLE_ERROR_CAPTURE__CAPTURE_STACK", "false")
    reset_settings_cache()

    record = create_stable_error("Same failure", category="test")

    assert record.stack is None
    assert record.id == baseline
