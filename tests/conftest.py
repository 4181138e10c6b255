"""Pytest configuration for the stable error test suite."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from packages.stable_error.config import reset_settings_cache  # noqa: E402
from packages.stable_error.logging import clear_context  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Iterator[None]:
    """Keep host env vars and config files out of every test."""
    for key in list(os.environ):
        if key.startswith("STABLE_ERROR_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(
        "packages.stable_error.config.models.DEFAULT_CONFIG_PATH",
        tmp_path / "missing" / "stable_error.yaml",
    )
    reset_settings_cache()
    clear_context()
    yield
    reset_settings_cache()
    clear_context()
