"""Settings loading with deterministic precedence.

The cascade is always:
1) explicit params
2) environment variables
3) ~/.config/stable-error/stable_error.yaml
4) built-in defaults

Environment variable format:
- Prefix: ``STABLE_ERROR_``
- Nested keys: ``__`` separator
- Example: ``STABLE_ERROR_CAPTURE__STACK_LIMIT=20`` -> ``capture.stack_limit = 20``
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from .models import _CONFIG_PATH_OVERRIDE, StableErrorSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> StableErrorSettings:
    """Build a fresh settings object from every configured source."""
    token = _CONFIG_PATH_OVERRIDE.set(Path(config_path) if config_path is not None else None)
    try:
        return StableErrorSettings(**_as_plain_dict(cli_params or {}))
    finally:
        _CONFIG_PATH_OVERRIDE.reset(token)


@lru_cache(maxsize=1)
def get_settings() -> StableErrorSettings:
    """Return the process-wide settings, loaded once."""
    return load_settings()


def reset_settings_cache() -> None:
    """Forget cached settings so the next ``get_settings`` reloads them."""
    get_settings.cache_clear()


def _as_plain_dict(value: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a mapping into plain nested ``dict`` values."""
    return {
        str(key): _as_plain_dict(subvalue) if isinstance(subvalue, Mapping) else subvalue
        for key, subvalue in value.items()
    }
