"""Public API for stable error configuration."""

from .loader import get_settings, load_settings, reset_settings_cache
from .models import (
    DEFAULT_CONFIG_PATH,
    ENV_PREFIX,
    CaptureSettings,
    LoggingSettings,
    StableErrorSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "CaptureSettings",
    "LoggingSettings",
    "StableErrorSettings",
    "get_settings",
    "load_settings",
    "reset_settings_cache",
]
