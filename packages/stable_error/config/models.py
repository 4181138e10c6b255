"""Typed configuration models for stable error runtime settings.

Nothing here feeds identifier derivation: category defaults, the metadata
allow-list and normalization rules are fixed so identifiers agree across
machines regardless of local configuration.
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "stable-error" / "stable_error.yaml"
ENV_PREFIX = "STABLE_ERROR_"

_CONFIG_PATH_OVERRIDE: ContextVar[Path | None] = ContextVar(
    "stable_error_config_path", default=None
)


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "stable-error"
    environment: str = "dev"


class CaptureSettings(BaseModel):
    """Stack capture for records built from plain messages."""

    capture_stack: bool = True
    stack_limit: int | None = Field(default=None, gt=0)


class StableErrorSettings(BaseSettings):
    """Root settings resolved from init/env/yaml/default sources."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    capture: CaptureSettings = Field(default_factory=CaptureSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        yaml_file = _CONFIG_PATH_OVERRIDE.get() or DEFAULT_CONFIG_PATH
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=yaml_file,
                yaml_file_encoding="utf-8",
            ),
        )
