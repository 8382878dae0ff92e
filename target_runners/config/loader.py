"""Configuration loader for target runner resolution.

Loads configuration from YAML files and environment variables.
Environment variables override YAML values using the TARGETRUNNERS_ prefix.
Nested keys use double underscores: TARGETRUNNERS_MATCHING__IGNORE_CASE=true
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from target_runners.runtime.matcher import MatchOptions


class MatchingConfig(BaseModel):
    """Platform matching settings."""

    ignore_case: bool = Field(default=False, description="Case-insensitive platform search")
    literal: bool = Field(default=False, description="Match platforms as plain substrings")

    def to_options(self) -> MatchOptions:
        """Build matcher options from this section."""
        return MatchOptions(ignore_case=self.ignore_case, literal=self.literal)


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = Field(default="readable", pattern="^(readable|json)$")


class Config(BaseModel):
    """Root configuration model."""

    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _get_env_value(key: str) -> str | None:
    """Get environment variable with TARGETRUNNERS_ prefix."""
    env_key = f"TARGETRUNNERS_{key.upper()}"
    return os.environ.get(env_key)


def _apply_env_overrides(data: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    """Apply environment variable overrides to config data.

    Only keys present in the YAML data can be overridden; values are converted
    to the type of the value they replace.
    """
    result = data.copy()

    for key, value in result.items():
        env_key = f"{prefix}__{key}" if prefix else key

        if isinstance(value, dict):
            result[key] = _apply_env_overrides(value, env_key)
        else:
            env_value = _get_env_value(env_key)
            if env_value is not None:
                if isinstance(value, bool):
                    result[key] = env_value.lower() in ("true", "1", "yes")
                elif isinstance(value, int):
                    result[key] = int(env_value)
                elif isinstance(value, float):
                    result[key] = float(env_value)
                else:
                    result[key] = env_value

    return result


def default_config_path() -> Path:
    """Get the path of the bundled default configuration."""
    return Path(__file__).resolve().parents[2] / "configs" / "default.yaml"


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to YAML config file. If None, uses default.yaml.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValidationError: If config values are invalid.
    """
    config_path = default_config_path() if config_path is None else Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    # Overrides are applied on top of the full default tree so that keys
    # missing from the file can still be set from the environment.
    merged = _deep_merge(get_default_config().model_dump(), data)
    merged = _apply_env_overrides(merged)

    return Config.model_validate(merged)


def get_default_config() -> Config:
    """Get default configuration without loading from file."""
    return Config()


def _deep_merge(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()

    for key, value in updates.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
