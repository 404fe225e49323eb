"""
CLI Configuration

Configuration management for the bob-verify CLI.
Supports a JSON configuration file, a .env file and environment variables.
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from dotenv import load_dotenv


# Environment variable prefix
ENV_PREFIX = "BOB_"

# Location the signer's public key is provisioned to, relative to the cwd
DEFAULT_TRUSTED_KEY_PATH = "alice_public_key_for_verify"

OUTPUT_FORMATS = ("human", "json")


class ConfigError(ValueError):
    """Raised when a configuration source is unusable."""


@dataclass
class CLIConfig:
    """Main CLI configuration."""

    # Trusted key source
    trusted_key_path: str = DEFAULT_TRUSTED_KEY_PATH

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    # Output
    default_output_format: str = "human"  # "human" or "json"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _apply(config: CLIConfig, data: dict[str, Any]) -> CLIConfig:
    """Copy known keys from data onto config, validating their types."""
    for key in ("trusted_key_path", "log_level", "default_output_format"):
        if key in data:
            value = data[key]
            if not isinstance(value, str) or not value:
                raise ConfigError(f"'{key}' must be a non-empty string")
            setattr(config, key, value)

    if "log_file" in data:
        value = data["log_file"]
        if value is not None and not isinstance(value, str):
            raise ConfigError("'log_file' must be a string or null")
        config.log_file = value or None

    if config.default_output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"'default_output_format' must be one of {list(OUTPUT_FORMATS)}, "
            f"got {config.default_output_format!r}"
        )
    return config


def load_config_from_env(config: CLIConfig | None = None) -> CLIConfig:
    """Overlay BOB_* environment variables onto a configuration."""
    config = config or CLIConfig()

    data: dict[str, Any] = {}
    if os.getenv(f"{ENV_PREFIX}TRUSTED_KEY_PATH"):
        data["trusted_key_path"] = os.getenv(f"{ENV_PREFIX}TRUSTED_KEY_PATH")
    if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        data["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING")
    if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        data["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
        data["default_output_format"] = os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT", "human").lower()

    return _apply(config, data)


def load_config_from_file(path: Path) -> CLIConfig:
    """Load configuration from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    return _apply(CLIConfig(), data)


def load_config(config_path: Path | None = None) -> CLIConfig:
    """
    Load configuration from file and/or environment.

    Environment variables (including those set by a .env file in the
    working directory) override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration
    """
    config = CLIConfig()

    if config_path is not None:
        config = load_config_from_file(config_path)
    else:
        default_paths = [
            Path.cwd() / "bob.json",
            Path.cwd() / ".bob.json",
            Path.home() / ".config" / "bob" / "config.json",
        ]
        for default_path in default_paths:
            if default_path.exists():
                config = load_config_from_file(default_path)
                break

    load_dotenv(Path.cwd() / ".env")
    return load_config_from_env(config)
