"""Settings for the registry CLI, from an optional YAML file and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import click
import yaml

DEFAULT_ADMIN = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
DEFAULT_STATE_PATH = ".supplier_registry/state.json"

ENV_PREFIX = "SUPPLIER_REGISTRY_"


class ConfigError(click.ClickException):
    """The config file is present but not usable."""

    exit_code = 2


@dataclass
class Settings:
    """Runtime settings for the CLI host."""

    admin: str = DEFAULT_ADMIN
    state_path: str = DEFAULT_STATE_PATH
    log_level: str = "INFO"
    log_json: bool = False


def load_settings(path: str | Path | None = None) -> Settings:
    """Build settings from defaults, then the YAML file, then the environment."""
    settings = Settings()

    if path is not None:
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        settings.admin = str(data.get("admin", settings.admin))
        settings.state_path = str(data.get("state_path", settings.state_path))
        settings.log_level = str(data.get("log_level", settings.log_level))
        settings.log_json = bool(data.get("log_json", settings.log_json))

    settings.admin = os.environ.get(ENV_PREFIX + "ADMIN", settings.admin)
    settings.state_path = os.environ.get(ENV_PREFIX + "STATE", settings.state_path)
    settings.log_level = os.environ.get(ENV_PREFIX + "LOG_LEVEL", settings.log_level)
    if ENV_PREFIX + "LOG_JSON" in os.environ:
        settings.log_json = _parse_bool(os.environ[ENV_PREFIX + "LOG_JSON"])

    return settings


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")
