"""YAML config loader with environment and command line overrides."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pogoda.config.schema import WeatherConfig

logger = logging.getLogger(__name__)

# test fixtures point these at a local server
ENV_OVERRIDES = {
    "YANDEX_WEATHER_BASE_URL": "base_url",
    "YANDEX_WEATHER_HOURLY_URL": "hourly_url",
    "YANDEX_WEATHER_USER_AGENT": "user_agent",
}


class ConfigError(Exception):
    pass


def load_config(
    path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    **overrides: Any,
) -> WeatherConfig:
    """Build the run config: YAML file, then environment, then overrides.

    Overrides set to None are ignored so unset command line flags keep the
    file or default value.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        raw = _read_yaml(Path(path))

    if env is None:
        env = os.environ
    for var, key in ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            logger.debug("Config %s overridden from %s", key, var)
            raw[key] = value

    raw.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return WeatherConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}") from e


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse config {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping")
    return raw
