"""Runtime settings and adapter property files."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Union

import yaml

from bridgemock.core.errors import ConfigurationError

__all__: list[str] = ["Settings", "get_settings", "load_properties"]


class Settings:  # noqa: D101
    def __init__(self) -> None:
        self.app_env: str = os.getenv("BRIDGE_ENV", "development")
        self.adapter: str = os.getenv("BRIDGE_ADAPTER", "mock")
        self.log_level: str = os.getenv("BRIDGE_LOG_LEVEL", "WARNING")


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # noqa: D401
    """Return cached Settings instance."""

    return Settings()


def load_properties(config_path: Union[str, Path]) -> dict[str, str]:
    """
    Load adapter property values from a YAML file.

    The file must contain a flat mapping of property name to value. An empty
    file yields no properties.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML or is
            not a mapping
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigurationError(f"Property file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML format: {e}")

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("Property file must be a YAML dictionary/object")

    return {str(k): ("" if v is None else str(v)) for k, v in raw.items()}
