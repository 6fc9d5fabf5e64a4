"""
devopsfetch Config - Settings file loading.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from devopsfetch.config.constants import CONFIG_FILE
from devopsfetch.config.models import Settings
from devopsfetch.core.exceptions import ConfigurationError


def load_settings(path: Path | None = None) -> Settings:
    """
    Load settings from a YAML file.

    A missing default file means defaults. An explicitly requested file that
    does not exist, or any file with invalid content, raises
    ConfigurationError.
    """
    explicit = path is not None
    path = Path(path) if explicit else CONFIG_FILE

    if not path.exists():
        if explicit:
            raise ConfigurationError(f"Settings file not found: {path}", {"path": str(path)})
        logger.debug(f"No settings file at {path}, using defaults")
        return Settings()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read settings file {path}: {e}", {"path": str(path)}) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Settings file {path} must contain a mapping", {"path": str(path)}
        )

    try:
        settings = Settings(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings in {path}: {e}", {"path": str(path)}) from e

    logger.debug(f"Loaded settings from {path}")
    return settings
