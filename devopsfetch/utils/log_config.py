"""
Logging configuration for devopsfetch.

Provides:
- Log directory management
- Daily rotation with a week of compressed generations
- Verbosity levels
- Environment overrides (DEVOPSFETCH_LOG_*)
"""
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Dict, Optional

from devopsfetch.config.constants import DATA_DIR


class LogLevel(str, Enum):
    """Log verbosity levels."""
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def from_string(cls, level: str) -> "LogLevel":
        """Parse log level from string (case-insensitive)."""
        level = level.upper()
        try:
            return cls(level)
        except ValueError:
            aliases = {
                "WARN": cls.WARNING,
                "ERR": cls.ERROR,
                "CRIT": cls.CRITICAL,
                "FATAL": cls.CRITICAL,
            }
            if level in aliases:
                return aliases[level]
            raise ValueError(f"Unknown log level: {level}") from None


@dataclass
class LogConfig:
    """
    Configuration for devopsfetch logging.

    Attributes:
        log_dir: Directory for log files (default: ~/.devopsfetch/logs)
        app_log_name: Log filename
        console_level: Log level for stderr output (only with --verbose)
        file_level: Log level for file output
        rotation: When to rotate (loguru syntax, e.g. "1 day", "10 MB")
        retention: How long to keep old logs (e.g. "7 days")
        compression: Compress rotated files (zip, gz, or None)
        file_enabled: Write the log file at all
        console_enabled: Log to stderr even without --verbose
    """
    log_dir: str = ""
    app_log_name: str = "devopsfetch.log"

    console_level: str = "WARNING"
    file_level: str = "DEBUG"

    rotation: str = "1 day"
    retention: str = "7 days"
    compression: Optional[str] = "gz"

    file_enabled: bool = True
    console_enabled: bool = False

    _VALID_COMPRESSION: ClassVar[frozenset] = frozenset({"zip", "gz", None})

    def __post_init__(self):
        """Validate and set defaults."""
        if not self.log_dir:
            self.log_dir = str(DATA_DIR / "logs")

        try:
            self.console_level = LogLevel.from_string(self.console_level).value
        except ValueError as e:
            raise ValueError(f"Invalid console_level: {e}") from e

        try:
            self.file_level = LogLevel.from_string(self.file_level).value
        except ValueError as e:
            raise ValueError(f"Invalid file_level: {e}") from e

        if self.compression not in self._VALID_COMPRESSION:
            raise ValueError(
                f"compression must be one of {set(self._VALID_COMPRESSION)}, "
                f"got: {self.compression!r}"
            )

        if not self.rotation.strip():
            raise ValueError("rotation must not be empty")

    @property
    def log_path(self) -> Path:
        """Get the full path to the log file."""
        return Path(self.log_dir) / self.app_log_name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogConfig":
        """Create from dictionary, ignoring unknown keys."""
        known_fields = {
            "log_dir", "app_log_name", "console_level", "file_level",
            "rotation", "retention", "compression", "file_enabled", "console_enabled",
        }
        filtered = {k: v for k, v in data.items() if k in known_fields}
        return cls(**filtered)


ENV_MAPPINGS = {
    "DEVOPSFETCH_LOG_DIR": "log_dir",
    "DEVOPSFETCH_LOG_LEVEL": "console_level",
    "DEVOPSFETCH_LOG_FILE_LEVEL": "file_level",
    "DEVOPSFETCH_LOG_FILE": "file_enabled",
    "DEVOPSFETCH_LOG_CONSOLE": "console_enabled",
}


def load_log_config() -> LogConfig:
    """
    Load logging configuration.

    Priority:
    1. Environment variables (DEVOPSFETCH_LOG_*)
    2. Defaults
    """
    config_data: Dict[str, Any] = {}

    for env_var, config_key in ENV_MAPPINGS.items():
        value = os.environ.get(env_var)
        if value is None:
            continue
        if config_key in ("file_enabled", "console_enabled"):
            config_data[config_key] = value.lower() in ("1", "true", "yes", "on")
        else:
            config_data[config_key] = value

    return LogConfig.from_dict(config_data)
