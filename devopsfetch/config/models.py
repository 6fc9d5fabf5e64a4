"""
devopsfetch Config - Configuration models.

Pydantic models for type-safe configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from devopsfetch.config.constants import (
    COMMAND_TIMEOUT,
    LOG_WINDOW_LIMIT,
    LOGIN_HISTORY_LIMIT,
    MIN_USER_UID,
    NGINX_CONF_DIR,
    PASSWD_FILE,
)


class Settings(BaseModel):
    """Report settings."""

    model_config = ConfigDict(extra="forbid")

    nginx_conf_dir: Path = Field(
        default=Path(NGINX_CONF_DIR), description="Directory of enabled nginx sites"
    )
    passwd_file: Path = Field(default=Path(PASSWD_FILE), description="Account database file")
    min_uid: int = Field(default=MIN_USER_UID, ge=0, description="Lowest uid listed as a user")
    log_window_limit: int = Field(
        default=LOG_WINDOW_LIMIT, ge=1, description="Max journal lines for -t"
    )
    login_history_limit: int = Field(
        default=LOGIN_HISTORY_LIMIT, ge=1, description="Login history lines for -u USER"
    )
    command_timeout: float = Field(
        default=COMMAND_TIMEOUT, gt=0, le=3600, description="External command timeout in seconds"
    )
