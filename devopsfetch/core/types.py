"""
devopsfetch Core - Shared types and enums.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any


class CheckStatus(StrEnum):
    """Dependency check status."""

    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


class Topic(StrEnum):
    """Report topic selected on the command line."""

    PORT = "port"
    DOCKER = "docker"
    NGINX = "nginx"
    USERS = "users"
    TIME = "time"
    MONITOR = "monitor"
    CHECK = "check"


@dataclass
class HealthCheck:
    """Result of a dependency check."""

    name: str
    status: CheckStatus
    message: str
    critical: bool = False
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class CommandResult:
    """Result of a command execution."""

    stdout: str
    stderr: str
    exit_code: int
    duration_ms: float
    command: str | None = None
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def success(self) -> bool:
        """True when the command exited with status 0."""
        return self.exit_code == 0
