"""
devopsfetch Core - Shared types and errors.

The report context lives in devopsfetch.core.context and is imported from
there directly.
"""

from devopsfetch.core.exceptions import DevopsfetchError
from devopsfetch.core.types import CheckStatus, CommandResult, HealthCheck, Topic

__all__ = [
    "CheckStatus",
    "CommandResult",
    "DevopsfetchError",
    "HealthCheck",
    "Topic",
]
