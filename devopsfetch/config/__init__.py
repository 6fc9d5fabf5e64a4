"""
devopsfetch Config - Configuration management.
"""

from devopsfetch.config.loader import load_settings
from devopsfetch.config.models import Settings

__all__ = [
    "Settings",
    "load_settings",
]
