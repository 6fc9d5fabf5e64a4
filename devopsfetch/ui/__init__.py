"""
devopsfetch UI - Console output.
"""

from devopsfetch.ui.console import ConsoleUI

__all__ = ["ConsoleUI"]
