"""
devopsfetch Executors - External command invocation.
"""

from devopsfetch.executors.local import LocalExecutor

__all__ = ["LocalExecutor"]
