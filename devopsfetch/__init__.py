"""
devopsfetch - DevOps system information retrieval and monitoring.

Collects listening ports, container state, nginx routing, user logins and
journal activity from the local host into a readable report.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("devopsfetch")
except PackageNotFoundError:
    # Package not installed, fallback to pyproject.toml
    __version__ = "0.1.0"

__author__ = "devopsfetch Contributors"
