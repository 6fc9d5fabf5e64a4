"""
Reverse-proxy configuration adapter.

Reads nginx site files line by line; no full config grammar is attempted.
"""

from __future__ import annotations

from pathlib import Path


def _directive_values(line: str, directive: str) -> list[str] | None:
    """Values of ``directive`` on this line, or None if the line doesn't declare it."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    stripped = stripped.split("#", 1)[0]
    tokens = stripped.replace(";", " ").split()
    if len(tokens) < 2 or tokens[0] != directive:
        return None
    return tokens[1:]


def server_names(text: str) -> list[list[str]]:
    """All ``server_name`` declarations, each as its list of names."""
    declarations = []
    for line in text.splitlines():
        values = _directive_values(line, "server_name")
        if values:
            declarations.append(values)
    return declarations


def first_server_name(text: str) -> str | None:
    """First name of the first ``server_name`` declaration."""
    declarations = server_names(text)
    return declarations[0][0] if declarations else None


def first_plain_listen(text: str) -> str | None:
    """Address of the first ``listen`` declaration that is not a TLS listener."""
    for line in text.splitlines():
        if "ssl" in line:
            continue
        values = _directive_values(line, "listen")
        if values:
            return values[0]
    return None


def declares_server_name(text: str, domain: str) -> bool:
    """True if any ``server_name`` declaration lists exactly ``domain``."""
    return any(domain in names for names in server_names(text))


def read_config(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")
