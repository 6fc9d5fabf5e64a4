"""
Login history adapter.

Parses ``last`` output::

    alice    pts/0        192.168.1.10     Mon Oct 14 09:12   still logged in
    alice    tty1                          Sun Oct 13 18:01 - 18:30  (00:29)

    wtmp begins Tue Oct  1 00:00:01 2024
"""

from __future__ import annotations

from devopsfetch.core.exceptions import LastParseError
from devopsfetch.core.models import LoginEntry

WEEKDAYS = frozenset({"Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"})

# user tty [host] weekday month day time
_MIN_FIELDS = 6


def last_command(username: str, count: int) -> list[str]:
    return ["last", "-n", str(count), username]


def is_footer(line: str) -> bool:
    """True for the trailing ``wtmp begins ...`` line."""
    return line.split(" ", 1)[0].endswith("tmp") and "begins" in line


def parse_login_line(line: str) -> LoginEntry:
    parts = line.split()
    if len(parts) < _MIN_FIELDS:
        raise LastParseError(line, f"expected at least {_MIN_FIELDS} fields")

    # Local logins have an empty host column, so the date starts at field 2.
    if parts[2] in WEEKDAYS:
        origin, date_start = "-", 2
    else:
        origin, date_start = parts[2], 3

    date_parts = parts[date_start:date_start + 4]
    if len(date_parts) < 4 or date_parts[0] not in WEEKDAYS:
        raise LastParseError(line, "no login date")
    return LoginEntry(origin=origin, time=" ".join(date_parts))


def parse_last_login(output: str) -> LoginEntry | None:
    """Most recent login from ``last`` output, or None if there is none."""
    for line in output.splitlines():
        if not line.strip():
            continue
        if is_footer(line):
            return None
        return parse_login_line(line)
    return None
