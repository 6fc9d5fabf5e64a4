"""
Open-file adapter.

Parses ``lsof -i :PORT -n -P`` output::

    COMMAND  PID USER   FD   TYPE DEVICE SIZE/OFF NODE NAME
    nginx   1234 root    6u  IPv4  23456      0t0  TCP *:80 (LISTEN)
"""

from __future__ import annotations

from devopsfetch.core.exceptions import LsofParseError
from devopsfetch.core.models import PortProcessRecord

LISTEN_STATE = "(LISTEN)"

# COMMAND PID USER FD TYPE DEVICE SIZE/OFF NODE NAME
_MIN_FIELDS = 9


def lsof_command(port: str) -> list[str]:
    return ["lsof", "-i", f":{port}", "-n", "-P"]


def parse_lsof_listeners(output: str, port: str) -> list[PortProcessRecord]:
    """
    Return processes listening on exactly ``port``.

    Rows for the same process, protocol and port (typically one per address
    family) are reported once.
    """
    records: list[PortProcessRecord] = []
    seen: set[PortProcessRecord] = set()
    for line in output.splitlines():
        if not line.strip() or line.startswith("COMMAND"):
            continue
        parts = line.split()
        if len(parts) < _MIN_FIELDS:
            raise LsofParseError(line, f"expected at least {_MIN_FIELDS} fields")

        state = parts[9] if len(parts) > 9 else ""
        if state != LISTEN_STATE:
            continue

        name = parts[8]
        if ":" not in name:
            raise LsofParseError(line, "name has no port")
        local_port = name.rsplit(":", 1)[1]
        if local_port != port:
            continue

        record = PortProcessRecord(
            pid=parts[1],
            user=parts[2],
            command=parts[0],
            protocol=parts[7],
            port=local_port,
        )
        if record in seen:
            continue
        seen.add(record)
        records.append(record)
    return records
