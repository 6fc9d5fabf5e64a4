"""
Socket table adapter.

Parses ``ss -tulpn`` output::

    Netid State  Recv-Q Send-Q Local Address:Port Peer Address:Port Process
    tcp   LISTEN 0      4096   0.0.0.0:22         0.0.0.0:*         users:(("sshd",pid=812,fd=3))
"""

from __future__ import annotations

import re

from devopsfetch.core.exceptions import SocketTableParseError
from devopsfetch.core.models import PortRecord

SS_COMMAND = ["ss", "-tulpn"]

_USERS_RE = re.compile(r'\(\("(?P<name>[^"]*)",pid=(?P<pid>\d+)')

# Netid State Recv-Q Send-Q Local Peer
_MIN_FIELDS = 6


def split_port(address: str) -> str:
    """Return the port part of ``addr:port`` (also ``[::]:80``, ``*:53``)."""
    if ":" not in address:
        raise SocketTableParseError(address, "address has no port")
    return address.rsplit(":", 1)[1]


def parse_process(field: str) -> tuple[str, str]:
    """
    Extract (service, pid/program) from the ss process column.

    Returns ("-", "-") when the process is not visible, which is the case
    for sockets owned by other users when not running as root.
    """
    match = _USERS_RE.search(field)
    if not match:
        return "-", "-"
    name = match.group("name")
    return name, f"{match.group('pid')}/{name}"


def parse_ss_output(output: str) -> list[PortRecord]:
    """Parse the socket table, keeping ss order."""
    records: list[PortRecord] = []
    for line in output.splitlines():
        if not line.strip() or line.startswith("Netid"):
            continue
        parts = line.split()
        if len(parts) < _MIN_FIELDS:
            raise SocketTableParseError(line, f"expected at least {_MIN_FIELDS} fields")
        protocol = parts[0]
        try:
            port = split_port(parts[4])
        except SocketTableParseError as e:
            raise SocketTableParseError(line, e.reason) from e
        service, process = parse_process(" ".join(parts[6:]))
        records.append(PortRecord(protocol=protocol, port=port, service=service, process=process))
    return records
