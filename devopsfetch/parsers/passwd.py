"""
Account database adapter (``/etc/passwd`` format).
"""

from __future__ import annotations

from collections.abc import Iterator

from devopsfetch.core.exceptions import PasswdParseError
from devopsfetch.core.models import AccountEntry

# name:password:uid:gid:gecos:home:shell
_FIELDS = 7


def parse_passwd_line(line: str) -> AccountEntry:
    parts = line.split(":")
    if len(parts) != _FIELDS:
        raise PasswdParseError(line, f"expected {_FIELDS} fields, got {len(parts)}")
    try:
        uid = int(parts[2])
        gid = int(parts[3])
    except ValueError as e:
        raise PasswdParseError(line, "uid/gid is not a number") from e
    return AccountEntry(
        username=parts[0],
        uid=uid,
        gid=gid,
        home=parts[5],
        shell=parts[6],
    )


def iter_accounts(text: str) -> Iterator[AccountEntry]:
    """Yield accounts in file order, skipping blanks, comments and NIS markers."""
    for raw in text.splitlines():
        line = raw.rstrip("\n")
        if not line.strip() or line.startswith(("#", "+", "-")):
            continue
        yield parse_passwd_line(line)


def find_account(text: str, username: str) -> AccountEntry | None:
    for account in iter_accounts(text):
        if account.username == username:
            return account
    return None
