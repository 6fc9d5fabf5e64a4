"""
User report: interactive accounts with their last login, or one account.
"""

from __future__ import annotations

from loguru import logger

from devopsfetch.config.constants import NEVER_LOGGED_IN, NO_ORIGIN
from devopsfetch.core.context import ReportContext
from devopsfetch.core.exceptions import DevopsfetchError
from devopsfetch.core.models import AccountEntry, LoginEntry, UserRecord
from devopsfetch.parsers.last import last_command, parse_last_login
from devopsfetch.parsers.passwd import find_account, iter_accounts

USER_HEADERS = ["USERNAME", "UID", "LAST_LOGIN", "LOGIN_FROM"]


def _read_passwd(ctx: ReportContext) -> str:
    path = ctx.settings.passwd_file
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise DevopsfetchError(f"Cannot read account database {path}: {e}", {"path": str(path)}) from e


def interactive_accounts(ctx: ReportContext) -> list[AccountEntry]:
    """Accounts at or above the minimum uid with a login shell."""
    min_uid = ctx.settings.min_uid
    return [
        account
        for account in iter_accounts(_read_passwd(ctx))
        if account.uid >= min_uid and account.is_interactive()
    ]


def last_login(ctx: ReportContext, username: str) -> LoginEntry | None:
    result = ctx.executor.run(last_command(username, 1))
    if not result.success:
        logger.warning(f"last {username} exited {result.exit_code}: {result.stderr.strip()}")
        return None
    return parse_last_login(result.stdout)


def list_users(ctx: ReportContext) -> list[UserRecord]:
    """Interactive accounts with their most recent login."""
    has_last = ctx.executor.which("last") is not None
    if not has_last:
        logger.warning("last command not found, login history unavailable")

    records = []
    for account in interactive_accounts(ctx):
        login = last_login(ctx, account.username) if has_last else None
        if login is None:
            login = LoginEntry(origin=NO_ORIGIN, time=NEVER_LOGGED_IN)
        records.append(
            UserRecord(
                username=account.username,
                uid=account.uid,
                last_login=login.time,
                login_from=login.origin,
            )
        )
    return records


def login_history(ctx: ReportContext, username: str) -> list[str]:
    """Most recent ``last`` lines for ``username``, verbatim."""
    limit = ctx.settings.login_history_limit
    if ctx.executor.which("last") is None:
        logger.warning("last command not found, login history unavailable")
        return []
    result = ctx.executor.run(last_command(username, limit))
    if not result.success:
        logger.warning(f"last {username} exited {result.exit_code}: {result.stderr.strip()}")
    return result.stdout.splitlines()[:limit]


def show_users(ctx: ReportContext, username: str | None = None) -> None:
    """Print the user table, or the details of ``username``."""
    if not username:
        users = list_users(ctx)
        ctx.ui.heading("System Users and Last Login")
        ctx.ui.table(USER_HEADERS, [u.row() for u in users])
        return

    ctx.ui.heading(f"Detailed Information for User: {username}")
    account = find_account(_read_passwd(ctx), username)
    if account is None:
        logger.info(f"No account named {username}")
    else:
        ctx.ui.details(account.fields())

    ctx.ui.newline()
    ctx.ui.heading(f"Recent Login History for {username}")
    ctx.ui.verbatim(login_history(ctx, username))
