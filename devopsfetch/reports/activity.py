"""
Activity report: system journal entries within a time window.
"""

from __future__ import annotations

from loguru import logger

from devopsfetch.core.context import ReportContext
from devopsfetch.core.exceptions import CommandFailedError, MissingArgumentError
from devopsfetch.core.models import LogWindow

TIME_FORMAT_HINT = 'Use -t "YYYY-MM-DD HH:MM:SS" "YYYY-MM-DD HH:MM:SS"'


def journal_command(since: str, until: str) -> list[str]:
    return ["journalctl", "--since", since, "--until", until, "-p", "info", "--no-pager"]


def read_log_window(ctx: ReportContext, since: str | None, until: str | None) -> LogWindow:
    """
    Query the journal for info-and-above entries between two bounds.

    Bounds are passed to journalctl as given, so its own tokens ("now",
    "yesterday", ...) work. Only the first ``log_window_limit`` lines are
    kept.
    """
    if not since or not until:
        raise MissingArgumentError(
            f"Both start and end time are required. {TIME_FORMAT_HINT}",
            {"since": since, "until": until},
        )

    ctx.executor.require("journalctl")
    result = ctx.executor.run(journal_command(since, until))
    if not result.success and not result.stdout.strip():
        raise CommandFailedError(result.command or "journalctl", result.exit_code, result.stderr)

    limit = ctx.settings.log_window_limit
    lines = result.stdout.splitlines()
    window = LogWindow(
        since=since,
        until=until,
        limit=limit,
        lines=lines[:limit],
        truncated=len(lines) > limit,
    )
    logger.debug(f"journal window {since} .. {until}: {len(lines)} lines, kept {len(window.lines)}")
    return window


def show_time_range(ctx: ReportContext, since: str | None, until: str | None) -> None:
    """Print the journal window between ``since`` and ``until``."""
    window = read_log_window(ctx, since, until)
    if window.truncated:
        logger.info(f"Journal window {window.since} .. {window.until} cut at {window.limit} lines")
    ctx.ui.heading(f"System Activities from {window.since} to {window.until}")
    ctx.ui.verbatim(window.lines)
    ctx.ui.newline()
    ctx.ui.muted(f"(Showing first {window.limit} INFO/WARNING/ERROR entries)")
