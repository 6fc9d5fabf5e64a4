"""
Monitor report: every section in a fixed order, for periodic runs.

Scheduling and log rotation belong to the caller (a systemd timer or loop
appending stdout to a log file).
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from loguru import logger

from devopsfetch.core.context import ReportContext
from devopsfetch.core.exceptions import DevopsfetchError
from devopsfetch.reports.containers import show_docker
from devopsfetch.reports.ports import show_ports
from devopsfetch.reports.routes import show_nginx
from devopsfetch.reports.users import show_users

TIME_FMT = "%Y-%m-%d %H:%M:%S"

MONITOR_SECTIONS: list[tuple[str, Callable[[ReportContext], None]]] = [
    ("ports", show_ports),
    ("docker", show_docker),
    ("nginx", show_nginx),
    ("users", show_users),
]


def continuous_monitor(ctx: ReportContext, now: datetime | None = None) -> list[str]:
    """
    Run all sections once.

    A failing section prints its error and the next one still runs.

    Returns:
        Names of the sections that failed.
    """
    now = now or datetime.now()
    ctx.ui.banner(f"devopsfetch Monitor Run: {now.strftime(TIME_FMT)}")
    logger.info("Monitor run started")

    failed: list[str] = []
    for index, (name, section) in enumerate(MONITOR_SECTIONS):
        if index:
            ctx.ui.newline()
        try:
            section(ctx)
        except DevopsfetchError as e:
            logger.error(f"Monitor section {name} failed: {e}")
            ctx.ui.error(e.message)
            failed.append(name)

    logger.info(f"Monitor run finished, {len(failed)} section(s) failed")
    return failed
