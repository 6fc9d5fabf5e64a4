"""
devopsfetch CLI - Command dispatcher.

Maps one selector flag to one report routine. Exactly one selector is
accepted per invocation; with none at all, the help text is printed.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import click
from loguru import logger

from devopsfetch import __version__
from devopsfetch.config import load_settings
from devopsfetch.core.context import ReportContext
from devopsfetch.core.exceptions import ConfigurationError, DevopsfetchError
from devopsfetch.core.types import Topic
from devopsfetch.executors.local import LocalExecutor
from devopsfetch.reports import (
    continuous_monitor,
    show_checks,
    show_docker,
    show_nginx,
    show_ports,
    show_time_range,
    show_users,
)
from devopsfetch.ui.console import ConsoleUI
from devopsfetch.utils.logger import setup_logger

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

SINGLE_ARGUMENT_ROUTINES: dict[Topic, Callable[[ReportContext, str | None], None]] = {
    Topic.PORT: show_ports,
    Topic.DOCKER: show_docker,
    Topic.NGINX: show_nginx,
    Topic.USERS: show_users,
}


def dispatch(report_ctx: ReportContext, topic: Topic, value: str | None, extra: tuple[str, ...] = ()) -> int:
    """
    Run the routine for ``topic`` and return the process exit status.

    Errors raised by the routine are reported on stderr and turned into
    status 1.
    """
    logger.debug(f"Dispatching {topic} value={value!r} extra={extra!r}")
    try:
        if topic in SINGLE_ARGUMENT_ROUTINES:
            SINGLE_ARGUMENT_ROUTINES[topic](report_ctx, value or None)
        elif topic == Topic.TIME:
            show_time_range(report_ctx, value or None, extra[0] if extra else None)
        elif topic == Topic.MONITOR:
            return 1 if continuous_monitor(report_ctx) else 0
        elif topic == Topic.CHECK:
            return 0 if show_checks(report_ctx).ok else 1
    except DevopsfetchError as e:
        logger.error(f"{topic} report failed: {e}")
        report_ctx.ui.error(e.message)
        return 1
    return 0


def build_context(config_path: Path | None, ui: ConsoleUI | None = None) -> ReportContext:
    """Load settings and assemble the report context."""
    settings = load_settings(config_path)
    return ReportContext(
        settings=settings,
        executor=LocalExecutor(timeout=settings.command_timeout),
        ui=ui or ConsoleUI(),
    )


def _optional_value(short: str, long: str, metavar: str, help_text: str):
    return click.option(
        short, long, is_flag=False, flag_value="", default=None, metavar=metavar, help=help_text
    )


@click.command(
    context_settings=CONTEXT_SETTINGS,
    epilog='Example: devopsfetch -t "2024-01-01 00:00:00" now',
)
@_optional_value("-p", "--port", "[PORT]",
                 "Display all active ports and services, or the listeners of PORT.")
@_optional_value("-d", "--docker", "[CONTAINER]",
                 "List Docker images and containers, or details of CONTAINER.")
@_optional_value("-n", "--nginx", "[DOMAIN]",
                 "Display Nginx domains and their ports, or the config of DOMAIN.")
@_optional_value("-u", "--users", "[USER]",
                 "List users and their last login times, or details of USER.")
@_optional_value("-t", "--time", "START END",
                 'Display journal activity within a time range. Format: "YYYY-MM-DD HH:MM:SS".')
@click.option("-m", "--monitor", is_flag=True,
              help="Run every section once (for periodic monitoring).")
@click.option("-c", "--check", is_flag=True, help="Check which external tools are available.")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.option("--config", "config_path", default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help="Settings file (default: ~/.devopsfetch/config.yaml).")
@click.version_option(__version__, "--version", prog_name="devopsfetch")
@click.argument("args", nargs=-1, metavar="")
@click.pass_context
def cli(ctx, port, docker, nginx, users, time, monitor, check, verbose, config_path, args):
    """devopsfetch - DevOps System Information Retrieval Tool."""
    candidates = [
        (Topic.PORT, port),
        (Topic.DOCKER, docker),
        (Topic.NGINX, nginx),
        (Topic.USERS, users),
        (Topic.TIME, time),
        (Topic.MONITOR, None if not monitor else ""),
        (Topic.CHECK, None if not check else ""),
    ]
    selected = [(topic, value) for topic, value in candidates if value is not None]

    if not selected:
        if args:
            raise click.UsageError(f"Unexpected argument: {args[0]}")
        click.echo(ctx.get_help())
        ctx.exit(0)
    if len(selected) > 1:
        raise click.UsageError("Use only one of -p, -d, -n, -u, -t, -m, -c per run.")

    topic, value = selected[0]
    allowed = 1 if topic == Topic.TIME else 0
    if len(args) > allowed:
        raise click.UsageError(f"Unexpected argument: {args[allowed]}")

    setup_logger(verbose=verbose)
    ui = ConsoleUI()
    try:
        report_ctx = build_context(config_path, ui)
    except ConfigurationError as e:
        logger.error(str(e))
        ui.error(e.message)
        ctx.exit(1)

    ctx.exit(dispatch(report_ctx, topic, value, tuple(args)))


def main() -> None:
    cli(prog_name="devopsfetch")
