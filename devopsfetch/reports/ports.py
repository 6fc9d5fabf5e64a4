"""
Port report: listening sockets, or the processes bound to one port.
"""

from __future__ import annotations

from loguru import logger

from devopsfetch.core.context import ReportContext
from devopsfetch.core.exceptions import CommandFailedError, InvalidArgumentError
from devopsfetch.core.models import PortProcessRecord, PortRecord
from devopsfetch.parsers.lsof import lsof_command, parse_lsof_listeners
from devopsfetch.parsers.sockets import SS_COMMAND, parse_ss_output

PORT_HEADERS = ["PROTOCOL", "PORT", "SERVICE", "PID/Program"]
PORT_DETAIL_HEADERS = ["PID", "USER", "COMMAND", "PROTOCOL", "PORT"]


def list_listening_ports(ctx: ReportContext) -> list[PortRecord]:
    """All listening sockets, in socket-table order."""
    result = ctx.executor.run(SS_COMMAND)
    if not result.success:
        raise CommandFailedError(result.command or "ss", result.exit_code, result.stderr)
    records = parse_ss_output(result.stdout)
    logger.debug(f"ss reported {len(records)} listening sockets")
    return records


def find_port_listeners(ctx: ReportContext, port: str) -> list[PortProcessRecord]:
    """Processes listening on ``port``; empty when nothing listens there."""
    if not (port.isascii() and port.isdigit()) or not 0 < int(port) < 65536:
        raise InvalidArgumentError(f"Invalid port number: {port}", {"port": port})
    # lsof prints ports without leading zeros.
    port = str(int(port))

    result = ctx.executor.run(lsof_command(port))
    # lsof exits 1 when no file matches.
    if result.exit_code > 1:
        raise CommandFailedError(result.command or "lsof", result.exit_code, result.stderr)
    if result.stderr.strip():
        logger.debug(f"lsof stderr: {result.stderr.strip()}")
    return parse_lsof_listeners(result.stdout, port)


def show_ports(ctx: ReportContext, port: str | None = None) -> None:
    """Print the port table, or the listeners of ``port`` when given."""
    ctx.ui.heading("Active Ports and Services")
    if not port:
        ctx.ui.table(PORT_HEADERS, [r.row() for r in list_listening_ports(ctx)])
        return

    ctx.ui.heading(f"Details for Port: {port}")
    listeners = find_port_listeners(ctx, port)
    if not listeners:
        logger.info(f"Nothing is listening on port {port}")
    ctx.ui.table(PORT_DETAIL_HEADERS, [r.row() for r in listeners])
