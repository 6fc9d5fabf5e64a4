"""
Nginx report: domains and ports of enabled sites, or one site's config.
"""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from devopsfetch.core.context import ReportContext
from devopsfetch.core.exceptions import ConfigDirMissingError, NotFoundError
from devopsfetch.core.models import RouteRecord
from devopsfetch.parsers.nginx import (
    declares_server_name,
    first_plain_listen,
    first_server_name,
    read_config,
)

ROUTE_HEADERS = ["DOMAIN", "PORT", "CONFIG_FILE"]


def _conf_dir(ctx: ReportContext) -> Path:
    conf_dir = Path(ctx.settings.nginx_conf_dir)
    if not conf_dir.is_dir():
        raise ConfigDirMissingError(str(conf_dir))
    return conf_dir


def enabled_site_files(conf_dir: Path) -> list[Path]:
    """Real files behind the symlinks of an enabled-sites directory."""
    files = []
    for entry in sorted(conf_dir.rglob("*")):
        if not entry.is_symlink():
            continue
        try:
            target = entry.resolve()
        except (OSError, RuntimeError) as e:
            # RuntimeError: symlink loop on Python < 3.13
            logger.debug(f"Skipping unresolvable link {entry}: {e}")
            continue
        if target.is_file():
            files.append(target)
        else:
            logger.debug(f"Skipping dangling or non-file link {entry} -> {target}")
    return files


def list_routes(ctx: ReportContext) -> list[RouteRecord]:
    """Sites declaring both a server name and a plain listen port."""
    routes = []
    for config_file in enabled_site_files(_conf_dir(ctx)):
        try:
            text = read_config(config_file)
        except OSError as e:
            logger.warning(f"Cannot read {config_file}: {e}")
            continue
        domain = first_server_name(text)
        port = first_plain_listen(text)
        if domain and port:
            routes.append(RouteRecord(domain=domain, port=port, config_file=config_file.name))
        else:
            logger.debug(f"Skipping {config_file}: server_name={domain!r} listen={port!r}")
    return routes


def find_route_config(ctx: ReportContext, domain: str) -> Path:
    """First file under the config tree whose server_name lists ``domain``."""
    conf_dir = _conf_dir(ctx)
    for root, _dirs, files in sorted(os.walk(conf_dir, followlinks=True)):
        for name in sorted(files):
            path = Path(root) / name
            try:
                text = read_config(path)
            except OSError as e:
                logger.debug(f"Cannot read {path}: {e}")
                continue
            if declares_server_name(text, domain):
                return path
    raise NotFoundError(
        "nginx configuration", domain, f"No Nginx configuration found for domain {domain}."
    )


def show_nginx(ctx: ReportContext, domain: str | None = None) -> None:
    """Print the domain table, or the full configuration of ``domain``."""
    if not domain:
        routes = list_routes(ctx)
        ctx.ui.heading("Nginx Domains and Ports")
        ctx.ui.table(ROUTE_HEADERS, [r.row() for r in routes])
        return

    config_file = find_route_config(ctx, domain)
    ctx.ui.heading(f"Nginx Configuration Details for {domain}")
    ctx.ui.text(f"Configuration File: {config_file}")
    ctx.ui.text("-" * 35)
    ctx.ui.verbatim(read_config(config_file).splitlines())
