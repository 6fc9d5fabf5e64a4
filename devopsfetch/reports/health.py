"""
Dependency check: which external collaborators are present on this host.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from loguru import logger

from devopsfetch.core.context import ReportContext
from devopsfetch.core.types import CheckStatus, HealthCheck

CHECK_HEADERS = ["CHECK", "STATUS", "DETAIL"]

# tool -> (used for, critical)
TOOLS: dict[str, tuple[str, bool]] = {
    "ss": ("port listing (-p)", True),
    "lsof": ("port details (-p PORT)", True),
    "docker": ("containers (-d)", False),
    "last": ("login history (-u)", True),
    "journalctl": ("activity window (-t)", True),
}


@dataclass
class DependencyReport:
    """Results of all dependency checks."""

    checks: list[HealthCheck] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True unless a critical check failed."""
        return not any(c.critical and c.status == CheckStatus.ERROR for c in self.checks)


def check_tool(ctx: ReportContext, tool: str, purpose: str, critical: bool) -> HealthCheck:
    path = ctx.executor.which(tool)
    if path:
        return HealthCheck(
            name=tool,
            status=CheckStatus.OK,
            message=path,
            critical=critical,
            details={"path": path},
        )
    return HealthCheck(
        name=tool,
        status=CheckStatus.ERROR if critical else CheckStatus.WARNING,
        message=f"not found, {purpose} unavailable",
        critical=critical,
    )


def check_nginx_dir(ctx: ReportContext) -> HealthCheck:
    conf_dir = ctx.settings.nginx_conf_dir
    if conf_dir.is_dir():
        return HealthCheck(name="nginx", status=CheckStatus.OK, message=str(conf_dir))
    return HealthCheck(
        name="nginx",
        status=CheckStatus.WARNING,
        message=f"{conf_dir} missing, domains (-n) unavailable",
    )


def check_passwd(ctx: ReportContext) -> HealthCheck:
    passwd = ctx.settings.passwd_file
    if passwd.is_file() and os.access(passwd, os.R_OK):
        return HealthCheck(name="passwd", status=CheckStatus.OK, message=str(passwd), critical=True)
    return HealthCheck(
        name="passwd",
        status=CheckStatus.ERROR,
        message=f"{passwd} not readable, users (-u) unavailable",
        critical=True,
    )


def run_checks(ctx: ReportContext) -> DependencyReport:
    report = DependencyReport()
    for tool, (purpose, critical) in TOOLS.items():
        report.checks.append(check_tool(ctx, tool, purpose, critical))
    report.checks.append(check_nginx_dir(ctx))
    report.checks.append(check_passwd(ctx))

    for check in report.checks:
        if check.status != CheckStatus.OK:
            logger.warning(f"Dependency check {check.name}: {check.message}")
    return report


def show_checks(ctx: ReportContext) -> DependencyReport:
    """Print the dependency table."""
    report = run_checks(ctx)
    ctx.ui.heading("Dependency Check")
    ctx.ui.table(
        CHECK_HEADERS,
        [[c.name, c.status.value.upper(), c.message] for c in report.checks],
    )
    return report
