"""
devopsfetch Core - Report context.

Bundles what every report routine needs: settings, the command executor and
the console. Built once per invocation and passed to routines explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from devopsfetch.config.models import Settings
from devopsfetch.executors.local import LocalExecutor
from devopsfetch.ui.console import ConsoleUI


@dataclass
class ReportContext:
    """Shared context for report routines."""

    settings: Settings = field(default_factory=Settings)
    executor: LocalExecutor | None = None
    ui: ConsoleUI = field(default_factory=ConsoleUI)

    def __post_init__(self) -> None:
        if self.executor is None:
            self.executor = LocalExecutor(timeout=self.settings.command_timeout)
