"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
from collections.abc import Iterator, Sequence
from pathlib import Path

import pytest
from loguru import logger
from rich.console import Console

from devopsfetch.config.models import Settings
from devopsfetch.core.context import ReportContext
from devopsfetch.core.exceptions import ToolUnavailableError
from devopsfetch.core.types import CommandResult
from devopsfetch.executors.local import LocalExecutor
from devopsfetch.ui.console import DEVOPSFETCH_THEME, ConsoleUI

DEFAULT_TOOLS = {"ss", "lsof", "docker", "last", "journalctl"}


class FakeExecutor(LocalExecutor):
    """Executor returning canned results instead of running commands."""

    def __init__(self, available: set[str] | None = None) -> None:
        super().__init__(timeout=5)
        self.available = set(DEFAULT_TOOLS if available is None else available)
        self.responses: dict[tuple[str, ...], CommandResult] = {}
        self.calls: list[tuple[str, ...]] = []

    def add(self, args: Sequence[str], stdout: str = "", stderr: str = "", exit_code: int = 0) -> None:
        self.responses[tuple(args)] = CommandResult(
            stdout=stdout,
            stderr=stderr,
            exit_code=exit_code,
            duration_ms=1.0,
            command=" ".join(args),
        )

    def which(self, tool: str) -> str | None:
        return f"/usr/bin/{tool}" if tool in self.available else None

    def run(self, args: Sequence[str], timeout: float | None = None) -> CommandResult:
        key = tuple(args)
        self.calls.append(key)
        if args[0] not in self.available:
            raise ToolUnavailableError(args[0])
        return self.responses.get(
            key,
            CommandResult(stdout="", stderr="", exit_code=0, duration_ms=1.0, command=" ".join(args)),
        )

    def called(self, tool: str) -> bool:
        return any(call[0] == tool for call in self.calls)


class CapturedUI(ConsoleUI):
    """ConsoleUI writing to in-memory buffers."""

    def __init__(self) -> None:
        self._out = io.StringIO()
        self._err = io.StringIO()
        super().__init__(
            console=self._console(self._out),
            err_console=self._console(self._err),
        )

    @staticmethod
    def _console(file: io.StringIO) -> Console:
        return Console(
            file=file,
            width=80,
            theme=DEVOPSFETCH_THEME,
            color_system=None,
            highlight=False,
            soft_wrap=True,
        )

    @property
    def out(self) -> str:
        return self._out.getvalue()

    @property
    def err(self) -> str:
        return self._err.getvalue()

    def out_lines(self) -> list[str]:
        return [line.rstrip() for line in self.out.splitlines()]


@pytest.fixture(autouse=True)
def no_log_file(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests from writing to ~/.devopsfetch/logs."""
    monkeypatch.setenv("DEVOPSFETCH_LOG_FILE", "0")


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def ui() -> CapturedUI:
    return CapturedUI()


@pytest.fixture
def nginx_dir(tmp_path: Path) -> Path:
    path = tmp_path / "sites-enabled"
    path.mkdir()
    return path


@pytest.fixture
def passwd_file(tmp_path: Path) -> Path:
    path = tmp_path / "passwd"
    path.write_text(
        "root:x:0:0:root:/root:/bin/bash\n"
        "daemon:x:1:1:daemon:/usr/sbin:/usr/sbin/nologin\n"
        "alice:x:1000:1000:Alice,,,:/home/alice:/bin/bash\n"
        "bob:x:1001:1001::/home/bob:/bin/zsh\n"
        "svc:x:1002:1002::/srv/svc:/usr/sbin/nologin\n"
        "ghost:x:1003:1003::/home/ghost:/bin/false\n"
        "nobody:x:65534:65534:nobody:/nonexistent:/usr/sbin/nologin\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def report_ctx(executor: FakeExecutor, ui: CapturedUI, nginx_dir: Path, passwd_file: Path) -> ReportContext:
    settings = Settings(nginx_conf_dir=nginx_dir, passwd_file=passwd_file)
    return ReportContext(settings=settings, executor=executor, ui=ui)


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Messages logged through loguru while the test runs."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
