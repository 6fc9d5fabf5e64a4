"""
devopsfetch Executors - Local command execution.

Runs one external tool synchronously with an explicit timeout and decoded,
captured output.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
import time
from collections.abc import Sequence

from loguru import logger

from devopsfetch.config.constants import COMMAND_TIMEOUT
from devopsfetch.core.exceptions import CommandTimeoutError, ToolUnavailableError
from devopsfetch.core.types import CommandResult


class LocalExecutor:
    """
    Execute commands on the local host.

    Missing executables raise ToolUnavailableError and expired timeouts raise
    CommandTimeoutError. A non-zero exit status is not an error here: the
    caller decides what an exit code means for its tool.
    """

    def __init__(self, timeout: float = COMMAND_TIMEOUT) -> None:
        self.timeout = timeout

    def which(self, tool: str) -> str | None:
        """Return the full path of ``tool`` or None when not on PATH."""
        return shutil.which(tool)

    def require(self, tool: str, hint: str | None = None) -> None:
        """Raise ToolUnavailableError unless ``tool`` is on PATH."""
        if self.which(tool) is None:
            raise ToolUnavailableError(tool, hint)

    def run(self, args: Sequence[str], timeout: float | None = None) -> CommandResult:
        """
        Run a command and capture its output.

        Args:
            args: Program and arguments (no shell).
            timeout: Override of the executor timeout in seconds.

        Returns:
            CommandResult with decoded stdout/stderr and exit code.
        """
        timeout = self.timeout if timeout is None else timeout
        command = shlex.join(args)
        logger.debug(f"Executing: {command}")

        start = time.monotonic()
        try:
            proc = subprocess.run(
                list(args),
                capture_output=True,
                timeout=timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise ToolUnavailableError(args[0]) from e
        except subprocess.TimeoutExpired as e:
            logger.warning(f"Command timed out after {timeout}s: {command}")
            raise CommandTimeoutError(command, timeout) from e

        duration_ms = (time.monotonic() - start) * 1000
        result = CommandResult(
            stdout=proc.stdout.decode("utf-8", errors="replace"),
            stderr=proc.stderr.decode("utf-8", errors="replace"),
            exit_code=proc.returncode,
            duration_ms=duration_ms,
            command=command,
        )
        logger.debug(f"{args[0]} exited {result.exit_code} in {duration_ms:.0f}ms")
        return result
