"""
Core Exceptions - Unified error hierarchy for devopsfetch.

Every report routine raises one of these; the dispatcher turns them into a
message on stderr and a non-zero exit status.
"""

from __future__ import annotations


class DevopsfetchError(Exception):
    """Base exception for all devopsfetch errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Lookup / Input Errors
# =============================================================================

class MissingArgumentError(DevopsfetchError):
    """A routine was called without an argument it requires."""
    pass


class InvalidArgumentError(DevopsfetchError):
    """An argument was supplied but cannot be used."""
    pass


class NotFoundError(DevopsfetchError):
    """A lookup (domain, container, ...) matched nothing."""

    def __init__(self, kind: str, key: str, message: str | None = None):
        super().__init__(
            message or f"No {kind} found for {key}.",
            {"kind": kind, "key": key},
        )
        self.kind = kind
        self.key = key


class ConfigDirMissingError(DevopsfetchError):
    """A configuration directory the routine scans does not exist."""

    def __init__(self, path: str, label: str = "Nginx configuration directory"):
        super().__init__(f"{label} not found at {path}", {"path": path})
        self.path = path


# =============================================================================
# Execution Errors
# =============================================================================

class ExecutionError(DevopsfetchError):
    """External command execution failed."""
    pass


class ToolUnavailableError(ExecutionError):
    """Required external tool is not installed."""

    def __init__(self, tool: str, hint: str | None = None):
        message = f"{tool} command not found."
        if hint:
            message = f"{message} {hint}"
        super().__init__(message, {"tool": tool})
        self.tool = tool


class CommandTimeoutError(ExecutionError):
    """Command execution timed out."""

    def __init__(self, command: str, timeout_seconds: float):
        super().__init__(
            f"Command timed out after {timeout_seconds}s: {command}",
            {"command": command, "timeout": timeout_seconds}
        )
        self.command = command
        self.timeout_seconds = timeout_seconds


class CommandFailedError(ExecutionError):
    """Command returned non-zero exit code."""

    def __init__(self, command: str, exit_code: int, stderr: str = ""):
        message = stderr.strip() or f"Command failed with exit code {exit_code}: {command}"
        super().__init__(
            message,
            {"command": command, "exit_code": exit_code, "stderr": stderr}
        )
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr


# =============================================================================
# Parse Errors
# =============================================================================

class ParseError(DevopsfetchError):
    """Output of an external tool did not have the expected shape."""

    source = "output"

    def __init__(self, line: str, reason: str = "unexpected format"):
        super().__init__(
            f"Cannot parse {self.source} line ({reason}): {line!r}",
            {"source": self.source, "line": line, "reason": reason}
        )
        self.line = line
        self.reason = reason


class SocketTableParseError(ParseError):
    source = "ss"


class LsofParseError(ParseError):
    source = "lsof"


class DockerParseError(ParseError):
    source = "docker"


class PasswdParseError(ParseError):
    source = "passwd"


class LastParseError(ParseError):
    source = "last"


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(DevopsfetchError):
    """Settings file is unreadable or invalid."""
    pass
