"""Tests for the local command executor."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from devopsfetch.core.exceptions import CommandTimeoutError, ToolUnavailableError
from devopsfetch.executors.local import LocalExecutor


@pytest.fixture
def executor():
    return LocalExecutor(timeout=3)


def _completed(stdout=b"", stderr=b"", returncode=0):
    proc = MagicMock()
    proc.stdout = stdout
    proc.stderr = stderr
    proc.returncode = returncode
    return proc


class TestLocalExecutor:
    """Tests for LocalExecutor."""

    def test_missing_executable(self, executor):
        with pytest.raises(ToolUnavailableError, match="definitely-not-a-tool command not found"):
            executor.run(["definitely-not-a-tool", "--version"])

    def test_require(self, executor):
        with patch("devopsfetch.executors.local.shutil.which", return_value=None):
            with pytest.raises(ToolUnavailableError, match="Please install Docker."):
                executor.require("docker", "Please install Docker.")

    def test_timeout(self, executor):
        expired = subprocess.TimeoutExpired(cmd=["ss", "-tulpn"], timeout=3)
        with patch("devopsfetch.executors.local.subprocess.run", side_effect=expired):
            with pytest.raises(CommandTimeoutError) as exc_info:
                executor.run(["ss", "-tulpn"])

        assert exc_info.value.timeout_seconds == 3
        assert exc_info.value.command == "ss -tulpn"

    def test_timeout_override(self, executor):
        with patch("devopsfetch.executors.local.subprocess.run", return_value=_completed()) as mock_run:
            executor.run(["last", "-n", "1", "alice"], timeout=0.5)

        assert mock_run.call_args.kwargs["timeout"] == 0.5

    def test_decodes_invalid_utf8(self, executor):
        proc = _completed(stdout=b"caf\xe9\n", stderr=b"warn\n", returncode=1)
        with patch("devopsfetch.executors.local.subprocess.run", return_value=proc) as mock_run:
            result = executor.run(["lsof", "-i", ":80"])

        assert result.stdout == "caf\ufffd\n"
        assert result.exit_code == 1
        assert not result.success
        assert result.command == "lsof -i :80"
        assert mock_run.call_args.kwargs["capture_output"] is True
        assert mock_run.call_args.kwargs["timeout"] == 3
