"""Tests for core subprocess utilities."""

import subprocess
from pathlib import Path

import pytest

from smartcut.core.subprocess_utils import run_command, run_command_async


class TestRunCommand:
    """Tests for run_command function."""

    def test_successful_command(self):
        """run_command returns stdout, stderr and returncode."""
        result = run_command(["echo", "hello"])

        assert result.stdout.strip() == "hello"
        assert result.returncode == 0
        assert result.success is True

    def test_command_with_path_args(self):
        """run_command converts Path arguments to strings."""
        result = run_command(["ls", Path("/tmp")])

        assert result.success is True

    def test_command_failure_returns_non_zero(self):
        """run_command returns a non-zero returncode for a failed command."""
        result = run_command(["ls", "/nonexistent_path_12345"])

        assert result.returncode != 0
        assert result.success is False
        assert result.stderr != ""

    def test_timeout_raises_exception(self):
        """run_command raises TimeoutExpired for long-running commands."""
        with pytest.raises(subprocess.TimeoutExpired):
            run_command(["sleep", "10"], timeout=1)

    def test_missing_executable_raises_oserror(self):
        """run_command lets OSError from a missing executable propagate."""
        with pytest.raises(OSError):
            run_command(["/nonexistent/ffprobe", "-version"])


class TestRunCommandAsync:
    """Tests for run_command_async function."""

    @pytest.mark.asyncio
    async def test_runs_in_thread(self):
        """run_command_async returns the same result as run_command."""
        result = await run_command_async(["echo", "async"])

        assert result.stdout.strip() == "async"
        assert result.success is True
