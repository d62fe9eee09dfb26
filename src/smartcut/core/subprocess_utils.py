"""Subprocess helpers for invoking ffprobe.

All external tool calls go through ``run_command`` so timeouts, decoding and
debug logging are handled the same way everywhere. ``run_command_async``
runs the blocking call in a worker thread for the async probing code.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess  # nosec B404 - subprocess is required for ffprobe invocation
import time
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured output of a finished command."""

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        return self.returncode == 0


def _command_name(args: list[str]) -> str:
    return Path(args[0]).name if args else "unknown"


def run_command(args: list[str | Path], timeout: int = 60) -> CommandResult:
    """Run an external command and capture its text output.

    Output is decoded as UTF-8 with invalid bytes replaced, since media tags
    frequently carry broken encodings.

    Args:
        args: Command and arguments. Path objects are converted to strings.
        timeout: Timeout in seconds.

    Returns:
        CommandResult with stdout, stderr and the return code.

    Raises:
        subprocess.TimeoutExpired: If the command does not finish in time.
        OSError: If the executable cannot be started.
    """
    str_args = [str(arg) for arg in args]
    command = _command_name(str_args)

    logger.debug(
        "Executing command: %s",
        " ".join(str_args),
        extra={"command": command, "arg_count": len(str_args)},
    )
    start_time = time.monotonic()

    try:
        result = subprocess.run(  # nosec B603 - tool path comes from config/PATH
            str_args,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.warning(
            "Command timed out after %ds: %s",
            timeout,
            command,
            extra={"command": command, "timeout_seconds": timeout},
        )
        raise

    logger.debug(
        "Command completed",
        extra={
            "command": command,
            "elapsed_seconds": round(time.monotonic() - start_time, 3),
            "returncode": result.returncode,
        },
    )
    return CommandResult(result.stdout or "", result.stderr or "", result.returncode)


async def run_command_async(
    args: list[str | Path], timeout: int = 60
) -> CommandResult:
    """Async variant of run_command.

    Cancelling the awaiting task raises CancelledError in the caller; the
    child process is still bounded by ``timeout``.
    """
    return await asyncio.to_thread(run_command, args, timeout)
