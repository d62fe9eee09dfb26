"""Core utilities shared across smartcut modules."""

from smartcut.core.subprocess_utils import CommandResult, run_command, run_command_async

__all__ = ["CommandResult", "run_command", "run_command_async"]
