"""Exit codes for smartcut CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Validation errors (config, input)
    20-29: Target/file errors
    30-39: Tool/dependency errors
    40-49: Operation errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for smartcut CLI commands."""

    SUCCESS = 0

    INTERRUPTED = 2

    CONFIG_ERROR = 11
    INVALID_ARGUMENT = 12

    TARGET_NOT_FOUND = 20
    NO_KEYFRAME_FOUND = 21

    FFPROBE_NOT_FOUND = 32

    OPERATION_FAILED = 40
    PROBE_FAILED = 41
