"""External tool path resolution.

Tools are resolved from configuration first (config file or
SMARTCUT_<TOOL>_PATH), then from the system PATH.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from smartcut.config import get_config

logger = logging.getLogger(__name__)


class ToolNotFoundError(RuntimeError):
    """Raised when a required external tool is not available."""


def get_tool_path(tool_name: str) -> Path | None:
    """Get path to a tool, or None if it is not available.

    Args:
        tool_name: Tool name, e.g. "ffprobe".

    Returns:
        Configured path if it exists, else the PATH lookup result.
    """
    configured = getattr(get_config().tools, tool_name, None)
    if configured is not None:
        if Path(configured).exists():
            return Path(configured)
        logger.warning(
            "Configured %s path does not exist: %s; falling back to PATH",
            tool_name,
            configured,
        )

    found = shutil.which(tool_name)
    return Path(found) if found else None


def require_tool(tool_name: str) -> Path:
    """Get path to a required tool.

    Raises:
        ToolNotFoundError: If the tool is not available.
    """
    path = get_tool_path(tool_name)
    if path is None:
        raise ToolNotFoundError(
            f"Required tool not available: {tool_name}. "
            "Install ffmpeg or set SMARTCUT_FFPROBE_PATH."
        )
    return path
