"""Logging setup for smartcut.

Provides text or JSON output with file rotation, and tags records with the
media file currently being planned.
"""

from smartcut.logging.config import configure_logging
from smartcut.logging.context import (
    FileContextFilter,
    get_media_file,
    media_file_context,
)
from smartcut.logging.handlers import JSONFormatter

__all__ = [
    "FileContextFilter",
    "JSONFormatter",
    "configure_logging",
    "get_media_file",
    "media_file_context",
]
