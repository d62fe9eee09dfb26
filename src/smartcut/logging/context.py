"""Per-file log context.

Resolver and deriver calls for different files may run concurrently; the
file being worked on is kept in a context variable and stamped onto every
log record by FileContextFilter.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_media_file: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "media_file", default=None
)


def get_media_file() -> str | None:
    """Return the media file bound to the current context, if any."""
    return _media_file.get()


@contextmanager
def media_file_context(path: Path | str) -> Generator[None, None, None]:
    """Bind ``path`` to log records emitted inside the block.

    Example:
        with media_file_context("/videos/clip.mp4"):
            logger.info("Reading keyframes")  # tagged with the file name
    """
    token = _media_file.set(str(path))
    try:
        yield
    finally:
        _media_file.reset(token)


class FileContextFilter(logging.Filter):
    """Inject ``media_file`` and ``file_tag`` attributes into log records.

    ``file_tag`` is "[clip.mp4] " when a file is bound and an empty string
    otherwise, so text formats can include it unconditionally.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        media_file = _media_file.get()
        record.media_file = media_file
        record.file_tag = f"[{Path(media_file).name}] " if media_file else ""
        return True
