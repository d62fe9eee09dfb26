"""JSON log formatter for structured output."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries, plus those set by formatting and by
# FileContextFilter; anything else on a record came from ``extra``.
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
    "file_tag",
    "media_file",
}


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Example line::

        {"timestamp": "2024-05-01T10:00:00+00:00", "level": "WARNING",
         "logger": "smartcut.codec_params", "message": "Estimated bitrate: ...",
         "context": {"media_file": "/videos/clip.mp4"}}

    ``context`` holds the bound media file and any ``extra`` fields, and is
    omitted when empty.
    """

    def _context(self, record: logging.LogRecord) -> dict[str, Any]:
        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        media_file = getattr(record, "media_file", None)
        if media_file:
            context["media_file"] = media_file
        return context

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.name != "root":
            entry["logger"] = record.name

        context = self._context(record)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
