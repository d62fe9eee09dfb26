"""Async ffprobe stream probe."""

from __future__ import annotations

import json
import subprocess  # nosec B404 - only for TimeoutExpired
from dataclasses import dataclass, field
from pathlib import Path

from smartcut.core.subprocess_utils import run_command_async
from smartcut.domain import VideoStreamDescriptor
from smartcut.exceptions import MediaIntrospectionError
from smartcut.introspector.parsers import parse_duration, parse_streams


@dataclass(frozen=True)
class ProbeResult:
    """Streams and container duration of a media file."""

    file_path: Path
    streams: list[VideoStreamDescriptor] = field(default_factory=list)
    duration: float | None = None


async def probe_streams(
    path: Path, ffprobe_path: Path, timeout: int = 60
) -> ProbeResult:
    """Read stream descriptors and container duration with ffprobe.

    Args:
        path: Media file to probe.
        ffprobe_path: ffprobe executable.
        timeout: Timeout in seconds.

    Returns:
        ProbeResult for the file.

    Raises:
        MediaIntrospectionError: If ffprobe fails or its output is invalid.
    """
    if not path.exists():
        raise MediaIntrospectionError(f"File not found: {path}")

    args: list[str | Path] = [
        ffprobe_path,
        "-v",
        "error",
        "-print_format",
        "json",
        "-show_streams",
        "-show_format",
        path,
    ]
    try:
        result = await run_command_async(args, timeout=timeout)
    except subprocess.TimeoutExpired as e:
        raise MediaIntrospectionError(
            f"ffprobe timed out for {path} after {e.timeout}s"
        ) from e
    except OSError as e:
        raise MediaIntrospectionError(f"Could not run ffprobe: {e}") from e

    if not result.success:
        raise MediaIntrospectionError(
            f"ffprobe failed for {path}: {result.stderr.strip() or result.returncode}"
        )

    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise MediaIntrospectionError(f"Invalid ffprobe output for {path}: {e}") from e

    if "streams" not in data:
        raise MediaIntrospectionError(
            f"Missing 'streams' in ffprobe output for {path}. "
            "File may be corrupted or not a valid media file."
        )

    return ProbeResult(
        file_path=path,
        streams=parse_streams(data["streams"]),
        duration=parse_duration(data.get("format", {}).get("duration")),
    )
