"""ffprobe-based KeyframeSource.

Reads packet timestamps and flags for a window of one stream using
``-read_intervals``, which lets ffprobe seek instead of scanning the whole
file. Packets whose flags start with "K" are keyframes.
"""

from __future__ import annotations

import json
import logging
import subprocess  # nosec B404 - only for TimeoutExpired
from pathlib import Path

from smartcut.core.subprocess_utils import run_command_async
from smartcut.domain import Frame, Keyframe
from smartcut.exceptions import KeyframeReadError
from smartcut.keyframes.search import get_interval_around_time

logger = logging.getLogger(__name__)


def parse_packets(data: dict) -> list[Frame]:
    """Convert ffprobe ``-show_packets`` JSON into frames sorted by time.

    Packets without a usable ``pts_time`` are dropped.
    """
    frames: list[Frame] = []
    for packet in data.get("packets", []):
        pts_time = packet.get("pts_time")
        if pts_time is None:
            continue
        try:
            time = float(pts_time)
        except (TypeError, ValueError):
            continue
        flags = packet.get("flags") or ""
        frames.append(Frame(time=time, keyframe=flags.startswith("K")))

    frames.sort(key=lambda frame: frame.time)
    return frames


class FFprobeKeyframeSource:
    """KeyframeSource that shells out to ffprobe."""

    def __init__(self, ffprobe_path: Path, timeout: int = 60) -> None:
        """Initialize the source.

        Args:
            ffprobe_path: ffprobe executable.
            timeout: Per-read timeout in seconds.
        """
        self._ffprobe_path = ffprobe_path
        self._timeout = timeout

    def _build_command(
        self,
        file_path: Path,
        stream_index: int,
        start: float | None,
        end: float | None,
    ) -> list[str | Path]:
        cmd: list[str | Path] = [
            self._ffprobe_path,
            "-v",
            "error",
            "-show_packets",
            "-select_streams",
            str(stream_index),
            "-show_entries",
            "packet=pts_time,flags",
            "-of",
            "json",
        ]
        if start is not None and end is not None:
            cmd.extend(["-read_intervals", f"{start:.6f}%{end:.6f}"])
        cmd.append(file_path)
        return cmd

    async def read_frames(
        self,
        file_path: Path,
        stream_index: int,
        start: float | None = None,
        end: float | None = None,
    ) -> list[Frame]:
        """Read all frames of a stream, optionally limited to an interval.

        Raises:
            KeyframeReadError: If ffprobe fails or returns invalid JSON.
        """
        cmd = self._build_command(file_path, stream_index, start, end)
        try:
            result = await run_command_async(cmd, timeout=self._timeout)
        except subprocess.TimeoutExpired as e:
            raise KeyframeReadError(
                f"ffprobe timed out reading frames of {file_path} after {e.timeout}s"
            ) from e
        except OSError as e:
            raise KeyframeReadError(f"Could not run ffprobe: {e}") from e

        if not result.success:
            raise KeyframeReadError(
                f"ffprobe failed reading frames of {file_path}: "
                f"{result.stderr.strip() or result.returncode}"
            )

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise KeyframeReadError(
                f"Invalid ffprobe packet output for {file_path}: {e}"
            ) from e

        return parse_packets(data)

    async def query(
        self,
        file_path: Path,
        stream_index: int,
        around_time: float,
        window: float,
    ) -> list[Keyframe]:
        """Return keyframes within ``window`` seconds of ``around_time``."""
        start, end = get_interval_around_time(around_time, window)
        frames = await self.read_frames(file_path, stream_index, start, end)
        keyframes = [Keyframe(time=frame.time) for frame in frames if frame.keyframe]
        logger.debug(
            "Read %d keyframes (%d frames) between %.3fs and %.3fs",
            len(keyframes),
            len(frames),
            start,
            end,
        )
        return keyframes
