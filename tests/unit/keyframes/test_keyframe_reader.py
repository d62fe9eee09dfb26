"""Tests for the ffprobe keyframe source."""

import json
import subprocess
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from smartcut.core.subprocess_utils import CommandResult
from smartcut.domain import Frame, Keyframe
from smartcut.exceptions import KeyframeReadError
from smartcut.keyframes import FFprobeKeyframeSource, parse_packets

FFPROBE = Path("/usr/bin/ffprobe")
VIDEO = Path("/videos/clip.mp4")

PACKETS = {
    "packets": [
        {"pts_time": "4.004000", "flags": "__"},
        {"pts_time": "0.000000", "flags": "K_"},
        {"pts_time": "2.002000", "flags": "K__"},
        {"pts_time": "N/A", "flags": "K_"},
        {"flags": "K_"},
        {"pts_time": "6.006000"},
    ]
}


def mock_run(stdout: str = "", stderr: str = "", returncode: int = 0):
    return patch(
        "smartcut.keyframes.ffprobe.run_command_async",
        new=AsyncMock(return_value=CommandResult(stdout, stderr, returncode)),
    )


class TestParsePackets:
    """Tests for parse_packets()."""

    def test_sorted_with_keyframe_flags(self) -> None:
        """Packets are sorted by time and K-flagged packets are keyframes."""
        assert parse_packets(PACKETS) == [
            Frame(0.0, keyframe=True),
            Frame(2.002, keyframe=True),
            Frame(4.004, keyframe=False),
            Frame(6.006, keyframe=False),
        ]

    def test_no_packets(self) -> None:
        assert parse_packets({}) == []


class TestFFprobeKeyframeSource:
    """Tests for FFprobeKeyframeSource."""

    @pytest.mark.asyncio
    async def test_query_returns_keyframes(self) -> None:
        """Only keyframes are returned, in ascending order."""
        source = FFprobeKeyframeSource(FFPROBE, timeout=7)

        with mock_run(json.dumps(PACKETS)) as run:
            keyframes = await source.query(VIDEO, 0, 5.0, 10.0)

        assert keyframes == [Keyframe(0.0), Keyframe(2.002)]
        assert run.call_args.kwargs["timeout"] == 7

    @pytest.mark.asyncio
    async def test_query_command(self) -> None:
        """The query reads one stream over a clamped interval."""
        source = FFprobeKeyframeSource(FFPROBE)

        with mock_run(json.dumps({"packets": []})) as run:
            await source.query(VIDEO, 2, 5.0, 10.0)

        args = run.call_args.args[0]
        assert args[0] == FFPROBE
        assert args[-1] == VIDEO
        assert args[args.index("-select_streams") + 1] == "2"
        assert args[args.index("-show_entries") + 1] == "packet=pts_time,flags"
        assert args[args.index("-read_intervals") + 1] == "0.000000%15.000000"

    @pytest.mark.asyncio
    async def test_interval_near_zero_is_fixed_point(self) -> None:
        """A window start just above zero is not written in exponent form."""
        source = FFprobeKeyframeSource(FFPROBE)

        with mock_run(json.dumps({"packets": []})) as run:
            await source.query(VIDEO, 0, 10.00005, 10.0)

        args = run.call_args.args[0]
        interval = args[args.index("-read_intervals") + 1]
        assert interval == "0.000050%20.000050"
        assert "e" not in interval

    @pytest.mark.asyncio
    async def test_read_frames_whole_stream(self) -> None:
        """Without an interval the whole stream is read."""
        source = FFprobeKeyframeSource(FFPROBE)

        with mock_run(json.dumps(PACKETS)) as run:
            frames = await source.read_frames(VIDEO, 0)

        assert len(frames) == 4
        assert "-read_intervals" not in run.call_args.args[0]

    @pytest.mark.asyncio
    async def test_ffprobe_failure(self) -> None:
        source = FFprobeKeyframeSource(FFPROBE)

        with mock_run(stderr="No such file", returncode=1):
            with pytest.raises(KeyframeReadError, match="No such file"):
                await source.query(VIDEO, 0, 5.0, 10.0)

    @pytest.mark.asyncio
    async def test_invalid_json(self) -> None:
        source = FFprobeKeyframeSource(FFPROBE)

        with mock_run("{"):
            with pytest.raises(KeyframeReadError, match="Invalid ffprobe packet"):
                await source.query(VIDEO, 0, 5.0, 10.0)

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        source = FFprobeKeyframeSource(FFPROBE)
        error = subprocess.TimeoutExpired(cmd="ffprobe", timeout=60)

        with patch(
            "smartcut.keyframes.ffprobe.run_command_async",
            new=AsyncMock(side_effect=error),
        ):
            with pytest.raises(KeyframeReadError, match="timed out"):
                await source.query(VIDEO, 0, 5.0, 10.0)

    @pytest.mark.asyncio
    async def test_missing_executable(self) -> None:
        source = FFprobeKeyframeSource(Path("/nonexistent/ffprobe"))

        with patch(
            "smartcut.keyframes.ffprobe.run_command_async",
            new=AsyncMock(side_effect=FileNotFoundError("ffprobe")),
        ):
            with pytest.raises(KeyframeReadError, match="Could not run ffprobe"):
                await source.query(VIDEO, 0, 5.0, 10.0)
