"""Shared test fixtures for smartcut."""

import os
import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path
from types import SimpleNamespace

import pytest

from smartcut.config import clear_config_cache
from smartcut.domain import Keyframe, VideoStreamDescriptor
from smartcut.exceptions import set_translator


class FakeKeyframeSource:
    """KeyframeSource returning canned keyframes per window size.

    Every call is recorded as ``(stream_index, around_time, window)``.
    """

    def __init__(self, keyframes_by_window: dict[float, Sequence[float]]) -> None:
        self._keyframes_by_window = keyframes_by_window
        self.calls: list[tuple[int, float, float]] = []

    async def query(
        self,
        file_path: Path,
        stream_index: int,
        around_time: float,
        window: float,
    ) -> list[Keyframe]:
        self.calls.append((stream_index, around_time, window))
        times = self._keyframes_by_window.get(window, [])
        return [Keyframe(time=t) for t in sorted(times)]


def make_stat(size: int):
    """Return an async stat function reporting ``size`` bytes."""
    calls: list[Path] = []

    async def fake_stat(path: Path):
        calls.append(path)
        return SimpleNamespace(st_size=size)

    fake_stat.calls = calls
    return fake_stat


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def smartcut_isolated(temp_dir: Path, monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from the user's smartcut environment.

    Drops SMARTCUT_* variables, points SMARTCUT_DATA_DIR at an empty temp
    directory, clears the cached configuration, restores the identity
    message translator, and stops the CLI from reconfiguring the root
    logger (which would remove pytest's capture handler).
    """
    for var in list(os.environ):
        if var.startswith("SMARTCUT_"):
            monkeypatch.delenv(var)

    data_dir = temp_dir / ".smartcut"
    data_dir.mkdir()
    monkeypatch.setenv("SMARTCUT_DATA_DIR", str(data_dir))

    import smartcut.cli

    monkeypatch.setattr(smartcut.cli, "_logging_configured", True)

    clear_config_cache()
    yield data_dir
    clear_config_cache()
    set_translator(None)


@pytest.fixture
def video_stream() -> VideoStreamDescriptor:
    """A typical H.264 video stream."""
    return VideoStreamDescriptor(
        index=0,
        codec_type="video",
        codec_name="h264",
        bit_rate="4500000",
        time_base="1/90000",
    )


@pytest.fixture
def audio_stream() -> VideoStreamDescriptor:
    """An AAC audio stream."""
    return VideoStreamDescriptor(
        index=1,
        codec_type="audio",
        codec_name="aac",
        bit_rate="128000",
        time_base="1/48000",
    )


@pytest.fixture
def cover_art_stream() -> VideoStreamDescriptor:
    """An attached-picture (cover art) stream."""
    return VideoStreamDescriptor(
        index=2,
        codec_type="video",
        codec_name="mjpeg",
        time_base="1/90000",
        disposition={"default": 0, "attached_pic": 1},
    )


@pytest.fixture
def media_file(temp_dir: Path) -> Path:
    """A small placeholder media file on disk."""
    path = temp_dir / "clip.mp4"
    path.write_bytes(b"\x00" * 16)
    return path


@pytest.fixture
def keyframe_source():
    """Factory for FakeKeyframeSource."""
    return FakeKeyframeSource


@pytest.fixture
def stat_factory():
    """Factory for fake async stat functions."""
    return make_stat
