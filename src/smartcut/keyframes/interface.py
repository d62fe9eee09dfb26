"""KeyframeSource protocol."""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from smartcut.domain import Keyframe


class KeyframeSource(Protocol):
    """Provides keyframe timestamps around a point in a video stream.

    Implementations read the stream index of a file and return the keyframes
    found in roughly ``[around_time - window, around_time + window]``,
    ascending by time. An empty sequence is a valid answer.
    """

    async def query(
        self,
        file_path: Path,
        stream_index: int,
        around_time: float,
        window: float,
    ) -> Sequence[Keyframe]:
        """Return keyframes near ``around_time``.

        Raises:
            KeyframeReadError: If the file cannot be read.
        """
        ...
