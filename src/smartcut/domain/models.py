"""Domain models for smart cut planning.

These dataclasses describe the data flowing between the cut point resolver,
the codec parameter deriver and the encoder quality mapper. They are
independent of ffprobe's JSON layout; see ``smartcut.introspector`` for the
parsing side.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Frame:
    """A single packet read from a video stream."""

    time: float
    """Presentation time in seconds."""

    keyframe: bool = False
    """True when a decoder can start from this frame."""


@dataclass(frozen=True)
class Keyframe:
    """A timestamp (seconds) at which a stream can be decoded independently."""

    time: float


@dataclass(frozen=True)
class Timebase:
    """Time-base fraction of a stream (e.g. 1/90000)."""

    numerator: int
    denominator: int

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True)
class VideoStreamDescriptor:
    """A stream entry as reported by the media probe (read-only input).

    Only the fields needed for cut planning are kept. ``bit_rate`` and
    ``time_base`` stay as the raw probe strings; they are parsed (and may
    fail to parse) during codec parameter derivation.
    """

    index: int
    codec_type: str
    codec_name: str | None = None
    bit_rate: str | None = None
    time_base: str | None = None
    disposition: dict[str, int] = field(default_factory=dict)

    @property
    def is_attached_picture(self) -> bool:
        """Return True for cover art / thumbnail streams."""
        return self.disposition.get("attached_pic", 0) == 1


@dataclass(frozen=True)
class CutDecision:
    """Outcome of resolving a trim start point.

    When ``segment_needs_smart_cut`` is False, ``lossless_cut_from`` equals
    the desired cut time. Otherwise it is the next keyframe after it and the
    frames in between must be re-encoded.
    """

    lossless_cut_from: float
    segment_needs_smart_cut: bool


@dataclass(frozen=True)
class CodecParams:
    """Encode parameters for the re-encoded bridging segment."""

    video_stream: VideoStreamDescriptor
    video_codec: str
    video_bitrate: int
    """Target bitrate in bits per second (safety margin already applied)."""

    video_timebase: Timebase | None = None


@dataclass(frozen=True)
class SmartCutPlan:
    """Everything a caller needs to shape the cut pipeline for one trim start."""

    decision: CutDecision
    codec_params: CodecParams | None = None
    encoder: str | None = None
    quality_args: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert the plan to a JSON-serializable dict."""
        result: dict[str, Any] = {
            "lossless_cut_from": self.decision.lossless_cut_from,
            "segment_needs_smart_cut": self.decision.segment_needs_smart_cut,
        }
        if self.codec_params is not None:
            timebase = self.codec_params.video_timebase
            result["codec_params"] = {
                "video_stream_index": self.codec_params.video_stream.index,
                "video_codec": self.codec_params.video_codec,
                "video_bitrate": self.codec_params.video_bitrate,
                "video_timebase": str(timebase) if timebase is not None else None,
            }
            result["encoder"] = self.encoder
            result["quality_args"] = list(self.quality_args)
        return result
