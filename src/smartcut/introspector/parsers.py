"""Pure parsing functions for ffprobe JSON output.

These functions turn ffprobe stream dicts into VideoStreamDescriptor
objects and parse the numeric-string fields ffprobe reports. No I/O.
"""

import logging
import re
from collections.abc import Iterable

from smartcut.domain import Timebase, VideoStreamDescriptor

logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"\s*(\d+)")


def parse_duration(value: str | None) -> float | None:
    """Parse an ffprobe duration string ("3600.000") into seconds.

    Returns:
        Duration in seconds, or None if missing or unparseable.
    """
    if value is None:
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


def parse_bit_rate(value: str | None) -> int | None:
    """Parse an ffprobe bit rate string ("4500000") as an integer.

    Leading digits are accepted the way ffprobe consumers usually read
    them, so "4500000.0" parses as 4500000. Anything without leading digits
    (missing, "N/A", empty, negative) yields None.
    """
    if value is None:
        return None
    match = _LEADING_DIGITS.match(str(value))
    return int(match.group(1)) if match else None


def parse_timebase(value: str | None) -> Timebase | None:
    """Parse a time-base fraction such as "1/90000".

    Returns:
        Timebase, or None unless both parts are positive integers.
    """
    if not value or "/" not in value:
        return None
    numerator, _, denominator = value.partition("/")
    try:
        num = int(numerator)
        den = int(denominator)
    except ValueError:
        return None
    if num <= 0 or den <= 0:
        return None
    return Timebase(numerator=num, denominator=den)


def parse_stream(stream: dict) -> VideoStreamDescriptor:
    """Parse a single ffprobe stream dict.

    Args:
        stream: Stream dictionary from ffprobe JSON.

    Returns:
        VideoStreamDescriptor with the raw bit rate and time base strings.
    """
    disposition = stream.get("disposition") or {}
    bit_rate = stream.get("bit_rate")
    return VideoStreamDescriptor(
        index=stream.get("index", 0),
        codec_type=stream.get("codec_type", ""),
        codec_name=stream.get("codec_name"),
        bit_rate=str(bit_rate) if bit_rate is not None else None,
        time_base=stream.get("time_base"),
        disposition={
            key: value for key, value in disposition.items() if isinstance(value, int)
        },
    )


def parse_streams(streams: list[dict]) -> list[VideoStreamDescriptor]:
    """Parse all stream dicts, skipping duplicate indices."""
    descriptors: list[VideoStreamDescriptor] = []
    seen_indices: set[int] = set()

    for stream in streams:
        descriptor = parse_stream(stream)
        if descriptor.index in seen_indices:
            logger.warning("Duplicate stream index %d, skipping", descriptor.index)
            continue
        seen_indices.add(descriptor.index)
        descriptors.append(descriptor)

    return descriptors


def is_stream_thumbnail(stream: VideoStreamDescriptor) -> bool:
    """Return True for video streams that only carry cover art."""
    return stream.codec_type == "video" and stream.is_attached_picture


def get_real_video_streams(
    streams: Iterable[VideoStreamDescriptor],
) -> list[VideoStreamDescriptor]:
    """Return the genuine, decodable video streams (no thumbnails)."""
    return [
        s for s in streams if s.codec_type == "video" and not is_stream_thumbnail(s)
    ]
