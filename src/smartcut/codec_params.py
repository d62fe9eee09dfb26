"""Encode parameters for the re-encoded part of a smart cut.

The bridging segment is encoded with the source's codec, a bitrate derived
from the source, and the source time base so it can be concatenated with
the stream-copied remainder.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path

from smartcut.domain import CodecParams, VideoStreamDescriptor
from smartcut.encoders import map_video_codec
from smartcut.exceptions import CodecParamsError
from smartcut.introspector import (
    get_real_video_streams,
    parse_bit_rate,
    parse_timebase,
)

logger = logging.getLogger(__name__)

# Headroom over the source bitrate for encoder overhead and generation loss
BITRATE_SAFETY_MARGIN = 1.2

StatFunc = Callable[[Path], Awaitable[os.stat_result]]


async def stat_file(path: Path) -> os.stat_result:
    """Stat a file without blocking the event loop."""
    return await asyncio.to_thread(path.stat)


def select_video_stream(
    streams: Sequence[VideoStreamDescriptor],
) -> VideoStreamDescriptor:
    """Return the single real video stream.

    Raises:
        CodecParamsError: If there is not exactly one real video stream.
    """
    video_streams = get_real_video_streams(streams)
    if len(video_streams) > 1:
        raise CodecParamsError(
            "Can only smart cut video with exactly one video stream "
            f"(found {len(video_streams)})"
        )
    if not video_streams:
        raise CodecParamsError("Smart cut only works on videos")
    return video_streams[0]


async def estimate_bitrate(
    path: Path,
    file_duration: float | None,
    stat: StatFunc = stat_file,
) -> float:
    """Estimate the overall bitrate of a file from its size and duration.

    Raises:
        CodecParamsError: If the duration is unknown.
    """
    stats = await stat(path)
    if file_duration is None or file_duration <= 0:
        raise CodecParamsError("Video duration is unknown, cannot estimate bitrate")
    bitrate = stats.st_size * 8 / file_duration
    logger.warning("Estimated bitrate: %.3f Mbit/s", bitrate / 1e6)
    return bitrate


async def get_codec_params(
    path: Path,
    file_duration: float | None,
    streams: Sequence[VideoStreamDescriptor],
    stat: StatFunc = stat_file,
) -> CodecParams:
    """Derive codec, bitrate and time base for re-encoding a segment.

    Args:
        path: Media file (stat'd only when the stream reports no bit rate).
        file_duration: Container duration in seconds, if known.
        streams: All streams of the file.
        stat: Async stat function, replaceable for testing.

    Returns:
        CodecParams for the single video stream.

    Raises:
        CodecParamsError: If the stream selection is ambiguous, the codec is
            unknown, or the bitrate cannot be determined.
    """
    video_stream = select_video_stream(streams)

    video_bitrate: float | None = parse_bit_rate(video_stream.bit_rate)
    if video_bitrate is None:
        logger.warning(
            "Unable to detect input bitrate of stream %d (%r)",
            video_stream.index,
            video_stream.bit_rate,
        )
        video_bitrate = await estimate_bitrate(path, file_duration, stat)

    detected_codec = video_stream.codec_name
    if not detected_codec:
        raise CodecParamsError("Unable to determine codec for smart cut")

    video_codec = map_video_codec(detected_codec)
    logger.debug("Detected codec %s, encoding with %s", detected_codec, video_codec)

    timebase = parse_timebase(video_stream.time_base)
    if timebase is None:
        logger.warning("Unable to determine timebase from %r", video_stream.time_base)

    return CodecParams(
        video_stream=video_stream,
        video_codec=video_codec,
        video_bitrate=int(video_bitrate * BITRATE_SAFETY_MARGIN),
        video_timebase=timebase,
    )
