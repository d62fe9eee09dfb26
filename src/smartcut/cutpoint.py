"""Cut point resolution: lossless cut or smart cut.

A stream copy can only start on a keyframe. If the requested start is a
keyframe the cut is lossless; otherwise the frames between the requested
start and the next keyframe have to be re-encoded (a "smart cut") and the
rest of the segment is copied from that keyframe on.
"""

from __future__ import annotations

import logging
from pathlib import Path

from smartcut.domain import CutDecision
from smartcut.exceptions import NoKeyframeFoundError
from smartcut.keyframes import (
    KeyframeSource,
    find_keyframe_at_exact_time,
    find_next_keyframe,
)

logger = logging.getLogger(__name__)

# Seconds searched on each side of the desired cut point
INITIAL_KEYFRAME_WINDOW = 10.0
# Used once when the initial window holds no keyframe at or after the cut
WIDENED_KEYFRAME_WINDOW = 60.0


async def needs_smart_cut(
    path: Path,
    desired_cut_from: float,
    video_stream_index: int,
    keyframe_source: KeyframeSource,
) -> CutDecision:
    """Decide how a segment starting at ``desired_cut_from`` can be cut.

    Args:
        path: Media file.
        desired_cut_from: Requested segment start in seconds.
        video_stream_index: Index of the video stream to read keyframes from.
        keyframe_source: Source of keyframe timestamps.

    Returns:
        CutDecision. ``lossless_cut_from`` equals ``desired_cut_from`` for a
        lossless cut, or is the next keyframe when a smart cut is needed.

    Raises:
        NoKeyframeFoundError: If no keyframe exists at or after the desired
            point, even in the widened window.
        KeyframeReadError: If keyframes cannot be read.
    """
    keyframes = await keyframe_source.query(
        path, video_stream_index, desired_cut_from, INITIAL_KEYFRAME_WINDOW
    )

    exact_keyframe = find_keyframe_at_exact_time(keyframes, desired_cut_from)
    if exact_keyframe is not None:
        logger.info("Start cut is already on exact keyframe %.6fs", exact_keyframe.time)
        return CutDecision(
            lossless_cut_from=desired_cut_from,
            segment_needs_smart_cut=False,
        )

    next_keyframe = find_next_keyframe(keyframes, desired_cut_from)

    if next_keyframe is None:
        logger.info(
            "No keyframe within %.0fs after %.3fs, retrying with %.0fs window",
            INITIAL_KEYFRAME_WINDOW,
            desired_cut_from,
            WIDENED_KEYFRAME_WINDOW,
        )
        keyframes = await keyframe_source.query(
            path, video_stream_index, desired_cut_from, WIDENED_KEYFRAME_WINDOW
        )
        next_keyframe = find_next_keyframe(keyframes, desired_cut_from)

    if next_keyframe is None:
        raise NoKeyframeFoundError(desired_cut_from, WIDENED_KEYFRAME_WINDOW)

    logger.info(
        "Smart cut from keyframe %.6fs (desired start %.6fs)",
        next_keyframe.time,
        desired_cut_from,
    )
    return CutDecision(
        lossless_cut_from=next_keyframe.time,
        segment_needs_smart_cut=True,
    )
