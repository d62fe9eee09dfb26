"""Smart cut planning for one segment start.

Ties the cut point resolver, the codec parameter deriver and the encoder
quality arguments together in the order a cutting pipeline needs them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from smartcut.codec_params import (
    StatFunc,
    get_codec_params,
    select_video_stream,
    stat_file,
)
from smartcut.cutpoint import needs_smart_cut
from smartcut.domain import SmartCutPlan, VideoStreamDescriptor
from smartcut.encoders import build_quality_args, default_encoder_for_codec
from smartcut.keyframes import KeyframeSource
from smartcut.logging import media_file_context

logger = logging.getLogger(__name__)


async def plan_smart_cut(
    path: Path,
    desired_cut_from: float,
    streams: Sequence[VideoStreamDescriptor],
    file_duration: float | None,
    keyframe_source: KeyframeSource,
    encoder: str | None = None,
    quality: float | None = None,
    preset: str | None = None,
    output_index: int | None = None,
    stat: StatFunc = stat_file,
) -> SmartCutPlan:
    """Plan how to cut a segment that starts at ``desired_cut_from``.

    Args:
        path: Media file.
        desired_cut_from: Requested segment start in seconds.
        streams: All streams of the file.
        file_duration: Container duration in seconds, if known.
        keyframe_source: Source of keyframe timestamps.
        encoder: Encoder for the bridging segment (defaults to FFmpeg's
            encoder for the source codec, e.g. libx264 for h264).
        quality: Quality override passed to build_quality_args.
        preset: Preset override passed to build_quality_args.
        output_index: Output stream index for quality arguments (defaults
            to the video stream's index).
        stat: Async stat function, replaceable for testing.

    Returns:
        SmartCutPlan. Codec parameters and quality arguments are only
        present when the segment needs a smart cut.

    Raises:
        NoKeyframeFoundError: If there is no keyframe to cut from.
        CodecParamsError: If encode parameters cannot be derived.
        IncompatibleQualityOverrideError: If ``quality`` cannot be applied
            to the chosen encoder.
    """
    with media_file_context(path):
        video_stream = select_video_stream(streams)
        decision = await needs_smart_cut(
            path, desired_cut_from, video_stream.index, keyframe_source
        )
        if not decision.segment_needs_smart_cut:
            return SmartCutPlan(decision=decision)

        codec_params = await get_codec_params(path, file_duration, streams, stat)
        chosen_encoder = encoder or default_encoder_for_codec(
            codec_params.video_codec
        )
        index = output_index if output_index is not None else video_stream.index
        quality_args = build_quality_args(chosen_encoder, index, quality, preset)

        logger.info(
            "Re-encoding %.3fs-%.3fs with %s at %d bit/s",
            desired_cut_from,
            decision.lossless_cut_from,
            chosen_encoder,
            codec_params.video_bitrate,
        )
        return SmartCutPlan(
            decision=decision,
            codec_params=codec_params,
            encoder=chosen_encoder,
            quality_args=tuple(quality_args),
        )
