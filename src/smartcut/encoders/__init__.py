"""Encoder selection and quality arguments.

- map_video_codec / default_encoder_for_codec: probed codec name to encoder name
- classify_encoder / get_encoder_profile: encoder family lookup
- get_optimal_quality / get_optimal_preset / supports_quality_value
- build_quality_args: per-output quality and preset arguments
"""

from smartcut.encoders.codecs import (
    DEFAULT_VIDEO_ENCODERS,
    VIDEO_CODEC_SUBSTITUTIONS,
    default_encoder_for_codec,
    map_video_codec,
)
from smartcut.encoders.quality import (
    ENCODER_PROFILES,
    VIDEOTOOLBOX_QUALITY,
    EncoderFamily,
    EncoderProfile,
    QualityDialect,
    build_quality_args,
    classify_encoder,
    get_encoder_profile,
    get_optimal_preset,
    get_optimal_quality,
    supports_quality_value,
)

__all__ = [
    "DEFAULT_VIDEO_ENCODERS",
    "ENCODER_PROFILES",
    "VIDEO_CODEC_SUBSTITUTIONS",
    "VIDEOTOOLBOX_QUALITY",
    "EncoderFamily",
    "EncoderProfile",
    "QualityDialect",
    "build_quality_args",
    "classify_encoder",
    "default_encoder_for_codec",
    "get_encoder_profile",
    "get_optimal_preset",
    "get_optimal_quality",
    "map_video_codec",
    "supports_quality_value",
]
