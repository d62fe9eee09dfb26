"""Mapping from probed codec names to encoder names for re-encoding."""

# Codecs whose ffprobe name is not a usable FFmpeg encoder
VIDEO_CODEC_SUBSTITUTIONS: dict[str, str] = {
    "av1": "libsvtav1",
}

# Encoder FFmpeg picks for a bare codec name such as ``-c:v h264``
DEFAULT_VIDEO_ENCODERS: dict[str, str] = {
    "h264": "libx264",
    "hevc": "libx265",
}


def map_video_codec(codec: str) -> str:
    """Return the encoder to use for a probed video codec name.

    Codec names without a substitution are returned unchanged; FFmpeg
    resolves them to its default encoder for that codec.
    """
    return VIDEO_CODEC_SUBSTITUTIONS.get(codec, codec)


def default_encoder_for_codec(codec: str) -> str:
    """Return the encoder FFmpeg uses for ``codec``, for quality lookups."""
    return DEFAULT_VIDEO_ENCODERS.get(codec, codec)
