"""Tests for probed codec to encoder mapping."""

import pytest

from smartcut.encoders import default_encoder_for_codec, map_video_codec


class TestMapVideoCodec:
    """Tests for map_video_codec()."""

    def test_av1_substituted(self) -> None:
        """Generic av1 maps to the SVT-AV1 software encoder."""
        assert map_video_codec("av1") == "libsvtav1"

    @pytest.mark.parametrize("codec", ["h264", "hevc", "vp9", "mpeg2video"])
    def test_other_codecs_unchanged(self, codec: str) -> None:
        """Codecs without a substitution pass through."""
        assert map_video_codec(codec) == codec


class TestDefaultEncoderForCodec:
    """Tests for default_encoder_for_codec()."""

    @pytest.mark.parametrize(
        ("codec", "encoder"), [("h264", "libx264"), ("hevc", "libx265")]
    )
    def test_common_codecs(self, codec: str, encoder: str) -> None:
        """Bare codec names resolve to FFmpeg's default encoder."""
        assert default_encoder_for_codec(codec) == encoder

    @pytest.mark.parametrize("name", ["libsvtav1", "vp9", "hevc_nvenc"])
    def test_other_names_unchanged(self, name: str) -> None:
        assert default_encoder_for_codec(name) == name
