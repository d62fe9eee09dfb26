"""Encoder quality settings.

Maps an FFmpeg encoder name to its encoder family and, through a fixed
table, to the family's default quality value (CRF/CQ equivalent), default
preset, and the dialect of arguments used to express quality.

Quality values: lower is better quality and larger output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from smartcut.exceptions import IncompatibleQualityOverrideError

logger = logging.getLogger(__name__)

# VideoToolbox -q:v scale is 0-100, higher = better
VIDEOTOOLBOX_QUALITY = 65


class QualityDialect(Enum):
    """How an encoder family expresses a numeric quality target."""

    RATE_FACTOR = "rate_factor"  # -crf (x264, x265, SVT-AV1, and fallback)
    CONSTANT_QUALITY = "constant_quality"  # -cq (NVENC)
    GLOBAL_QUALITY = "global_quality"  # -global_quality (QuickSync ICQ)
    DUAL_QP = "dual_qp"  # -qp_i and -qp_p (AMD AMF CQP)
    FIXED_SCALE = "fixed_scale"  # -q with a fixed value (VideoToolbox)
    NONE = "none"  # bitrate/QP-only hardware (VAAPI)


class EncoderFamily(Enum):
    """Known encoder families.

    The ``*_OTHER`` members cover encoders recognized only by their hardware
    backend (e.g. "mpeg2_qsv"); they share the backend's preset and dialect
    but have no default quality value.
    """

    LIBX264 = "libx264"
    LIBX265 = "libx265"
    LIBSVTAV1 = "libsvtav1"
    NVENC_H264 = "h264_nvenc"
    NVENC_HEVC = "hevc_nvenc"
    NVENC_AV1 = "av1_nvenc"
    NVENC_OTHER = "nvenc"
    VIDEOTOOLBOX = "videotoolbox"
    QSV_H264 = "h264_qsv"
    QSV_HEVC = "hevc_qsv"
    QSV_AV1 = "av1_qsv"
    QSV_OTHER = "qsv"
    VAAPI = "vaapi"
    AMF_H264 = "h264_amf"
    AMF_HEVC = "hevc_amf"
    AMF_AV1 = "av1_amf"
    AMF_OTHER = "amf"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class EncoderProfile:
    """Quality defaults of an encoder family."""

    quality: int | None
    """Default CRF/CQ-equivalent value, or None if the family has none."""

    preset: str | None
    """Default speed/efficiency preset token."""

    dialect: QualityDialect


ENCODER_PROFILES: dict[EncoderFamily, EncoderProfile] = {
    # Software encoders
    EncoderFamily.LIBX264: EncoderProfile(23, "medium", QualityDialect.RATE_FACTOR),
    EncoderFamily.LIBX265: EncoderProfile(28, "medium", QualityDialect.RATE_FACTOR),
    # SVT-AV1 CRF range 0-63, presets 0-13
    EncoderFamily.LIBSVTAV1: EncoderProfile(35, "6", QualityDialect.RATE_FACTOR),
    # NVENC presets p1 (fastest) to p7 (best)
    EncoderFamily.NVENC_H264: EncoderProfile(
        23, "p4", QualityDialect.CONSTANT_QUALITY
    ),
    EncoderFamily.NVENC_HEVC: EncoderProfile(
        28, "p4", QualityDialect.CONSTANT_QUALITY
    ),
    EncoderFamily.NVENC_AV1: EncoderProfile(30, "p4", QualityDialect.CONSTANT_QUALITY),
    EncoderFamily.NVENC_OTHER: EncoderProfile(
        None, "p4", QualityDialect.CONSTANT_QUALITY
    ),
    EncoderFamily.VIDEOTOOLBOX: EncoderProfile(None, None, QualityDialect.FIXED_SCALE),
    EncoderFamily.QSV_H264: EncoderProfile(
        23, "medium", QualityDialect.GLOBAL_QUALITY
    ),
    EncoderFamily.QSV_HEVC: EncoderProfile(
        28, "medium", QualityDialect.GLOBAL_QUALITY
    ),
    EncoderFamily.QSV_AV1: EncoderProfile(30, "medium", QualityDialect.GLOBAL_QUALITY),
    EncoderFamily.QSV_OTHER: EncoderProfile(
        None, "medium", QualityDialect.GLOBAL_QUALITY
    ),
    EncoderFamily.VAAPI: EncoderProfile(None, None, QualityDialect.NONE),
    EncoderFamily.AMF_H264: EncoderProfile(23, "balanced", QualityDialect.DUAL_QP),
    EncoderFamily.AMF_HEVC: EncoderProfile(28, "balanced", QualityDialect.DUAL_QP),
    EncoderFamily.AMF_AV1: EncoderProfile(30, "balanced", QualityDialect.DUAL_QP),
    EncoderFamily.AMF_OTHER: EncoderProfile(None, "balanced", QualityDialect.DUAL_QP),
    # Unknown encoders get no defaults; an explicit quality uses -crf
    EncoderFamily.UNKNOWN: EncoderProfile(None, None, QualityDialect.RATE_FACTOR),
}

# Encoders identified by exact name
_EXACT_FAMILIES: dict[str, EncoderFamily] = {
    family.value: family
    for family in (
        EncoderFamily.LIBX264,
        EncoderFamily.LIBX265,
        EncoderFamily.LIBSVTAV1,
        EncoderFamily.NVENC_H264,
        EncoderFamily.NVENC_HEVC,
        EncoderFamily.NVENC_AV1,
        EncoderFamily.QSV_H264,
        EncoderFamily.QSV_HEVC,
        EncoderFamily.QSV_AV1,
        EncoderFamily.AMF_H264,
        EncoderFamily.AMF_HEVC,
        EncoderFamily.AMF_AV1,
    )
}

# Backends identified by substring, checked in order
_BACKEND_FAMILIES: tuple[tuple[str, EncoderFamily], ...] = (
    ("nvenc", EncoderFamily.NVENC_OTHER),
    ("videotoolbox", EncoderFamily.VIDEOTOOLBOX),
    ("qsv", EncoderFamily.QSV_OTHER),
    ("vaapi", EncoderFamily.VAAPI),
    ("amf", EncoderFamily.AMF_OTHER),
)

# Dialects that cannot carry a numeric quality value at all
_NO_NUMERIC_QUALITY = frozenset({QualityDialect.FIXED_SCALE, QualityDialect.NONE})


def classify_encoder(encoder: str) -> EncoderFamily:
    """Return the family of an FFmpeg encoder name.

    Examples:
        classify_encoder("libx264") -> EncoderFamily.LIBX264
        classify_encoder("hevc_vaapi") -> EncoderFamily.VAAPI
        classify_encoder("libvpx-vp9") -> EncoderFamily.UNKNOWN
    """
    family = _EXACT_FAMILIES.get(encoder)
    if family is not None:
        return family
    for marker, backend_family in _BACKEND_FAMILIES:
        if marker in encoder:
            return backend_family
    return EncoderFamily.UNKNOWN


def get_encoder_profile(encoder: str) -> EncoderProfile:
    """Return the quality profile for an encoder name."""
    return ENCODER_PROFILES[classify_encoder(encoder)]


def get_optimal_quality(encoder: str) -> int | None:
    """Return the default CRF/CQ-equivalent value for an encoder.

    None means the encoder is unrecognized or is controlled by bitrate or a
    fixed quality scale instead (VideoToolbox, VAAPI).
    """
    return get_encoder_profile(encoder).quality


def get_optimal_preset(encoder: str) -> str | None:
    """Return the default speed/efficiency preset for an encoder, if any."""
    return get_encoder_profile(encoder).preset


def supports_quality_value(encoder: str) -> bool:
    """Return True if the encoder has a default numeric quality value."""
    return get_optimal_quality(encoder) is not None


def _format_quality(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _quality_flags(
    dialect: QualityDialect, output_index: int, value: str
) -> list[str]:
    if dialect is QualityDialect.CONSTANT_QUALITY:
        return [f"-cq:{output_index}", value]
    if dialect is QualityDialect.GLOBAL_QUALITY:
        return [f"-global_quality:{output_index}", value]
    if dialect is QualityDialect.DUAL_QP:
        return [f"-qp_i:{output_index}", value, f"-qp_p:{output_index}", value]
    if dialect is QualityDialect.RATE_FACTOR:
        return [f"-crf:{output_index}", value]
    raise ValueError(f"Quality dialect {dialect.value} takes no quality value")


def build_quality_args(
    encoder: str,
    output_index: int,
    quality: float | None = None,
    preset: str | None = None,
) -> list[str]:
    """Build the FFmpeg quality arguments for one output stream.

    Args:
        encoder: FFmpeg encoder name.
        output_index: Output stream index the flags are scoped to.
        quality: Quality override; the family default is used if None.
        preset: Preset override; the family default is used if None.

    Returns:
        Argument list: quality flag(s), then preset, then the VideoToolbox
        fixed quality scale where applicable.

    Raises:
        IncompatibleQualityOverrideError: If ``quality`` is given for an
            encoder with no numeric quality control (VideoToolbox, VAAPI).
    """
    family = classify_encoder(encoder)
    profile = ENCODER_PROFILES[family]

    if quality is not None and profile.dialect in _NO_NUMERIC_QUALITY:
        raise IncompatibleQualityOverrideError(encoder, quality)
    if quality is not None and family is EncoderFamily.UNKNOWN:
        logger.warning(
            "Unrecognized encoder %s; passing quality %s as -crf",
            encoder,
            quality,
        )

    resolved_quality = quality if quality is not None else profile.quality
    resolved_preset = preset if preset is not None else profile.preset

    args: list[str] = []
    if resolved_quality is not None:
        args.extend(
            _quality_flags(
                profile.dialect, output_index, _format_quality(resolved_quality)
            )
        )

    if resolved_preset is not None:
        args.extend([f"-preset:{output_index}", resolved_preset])

    if profile.dialect is QualityDialect.FIXED_SCALE:
        args.extend([f"-q:{output_index}", str(VIDEOTOOLBOX_QUALITY)])

    return args
