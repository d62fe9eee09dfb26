"""smartcut: lossless vs. smart cut planning for video trimming.

Decides whether a trim start can be stream-copied from a keyframe or needs a
short re-encoded bridge, and derives the encode parameters and per-encoder
quality arguments for that bridge.
"""

from smartcut.codec_params import get_codec_params
from smartcut.cutpoint import needs_smart_cut
from smartcut.domain import CodecParams, CutDecision, SmartCutPlan
from smartcut.encoders import (
    build_quality_args,
    get_optimal_preset,
    get_optimal_quality,
    supports_quality_value,
)
from smartcut.exceptions import (
    CodecParamsError,
    NoKeyframeFoundError,
    SmartCutError,
    UserFacingError,
)
from smartcut.planner import plan_smart_cut

__all__ = [
    "CodecParams",
    "CodecParamsError",
    "CutDecision",
    "NoKeyframeFoundError",
    "SmartCutError",
    "SmartCutPlan",
    "UserFacingError",
    "build_quality_args",
    "get_codec_params",
    "get_optimal_preset",
    "get_optimal_quality",
    "needs_smart_cut",
    "plan_smart_cut",
    "supports_quality_value",
]
