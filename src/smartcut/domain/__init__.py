"""Domain models for smartcut.

Usage:
    from smartcut.domain import CutDecision, CodecParams, VideoStreamDescriptor
"""

from .models import (
    CodecParams,
    CutDecision,
    Frame,
    Keyframe,
    SmartCutPlan,
    Timebase,
    VideoStreamDescriptor,
)

__all__ = [
    "CodecParams",
    "CutDecision",
    "Frame",
    "Keyframe",
    "SmartCutPlan",
    "Timebase",
    "VideoStreamDescriptor",
]
