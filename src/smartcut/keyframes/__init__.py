"""Keyframe reading and lookup."""

from smartcut.keyframes.ffprobe import FFprobeKeyframeSource, parse_packets
from smartcut.keyframes.interface import KeyframeSource
from smartcut.keyframes.search import (
    KEYFRAME_TIME_EPSILON,
    find_keyframe_at_exact_time,
    find_next_keyframe,
    get_interval_around_time,
)

__all__ = [
    "KEYFRAME_TIME_EPSILON",
    "FFprobeKeyframeSource",
    "KeyframeSource",
    "find_keyframe_at_exact_time",
    "find_next_keyframe",
    "get_interval_around_time",
    "parse_packets",
]
