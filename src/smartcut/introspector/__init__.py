"""Stream introspection for smartcut.

- probe_streams: async ffprobe probe returning stream descriptors
- get_real_video_streams: classifier dropping cover-art streams
- parse_bit_rate / parse_timebase / parse_duration: field parsers
"""

from smartcut.introspector.ffprobe import ProbeResult, probe_streams
from smartcut.introspector.parsers import (
    get_real_video_streams,
    is_stream_thumbnail,
    parse_bit_rate,
    parse_duration,
    parse_stream,
    parse_streams,
    parse_timebase,
)

__all__ = [
    "ProbeResult",
    "probe_streams",
    "get_real_video_streams",
    "is_stream_thumbnail",
    "parse_bit_rate",
    "parse_duration",
    "parse_stream",
    "parse_streams",
    "parse_timebase",
]
