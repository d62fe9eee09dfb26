"""Keyframe lookup helpers over ascending keyframe sequences."""

from collections.abc import Sequence

from smartcut.domain import Keyframe

# Resolution of ffprobe pts_time values; two times closer than this are
# the same frame.
KEYFRAME_TIME_EPSILON = 1e-6


def get_interval_around_time(around_time: float, window: float) -> tuple[float, float]:
    """Return the ``(start, end)`` read interval, clamped at zero."""
    return max(around_time - window, 0.0), around_time + window


def find_keyframe_at_exact_time(
    keyframes: Sequence[Keyframe], exact_time: float
) -> Keyframe | None:
    """Return the keyframe located at ``exact_time``, if any."""
    return next(
        (
            kf
            for kf in keyframes
            if abs(kf.time - exact_time) < KEYFRAME_TIME_EPSILON
        ),
        None,
    )


def find_next_keyframe(keyframes: Sequence[Keyframe], time: float) -> Keyframe | None:
    """Return the earliest keyframe at or after ``time``.

    ``keyframes`` must be sorted ascending by time.
    """
    return next((kf for kf in keyframes if kf.time >= time), None)
