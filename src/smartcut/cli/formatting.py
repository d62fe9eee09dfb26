"""Output formatting for CLI commands."""

import json
from collections.abc import Sequence

from smartcut.domain import Keyframe, SmartCutPlan


def format_plan_human(plan: SmartCutPlan, desired_cut_from: float) -> str:
    """Format a smart cut plan for terminal output."""
    decision = plan.decision
    lines: list[str] = [f"Desired start: {desired_cut_from:.6f}s"]

    if not decision.segment_needs_smart_cut:
        lines.append(f"Lossless cut from keyframe at {decision.lossless_cut_from:.6f}s")
        return "\n".join(lines)

    lines.append(
        f"Smart cut: re-encode {desired_cut_from:.6f}s to "
        f"{decision.lossless_cut_from:.6f}s, copy from "
        f"{decision.lossless_cut_from:.6f}s"
    )
    params = plan.codec_params
    if params is not None:
        timebase = params.video_timebase
        lines.append(f"  Video stream: #{params.video_stream.index}")
        lines.append(f"  Codec: {params.video_codec}")
        lines.append(f"  Bitrate: {params.video_bitrate} bit/s")
        lines.append(f"  Timebase: {timebase if timebase is not None else 'default'}")
    lines.append(f"  Encoder: {plan.encoder}")
    lines.append(f"  Quality args: {' '.join(plan.quality_args) or '(none)'}")
    return "\n".join(lines)


def format_plan_json(plan: SmartCutPlan) -> str:
    """Format a smart cut plan as JSON."""
    return json.dumps(plan.to_dict(), indent=2)


def format_keyframes_human(keyframes: Sequence[Keyframe]) -> str:
    """Format keyframe times, one per line."""
    if not keyframes:
        return "(no keyframes found)"
    return "\n".join(f"{kf.time:.6f}" for kf in keyframes)


def format_args_human(args: Sequence[str]) -> str:
    """Format an argument list as a single command-line fragment."""
    return " ".join(args) if args else "(no quality arguments)"
