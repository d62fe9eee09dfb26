"""CLI plan command."""

import asyncio
import logging
import sys
from pathlib import Path

import click

from smartcut.cli.exit_codes import ExitCode
from smartcut.cli.formatting import format_plan_human, format_plan_json
from smartcut.cli.options import require_ffprobe, resolve_encoding
from smartcut.config import EncodingConfig, SmartCutConfig
from smartcut.domain import SmartCutPlan
from smartcut.exceptions import (
    IncompatibleQualityOverrideError,
    MediaIntrospectionError,
    SmartCutError,
    UserFacingError,
)
from smartcut.introspector import probe_streams
from smartcut.keyframes import FFprobeKeyframeSource
from smartcut.planner import plan_smart_cut

logger = logging.getLogger(__name__)


async def _build_plan(
    file_path: Path,
    cut_from: float,
    ffprobe_path: Path,
    config: SmartCutConfig,
    encoding: EncodingConfig,
    output_index: int | None,
) -> SmartCutPlan:
    timeout = config.probe.timeout_seconds
    probe = await probe_streams(file_path, ffprobe_path, timeout=timeout)
    return await plan_smart_cut(
        file_path,
        cut_from,
        probe.streams,
        probe.duration,
        FFprobeKeyframeSource(ffprobe_path, timeout=timeout),
        encoder=encoding.encoder,
        quality=encoding.quality,
        preset=encoding.preset,
        output_index=output_index,
    )


@click.command("plan")
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--at",
    "cut_from",
    type=click.FloatRange(min=0),
    required=True,
    help="Desired segment start in seconds.",
)
@click.option("--encoder", "-e", default=None, help="Encoder for the re-encoded part.")
@click.option("--quality", "-q", type=float, default=None, help="Quality override.")
@click.option("--preset", "-p", default=None, help="Preset override.")
@click.option(
    "--index",
    "-i",
    "output_index",
    type=click.IntRange(min=0),
    default=None,
    help="Output stream index for quality arguments (default: video stream).",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    help="Output format (default: human)",
)
@click.pass_context
def plan_command(
    ctx: click.Context,
    file: Path,
    cut_from: float,
    encoder: str | None,
    quality: float | None,
    preset: str | None,
    output_index: int | None,
    output_format: str,
) -> None:
    """Plan a cut of FILE starting at --at seconds.

    Reports whether the start can be cut losslessly on a keyframe or needs a
    smart cut, and for a smart cut the codec, bitrate, time base and encoder
    quality arguments for the re-encoded part.
    """
    if not file.exists():
        click.echo(f"Error: File not found: {file}", err=True)
        sys.exit(ExitCode.TARGET_NOT_FOUND)

    config: SmartCutConfig = ctx.obj["config"]
    encoding = resolve_encoding(config.encoding, encoder, quality, preset)
    ffprobe_path = require_ffprobe()

    try:
        plan = asyncio.run(
            _build_plan(file, cut_from, ffprobe_path, config, encoding, output_index)
        )
    except UserFacingError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(ExitCode.NO_KEYFRAME_FOUND)
    except MediaIntrospectionError as e:
        click.echo(f"Error: Could not probe file: {file}", err=True)
        click.echo(f"Reason: {e}", err=True)
        sys.exit(ExitCode.PROBE_FAILED)
    except IncompatibleQualityOverrideError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.INVALID_ARGUMENT)
    except SmartCutError as e:
        logger.debug("Smart cut planning failed", exc_info=True)
        click.echo(f"Error: Smart cut planning failed: {e}", err=True)
        sys.exit(ExitCode.OPERATION_FAILED)
    except KeyboardInterrupt:
        logger.info("Interrupted while planning %s", file)
        click.echo("Interrupted", err=True)
        sys.exit(ExitCode.INTERRUPTED)

    if output_format == "json":
        click.echo(format_plan_json(plan))
    else:
        click.echo(format_plan_human(plan, cut_from))
