"""CLI keyframes command."""

import asyncio
import json
import sys
from pathlib import Path

import click

from smartcut.cli.exit_codes import ExitCode
from smartcut.cli.formatting import format_keyframes_human
from smartcut.cli.options import require_ffprobe
from smartcut.exceptions import KeyframeReadError
from smartcut.keyframes import FFprobeKeyframeSource


@click.command("keyframes")
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--at",
    "around_time",
    type=click.FloatRange(min=0),
    required=True,
    help="Center of the search window in seconds.",
)
@click.option(
    "--window",
    "-w",
    type=click.FloatRange(min=0, min_open=True),
    default=10.0,
    show_default=True,
    help="Seconds searched on each side of --at.",
)
@click.option(
    "--stream",
    "-s",
    "stream_index",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Stream index to read.",
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
def keyframes_command(
    ctx: click.Context,
    file: Path,
    around_time: float,
    window: float,
    stream_index: int,
    output_format: str,
) -> None:
    """List keyframes of FILE around --at seconds."""
    if not file.exists():
        click.echo(f"Error: File not found: {file}", err=True)
        sys.exit(ExitCode.TARGET_NOT_FOUND)

    source = FFprobeKeyframeSource(
        require_ffprobe(), timeout=ctx.obj["config"].probe.timeout_seconds
    )
    try:
        keyframes = asyncio.run(source.query(file, stream_index, around_time, window))
    except KeyframeReadError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.PROBE_FAILED)
    except KeyboardInterrupt:
        click.echo("Interrupted", err=True)
        sys.exit(ExitCode.INTERRUPTED)

    if output_format == "json":
        click.echo(json.dumps([kf.time for kf in keyframes]))
    else:
        click.echo(format_keyframes_human(keyframes))
