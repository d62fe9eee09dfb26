"""CLI encoder-args command."""

import json
import sys

import click

from smartcut.cli.exit_codes import ExitCode
from smartcut.cli.formatting import format_args_human
from smartcut.cli.options import resolve_encoding
from smartcut.encoders import build_quality_args, classify_encoder
from smartcut.exceptions import IncompatibleQualityOverrideError


@click.command("encoder-args")
@click.argument("encoder")
@click.option(
    "--index",
    "-i",
    "output_index",
    type=click.IntRange(min=0),
    default=0,
    help="Output stream index the arguments apply to (default: 0).",
)
@click.option("--quality", "-q", type=float, default=None, help="Quality override.")
@click.option("--preset", "-p", default=None, help="Preset override.")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["human", "json"]),
    default="human",
    help="Output format (default: human)",
)
@click.pass_context
def encoder_args_command(
    ctx: click.Context,
    encoder: str,
    output_index: int,
    quality: float | None,
    preset: str | None,
    output_format: str,
) -> None:
    """Print the quality arguments for ENCODER.

    ENCODER is an FFmpeg encoder name such as libx264 or hevc_nvenc.
    """
    encoding = resolve_encoding(ctx.obj["config"].encoding, encoder, quality, preset)
    name = encoding.encoder or encoder

    try:
        args = build_quality_args(
            name, output_index, encoding.quality, encoding.preset
        )
    except IncompatibleQualityOverrideError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.INVALID_ARGUMENT)

    if output_format == "json":
        click.echo(
            json.dumps(
                {
                    "encoder": name,
                    "family": classify_encoder(name).name.lower(),
                    "args": args,
                },
                indent=2,
            )
        )
    else:
        click.echo(format_args_human(args))
