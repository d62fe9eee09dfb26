"""Shared option handling for CLI commands."""

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from smartcut.cli.exit_codes import ExitCode
from smartcut.config import EncodingConfig, EncodingSettingsModel


def resolve_encoding(
    base: EncodingConfig,
    encoder: str | None,
    quality: float | None,
    preset: str | None,
) -> EncodingConfig:
    """Merge CLI encoding options over configured ones and validate them.

    Exits with INVALID_ARGUMENT if the merged settings are invalid.
    """
    try:
        model = EncodingSettingsModel(
            encoder=encoder if encoder is not None else base.encoder,
            quality=quality if quality is not None else base.quality,
            preset=preset if preset is not None else base.preset,
        )
    except ValidationError as e:
        click.echo(f"Error: Invalid encoding options: {e}", err=True)
        sys.exit(ExitCode.INVALID_ARGUMENT)
    return model.to_config()


def require_ffprobe() -> Path:
    """Return the ffprobe path or exit with FFPROBE_NOT_FOUND."""
    from smartcut.tools import ToolNotFoundError, require_tool

    try:
        return require_tool("ffprobe")
    except ToolNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.FFPROBE_NOT_FOUND)
