"""CLI module for smartcut."""

import logging
import sys
from pathlib import Path

import click

from smartcut.cli.exit_codes import ExitCode

_logging_configured: bool = False

logger = logging.getLogger(__name__)


def _configure_logging(
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Configure logging from CLI options (once per process)."""
    global _logging_configured
    if _logging_configured:
        return

    from smartcut.config import configure_logging_from_cli

    configure_logging_from_cli(
        level=log_level,
        file=log_file,
        format="json" if log_json else None,
    )
    _logging_configured = True


@click.group()
@click.version_option(package_name="smartcut")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """smartcut - plan lossless and smart cuts for video trimming."""
    from smartcut.config import get_config

    ctx.ensure_object(dict)
    try:
        _configure_logging(log_level, log_file, log_json)
        ctx.obj.setdefault("config", get_config())
    except ValueError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)


# Defer import to avoid circular dependency
def _register_commands():
    from smartcut.cli.encoder_args import encoder_args_command
    from smartcut.cli.keyframes import keyframes_command
    from smartcut.cli.plan import plan_command

    main.add_command(encoder_args_command)
    main.add_command(keyframes_command)
    main.add_command(plan_command)


_register_commands()
