"""Logging configuration factory.

Merges CLI logging options over the loaded configuration.
"""

from __future__ import annotations

from pathlib import Path

from smartcut.config.models import LoggingConfig


def build_logging_config(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> LoggingConfig:
    """Build LoggingConfig by merging base config with CLI overrides.

    Non-None arguments replace the corresponding base values. Validation runs
    in LoggingConfig.__post_init__, so invalid values raise ValueError.
    """
    return LoggingConfig(
        level=level if level is not None else base.level,
        file=file if file is not None else base.file,
        format=format if format is not None else base.format,
        include_stderr=(
            include_stderr if include_stderr is not None else base.include_stderr
        ),
        max_bytes=base.max_bytes,
        backup_count=base.backup_count,
    )


def configure_logging_from_cli(
    *,
    config_path: Path | None = None,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
) -> None:
    """Load config, apply CLI overrides and configure logging."""
    from smartcut.config import get_config
    from smartcut.logging import configure_logging

    config = get_config(config_path=config_path)
    configure_logging(
        build_logging_config(config.logging, level=level, file=file, format=format)
    )
