"""Configuration data models.

This module defines dataclasses for smartcut configuration options.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ToolPathsConfig:
    """Paths to external tools. ``None`` means look the tool up in PATH."""

    ffprobe: Path | None = None


@dataclass
class ProbeConfig:
    """Settings for ffprobe invocations."""

    # Per-call timeout in seconds; keyframe reads over long windows can be slow
    timeout_seconds: int = 60

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not 1 <= self.timeout_seconds <= 3600:
            raise ValueError(
                f"timeout_seconds must be between 1 and 3600, "
                f"got {self.timeout_seconds}"
            )


@dataclass(frozen=True)
class EncodingConfig:
    """Preferred encoder settings for the re-encoded segment.

    Any field left as None falls back to the encoder's own defaults
    (see smartcut.encoders).
    """

    encoder: str | None = None
    """FFmpeg encoder to use instead of the one matching the source codec."""

    quality: float | None = None
    """CRF/CQ-equivalent override."""

    preset: str | None = None
    """Preset token override."""


@dataclass
class LoggingConfig:
    """Configuration for logging output."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.casefold() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.casefold() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )


@dataclass
class SmartCutConfig:
    """Top-level configuration."""

    tools: ToolPathsConfig = field(default_factory=ToolPathsConfig)
    probe: ProbeConfig = field(default_factory=ProbeConfig)
    encoding: EncodingConfig = field(default_factory=EncodingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
