"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (applied by the caller)
2. Environment variables (SMARTCUT_*)
3. Config file (~/.smartcut/config.toml)
4. Default values

Environment variables:
- SMARTCUT_CONFIG_PATH: Path to config file (overrides default location)
- SMARTCUT_DATA_DIR: Path to data directory (overrides ~/.smartcut/)
- SMARTCUT_FFPROBE_PATH: Path to ffprobe executable
- SMARTCUT_PROBE_TIMEOUT: ffprobe timeout in seconds
- SMARTCUT_ENCODER / SMARTCUT_QUALITY / SMARTCUT_PRESET: encoding overrides
- SMARTCUT_LOG_LEVEL / SMARTCUT_LOG_FILE / SMARTCUT_LOG_FORMAT: logging
- SMARTCUT_LOG_INCLUDE_STDERR: also log to stderr when a log file is set
"""

from __future__ import annotations

import logging
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from smartcut.config.env import EnvReader
from smartcut.config.models import (
    EncodingConfig,
    LoggingConfig,
    ProbeConfig,
    SmartCutConfig,
    ToolPathsConfig,
)
from smartcut.config.validation import EncodingSettingsModel

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path.home() / ".smartcut"

_config_cache: SmartCutConfig | None = None
_config_lock = threading.Lock()


def get_data_dir(env: EnvReader | None = None) -> Path:
    """Get the smartcut data directory (~/.smartcut/ unless overridden)."""
    env = env or EnvReader()
    return env.get_path("SMARTCUT_DATA_DIR", must_exist=False) or DEFAULT_DATA_DIR


def get_default_config_path(env: EnvReader | None = None) -> Path:
    """Get the config file path, honoring SMARTCUT_CONFIG_PATH."""
    env = env or EnvReader()
    env_path = env.get_path("SMARTCUT_CONFIG_PATH", must_exist=False)
    if env_path is not None:
        return env_path
    return get_data_dir(env) / "config.toml"


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from a TOML file.

    Args:
        path: Path to config file. If None, uses the default location.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist or
        cannot be parsed.
    """
    if path is None:
        path = get_default_config_path()

    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}

    logger.debug("Loaded config from %s", path)
    return data


def _build_encoding(
    file_section: dict[str, Any], env: EnvReader
) -> EncodingConfig:
    settings = {
        "encoder": env.get_str("SMARTCUT_ENCODER", file_section.get("encoder")),
        "quality": env.get_float("SMARTCUT_QUALITY", file_section.get("quality")),
        "preset": env.get_str("SMARTCUT_PRESET", file_section.get("preset")),
    }
    unknown = set(file_section) - set(settings)
    if unknown:
        raise ValueError(
            f"Unknown keys in [encoding] section: {', '.join(sorted(unknown))}"
        )
    try:
        return EncodingSettingsModel(**settings).to_config()
    except ValidationError as e:
        raise ValueError(f"Invalid [encoding] settings: {e}") from e


def build_config(
    file_data: dict[str, Any] | None = None,
    env: EnvReader | None = None,
) -> SmartCutConfig:
    """Build configuration from file data and environment.

    Args:
        file_data: Parsed config file contents (empty dict if None).
        env: Environment reader (reads os.environ if None).

    Returns:
        Fully populated SmartCutConfig.

    Raises:
        ValueError: If a configured value is invalid.
    """
    file_data = file_data or {}
    env = env or EnvReader()

    tools_section = file_data.get("tools", {})
    probe_section = file_data.get("probe", {})
    logging_section = file_data.get("logging", {})

    file_ffprobe = tools_section.get("ffprobe")
    tools = ToolPathsConfig(
        ffprobe=env.get_path("SMARTCUT_FFPROBE_PATH")
        or (Path(file_ffprobe).expanduser() if file_ffprobe else None),
    )

    probe = ProbeConfig(
        timeout_seconds=env.get_int(
            "SMARTCUT_PROBE_TIMEOUT",
            probe_section.get("timeout_seconds", ProbeConfig.timeout_seconds),
        ),
    )

    defaults = LoggingConfig()
    log_file = env.get_path(
        "SMARTCUT_LOG_FILE", must_exist=False
    ) or logging_section.get("file")
    logging_config = LoggingConfig(
        level=env.get_str("SMARTCUT_LOG_LEVEL", logging_section.get("level"))
        or defaults.level,
        file=Path(log_file).expanduser() if log_file else None,
        format=env.get_str("SMARTCUT_LOG_FORMAT", logging_section.get("format"))
        or defaults.format,
        include_stderr=env.get_bool(
            "SMARTCUT_LOG_INCLUDE_STDERR",
            logging_section.get("include_stderr", defaults.include_stderr),
        ),
        max_bytes=logging_section.get("max_bytes", defaults.max_bytes),
        backup_count=logging_section.get("backup_count", defaults.backup_count),
    )

    return SmartCutConfig(
        tools=tools,
        probe=probe,
        encoding=_build_encoding(file_data.get("encoding", {}), env),
        logging=logging_config,
    )


def get_config(config_path: Path | None = None) -> SmartCutConfig:
    """Get the effective configuration (cached after the first call).

    Args:
        config_path: Explicit config file path. Bypasses the cache.

    Returns:
        SmartCutConfig with all precedence layers applied.
    """
    global _config_cache

    if config_path is not None:
        return build_config(load_config_file(config_path))

    with _config_lock:
        if _config_cache is None:
            _config_cache = build_config(load_config_file())
        return _config_cache


def clear_config_cache() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_cache
    with _config_lock:
        _config_cache = None
