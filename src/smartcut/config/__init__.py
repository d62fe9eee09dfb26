"""Configuration management for smartcut.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (SMARTCUT_*)
3. Config file (~/.smartcut/config.toml)
4. Default values (lowest priority)
"""

from smartcut.config.env import EnvReader
from smartcut.config.loader import (
    build_config,
    clear_config_cache,
    get_config,
    get_data_dir,
    get_default_config_path,
    load_config_file,
)
from smartcut.config.logging_factory import (
    build_logging_config,
    configure_logging_from_cli,
)
from smartcut.config.models import (
    EncodingConfig,
    LoggingConfig,
    ProbeConfig,
    SmartCutConfig,
    ToolPathsConfig,
)
from smartcut.config.validation import EncodingSettingsModel

__all__ = [
    # Models
    "EncodingConfig",
    "LoggingConfig",
    "ProbeConfig",
    "SmartCutConfig",
    "ToolPathsConfig",
    "EncodingSettingsModel",
    # Loader
    "EnvReader",
    "build_config",
    "clear_config_cache",
    "get_config",
    "get_data_dir",
    "get_default_config_path",
    "load_config_file",
    # Logging
    "build_logging_config",
    "configure_logging_from_cli",
]
