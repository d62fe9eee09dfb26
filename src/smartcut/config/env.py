"""Environment variable reader with dependency injection support."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class EnvReader:
    """Read typed values from environment variables.

    Accepts an optional mapping in place of ``os.environ`` so code depending
    on the environment can be tested without touching the process state.

    Example:
        reader = EnvReader(env={"SMARTCUT_PROBE_TIMEOUT": "30"})
        reader.get_int("SMARTCUT_PROBE_TIMEOUT", 60)  # -> 30
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def get_str(self, var: str, default: str | None = None) -> str | None:
        """Return the raw value, or ``default`` if unset."""
        value = self._env.get(var)
        if value is None:
            return default
        return value

    def get_int(self, var: str, default: int | None = None) -> int | None:
        """Return the value parsed as int.

        Logs a warning and returns ``default`` when the value is not an
        integer.
        """
        value = self._env.get(var)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid integer value for %s: %s", var, value)
            return default

    def get_float(self, var: str, default: float | None = None) -> float | None:
        """Return the value parsed as float, or ``default`` if unset or invalid."""
        value = self._env.get(var)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            logger.warning("Invalid float value for %s: %s", var, value)
            return default

    def get_bool(self, var: str, default: bool | None = None) -> bool | None:
        """Return True for "true", "1", "yes" or "on" (case-insensitive)."""
        value = self._env.get(var)
        if value is None:
            return default
        return value.casefold() in ("true", "1", "yes", "on")

    def get_path(
        self, var: str, must_exist: bool = True, default: Path | None = None
    ) -> Path | None:
        """Return the value as an expanded Path.

        Args:
            var: Environment variable name.
            must_exist: Warn and return ``default`` if the path is missing.
            default: Value to return if unset.
        """
        value = self._env.get(var)
        if value is None:
            return default

        path = Path(value).expanduser()
        if must_exist and not path.exists():
            logger.warning(
                "Environment variable %s points to non-existent path: %s",
                var,
                value,
            )
            return default
        return path
