"""Tests for external tool path resolution."""

from pathlib import Path
from unittest.mock import patch

import pytest

from smartcut.config import clear_config_cache
from smartcut.tools import ToolNotFoundError, get_tool_path, require_tool


class TestGetToolPath:
    """Tests for get_tool_path()."""

    def test_configured_path(self, temp_dir: Path, monkeypatch) -> None:
        """An existing configured path wins over PATH."""
        ffprobe = temp_dir / "ffprobe"
        ffprobe.touch()
        monkeypatch.setenv("SMARTCUT_FFPROBE_PATH", str(ffprobe))
        clear_config_cache()

        with patch("smartcut.tools.shutil.which") as which:
            assert get_tool_path("ffprobe") == ffprobe

        which.assert_not_called()

    def test_missing_configured_path_falls_back(
        self, smartcut_isolated: Path, caplog
    ) -> None:
        """A configured path that no longer exists falls back to PATH."""
        (smartcut_isolated / "config.toml").write_text(
            '[tools]\nffprobe = "/nonexistent/ffprobe"\n'
        )
        clear_config_cache()

        with patch("smartcut.tools.shutil.which", return_value="/usr/bin/ffprobe"):
            assert get_tool_path("ffprobe") == Path("/usr/bin/ffprobe")

        assert "does not exist" in caplog.text

    def test_not_found(self) -> None:
        with patch("smartcut.tools.shutil.which", return_value=None):
            assert get_tool_path("ffprobe") is None


class TestRequireTool:
    """Tests for require_tool()."""

    def test_found(self) -> None:
        with patch("smartcut.tools.shutil.which", return_value="/usr/bin/ffprobe"):
            assert require_tool("ffprobe") == Path("/usr/bin/ffprobe")

    def test_not_found(self) -> None:
        with patch("smartcut.tools.shutil.which", return_value=None):
            with pytest.raises(ToolNotFoundError, match="ffprobe"):
                require_tool("ffprobe")
