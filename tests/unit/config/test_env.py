"""Tests for EnvReader."""

from pathlib import Path

from smartcut.config import EnvReader


class TestEnvReader:
    """Tests for typed environment variable reading."""

    def test_get_str(self) -> None:
        reader = EnvReader(env={"SMARTCUT_ENCODER": "libx265"})
        assert reader.get_str("SMARTCUT_ENCODER") == "libx265"
        assert reader.get_str("SMARTCUT_PRESET", "slow") == "slow"

    def test_get_int(self) -> None:
        reader = EnvReader(env={"SMARTCUT_PROBE_TIMEOUT": "30"})
        assert reader.get_int("SMARTCUT_PROBE_TIMEOUT", 60) == 30

    def test_get_int_invalid_returns_default(self, caplog) -> None:
        """A non-integer value is ignored with a warning."""
        reader = EnvReader(env={"SMARTCUT_PROBE_TIMEOUT": "soon"})

        assert reader.get_int("SMARTCUT_PROBE_TIMEOUT", 60) == 60
        assert "Invalid integer value" in caplog.text

    def test_get_float(self) -> None:
        reader = EnvReader(env={"SMARTCUT_QUALITY": "20.5", "BAD": "x"})
        assert reader.get_float("SMARTCUT_QUALITY") == 20.5
        assert reader.get_float("BAD", 1.0) == 1.0
        assert reader.get_float("UNSET") is None

    def test_get_bool(self) -> None:
        reader = EnvReader(env={"A": "TRUE", "B": "on", "C": "0", "D": "nope"})
        assert reader.get_bool("A") is True
        assert reader.get_bool("B") is True
        assert reader.get_bool("C") is False
        assert reader.get_bool("D") is False
        assert reader.get_bool("UNSET", True) is True

    def test_get_path_must_exist(self, temp_dir: Path) -> None:
        """Missing paths fall back to the default unless must_exist is False."""
        missing = str(temp_dir / "missing")
        reader = EnvReader(env={"EXISTS": str(temp_dir), "MISSING": missing})

        assert reader.get_path("EXISTS") == temp_dir
        assert reader.get_path("MISSING") is None
        assert reader.get_path("MISSING", must_exist=False) == Path(missing)

    def test_reads_os_environ_by_default(self, monkeypatch) -> None:
        monkeypatch.setenv("SMARTCUT_PRESET", "veryfast")
        assert EnvReader().get_str("SMARTCUT_PRESET") == "veryfast"
