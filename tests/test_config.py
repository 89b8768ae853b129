"""Tests for configuration loading."""

from pathlib import Path

from hoopcompare.config import Config, get_config


def test_defaults(monkeypatch):
    """Unset variables fall back to the bundled data layout."""
    for var in ["HOOPCOMPARE_DATA_DIR", "HOOPCOMPARE_CAREER_FILE", "HOOPCOMPARE_SEASON_DIR", "LOG_LEVEL"]:
        monkeypatch.delenv(var, raising=False)

    config = get_config()

    assert config.career_path == Path("data") / "career_averages.csv"
    assert config.season_path == Path("data") / "player-stats"
    assert config.log_level == "INFO"


def test_from_env(monkeypatch, tmp_path):
    """Environment variables override the defaults."""
    monkeypatch.setenv("HOOPCOMPARE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("HOOPCOMPARE_CAREER_FILE", "stat.csv")
    monkeypatch.setenv("HOOPCOMPARE_SEASON_DIR", "yearly")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Config.from_env()

    assert config.career_path == tmp_path / "stat.csv"
    assert config.season_path == tmp_path / "yearly"
    assert config.log_level == "DEBUG"
