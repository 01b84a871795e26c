"""Tests for Settings."""

from pathlib import Path

from infrastructure.config import Settings


def test_from_env_reads_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("DB_PATH", "data/health.db")
    monkeypatch.setenv("SEED_ON_STARTUP", "yes")
    monkeypatch.setenv("API_PORT", "9001")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = Settings.from_env(project_root=tmp_path)

    assert config.database_file == tmp_path / "data" / "health.db"
    assert config.seed_on_startup is True
    assert config.api_port == 9001
    assert config.log_level == "DEBUG"


def test_absolute_db_path_is_used_as_is(tmp_path) -> None:
    db = tmp_path / "elsewhere.db"
    config = Settings(project_root=Path("/unused"), db_path=str(db))

    assert config.database_file == db
    assert config.seed_on_startup is False


def test_relative_db_path_defaults_to_working_directory(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DB_PATH", "rel.db")

    config = Settings.from_env()

    assert config.database_file.resolve() == (tmp_path / "rel.db").resolve()
