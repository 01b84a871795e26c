"""Tests for the typer CLI, driven through CliRunner against a temp database."""

import pytest
from typer.testing import CliRunner

from adapters.cli.main import app

runner = CliRunner()


@pytest.fixture
def db(tmp_path) -> str:
    return str(tmp_path / "cli.db")


@pytest.fixture
def seeded_db(db) -> str:
    result = runner.invoke(app, ["--db", db, "seed"])
    assert result.exit_code == 0, result.output
    return db


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "wearable-health-hub" in result.output


def test_init_creates_tables(db) -> None:
    result = runner.invoke(app, ["--db", db, "init"])

    assert result.exit_code == 0, result.output
    assert "HealthData" in result.output

    # Re-running is harmless
    assert runner.invoke(app, ["--db", db, "init"]).exit_code == 0


def test_seed_twice_skips(seeded_db) -> None:
    result = runner.invoke(app, ["--db", seeded_db, "seed"])

    assert result.exit_code == 0
    assert "skipped" in result.output


def test_readings_for_person(seeded_db) -> None:
    result = runner.invoke(app, ["--db", seeded_db, "readings", "Alice", "Smith"])

    assert result.exit_code == 0, result.output
    assert "Heart Rate" in result.output
    assert "75.50" in result.output


def test_advice_for_person(seeded_db) -> None:
    result = runner.invoke(app, ["--db", seeded_db, "advice", "Alice", "Smith"])

    assert result.exit_code == 0
    assert "Increase Daily Steps" in result.output


@pytest.mark.parametrize("args, expected", [
    (["report", "average"], "69.75"),
    (["report", "max", "--metric", "Steps Count"], "11000.00"),
    (["report", "average", "-m", "Cholesterol"], "no readings"),
    (["report", "gender"], "Female"),
    (["report", "age-range", "--low", "50", "--high", "60"], "Jack"),
    (["report", "per-user", "--above", "70"], "Mia"),
])
def test_reports(seeded_db, args, expected) -> None:
    result = runner.invoke(app, ["--db", seeded_db, *args])

    assert result.exit_code == 0, result.output
    assert expected in result.output


def test_delete_user(seeded_db) -> None:
    result = runner.invoke(app, ["--db", seeded_db, "delete-user", "1", "--yes"])

    assert result.exit_code == 0, result.output
    assert "Readings removed: 4" in result.output

    result = runner.invoke(app, ["--db", seeded_db, "readings", "Alice", "Smith"])
    assert "no rows" in result.output


def test_delete_user_can_be_cancelled(seeded_db) -> None:
    result = runner.invoke(app, ["--db", seeded_db, "delete-user", "1"], input="n\n")

    assert result.exit_code == 0
    assert "Cancelled" in result.output


def test_delete_unknown_user_exits_nonzero(seeded_db) -> None:
    result = runner.invoke(app, ["--db", seeded_db, "delete-user", "999", "--yes"])

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_relative_db_lands_in_working_directory(tmp_path, monkeypatch) -> None:
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    result = runner.invoke(app, ["--db", "rel.db", "init"])

    assert result.exit_code == 0, result.output
    assert (workdir / "rel.db").exists()
