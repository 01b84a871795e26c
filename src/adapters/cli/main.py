"""
adapters.cli.main - CLI adapter for the Wearable Health Hub.

Mirrors src/adapters/rest/ but for terminal use. Uses the same
ServiceFactory and query repository as the REST API so behaviour is
identical.

Commands
--------
  init          Create the database and tables (safe to re-run)
  seed          Load the sample users, devices, metrics and readings
  users         List all users
  readings      Readings of one person, newest first
  advice        Recommendations for one person
  report        Run one of the reporting queries
  delete-user   Delete a user and everything that belongs to them
  serve         Start the REST API

Usage
-----
  python run_cli.py init
  python run_cli.py seed
  python run_cli.py readings Alice Smith
  python run_cli.py report average --metric "Heart Rate"
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
import os
import sqlite3
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

# ── Ensure src/ is on the path ──
_SRC = Path(__file__).resolve().parent.parent.parent
sys.path.insert(0, str(_SRC))

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm
from rich.table import Table

from domain.exceptions import NotFoundError
from factory import ServiceFactory
from infrastructure.config import Settings
from infrastructure.persistence.errors import classify_integrity_error
from infrastructure.persistence.migrations import list_tables

__version__ = "0.1.0"

console = Console()
app = typer.Typer(
    help="Wearable Health Hub CLI",
    add_completion=False,
    no_args_is_help=True,
)

# Set by the global --db option
_db_override: Optional[str] = None


class Report(str, Enum):
    overview = "overview"
    readings = "readings"
    reading_counts = "reading-counts"
    device_models = "device-models"
    user_devices = "user-devices"
    gender = "gender"
    recent = "recent"
    age_range = "age-range"
    average = "average"
    maximum = "max"
    per_user = "per-user"


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _settings() -> Settings:
    config = Settings.from_env()
    if _db_override:
        config = dataclasses.replace(config, db_path=_db_override)
    logging.basicConfig(level=config.log_level)
    return config


async def _make_factory() -> ServiceFactory:
    """Create a ServiceFactory with the schema in place."""
    factory = ServiceFactory(_settings())
    await factory.initialize(seed=False)
    return factory


def _run(coro) -> None:
    """Run a command coroutine, turning expected failures into exit code 1."""
    try:
        asyncio.run(coro)
    except NotFoundError as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1)
    except sqlite3.IntegrityError as exc:
        kind = classify_integrity_error(exc)
        console.print(f"[bold red]Rejected ({kind.value}):[/bold red] {exc}")
        raise typer.Exit(code=1)


def _render(title: str, rows: list) -> None:
    """Print a list of dataclass rows as a table."""
    if not rows:
        console.print(f"[dim]{title}: no rows.[/dim]")
        return
    t = Table(title=title, box=box.SIMPLE)
    columns = [f.name for f in dataclasses.fields(rows[0])]
    for name in columns:
        t.add_column(name.replace("_", " ").title())
    for row in rows:
        t.add_row(*("" if getattr(row, c) is None else str(getattr(row, c)) for c in columns))
    console.print(t)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"wearable-health-hub v{__version__}")
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Commands: Schema and fixtures
# ---------------------------------------------------------------------------

@app.command()
def init() -> None:
    """Create the database and all tables. Re-running changes nothing."""
    async def _go() -> None:
        factory = await _make_factory()
        tables = await list_tables(factory.connection)
        console.print(Panel(
            f"[bold green]Database ready:[/bold green] {factory.connection.db_path}\n"
            f"Tables: {', '.join(tables)}",
            border_style="green",
        ))

    _run(_go())


@app.command()
def seed() -> None:
    """Load the sample fixtures into an empty database."""
    async def _go() -> None:
        factory = await _make_factory()
        report = await factory.seed()
        if report.skipped:
            console.print("[yellow]Database already has users; seed skipped.[/yellow]")
            return
        t = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
        t.add_column("Table", style="bold")
        t.add_column("Rows")
        for table, count in report.inserted.items():
            t.add_row(table, str(count))
        console.print(Panel(t, title="Seeded", border_style="green"))

    _run(_go())


# ---------------------------------------------------------------------------
# Commands: Lookups
# ---------------------------------------------------------------------------

@app.command()
def users() -> None:
    """List all users."""
    async def _go() -> None:
        factory = await _make_factory()
        _render("Users", await factory.create_query_repository().list_users())

    _run(_go())


@app.command()
def readings(
    first_name: str = typer.Argument(..., help="First name, e.g. Alice"),
    last_name: str = typer.Argument(..., help="Last name, e.g. Smith"),
) -> None:
    """Show every reading of one person, newest first."""
    async def _go() -> None:
        factory = await _make_factory()
        rows = await factory.create_query_repository().readings_for_user_name(
            first_name, last_name,
        )
        _render(f"Readings for {first_name} {last_name}", rows)

    _run(_go())


@app.command()
def advice(
    first_name: str = typer.Argument(...),
    last_name: str = typer.Argument(...),
) -> None:
    """Show the recommendations for one person."""
    async def _go() -> None:
        factory = await _make_factory()
        rows = await factory.create_query_repository().recommendations_for_user_name(
            first_name, last_name,
        )
        _render(f"Recommendations for {first_name} {last_name}", rows)

    _run(_go())


@app.command()
def report(
    name: Report = typer.Argument(..., help="Which report to run."),
    metric: str = typer.Option("Heart Rate", "--metric", "-m", help="Metric for average/max/per-user."),
    above: Optional[float] = typer.Option(None, "--above", help="per-user: keep averages above this."),
    low: int = typer.Option(30, "--low", help="age-range: lower bound."),
    high: int = typer.Option(40, "--high", help="age-range: upper bound."),
    limit: int = typer.Option(5, "--limit", "-n", help="recent: number of readings."),
) -> None:
    """Run one of the reporting queries."""
    async def _go() -> None:
        factory = await _make_factory()
        repo = factory.create_query_repository()

        if name is Report.overview:
            _render("Overview", [await repo.overview()])
        elif name is Report.readings:
            _render("Readings", await repo.user_metric_readings())
        elif name is Report.reading_counts:
            _render("Readings per user", await repo.reading_counts_per_user())
        elif name is Report.device_models:
            _render("Readings per device model", await repo.readings_per_device_model())
        elif name is Report.user_devices:
            _render("User devices", await repo.user_devices())
        elif name is Report.gender:
            _render("Users by gender", await repo.users_by_gender())
        elif name is Report.recent:
            _render(f"{limit} most recent readings", await repo.recent_readings(limit=limit))
        elif name is Report.age_range:
            _render(f"Users aged {low}-{high}", await repo.users_in_age_range(low, high))
        elif name is Report.average:
            value = await repo.average_metric_value(metric)
            console.print(f"Average {metric}: [bold]{_fmt(value)}[/bold]")
        elif name is Report.maximum:
            value = await repo.max_metric_value(metric)
            console.print(f"Max {metric}: [bold]{_fmt(value)}[/bold]")
        elif name is Report.per_user:
            _render(f"Average {metric} per user", await repo.average_metric_per_user(metric, above))

    _run(_go())


def _fmt(value) -> str:
    if value is None:
        return "no readings"
    return f"{float(value):.2f}"


# ---------------------------------------------------------------------------
# Commands: Deletion
# ---------------------------------------------------------------------------

@app.command("delete-user")
def delete_user(
    user_id: int = typer.Argument(..., help="UserID to delete."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Delete a user together with their readings, recommendations and device links."""
    async def _go() -> None:
        factory = await _make_factory()
        service = factory.create_user_service()
        user = await service.get(user_id)
        if not yes and not Confirm.ask(f"Delete [bold]{user.full_name}[/bold] <{user.email}>?"):
            console.print("[dim]Cancelled.[/dim]")
            return
        result = await service.delete_user(user_id)
        console.print(Panel(
            f"[bold green]Deleted user {result.user_id}[/bold green] <{result.email}>\n"
            f"Readings removed: {result.readings}\n"
            f"Recommendations removed: {result.recommendations}\n"
            f"Device links removed: {result.device_links}",
            border_style="green",
        ))

    _run(_go())


# ---------------------------------------------------------------------------
# Commands: REST API
# ---------------------------------------------------------------------------

@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes."),
) -> None:
    """Start the REST API with uvicorn."""
    import uvicorn

    config = _settings()
    if _db_override:
        # The app builds its own Settings from the environment on startup
        os.environ["DB_PATH"] = _db_override
    uvicorn.run(
        "adapters.rest.app:app",
        host=config.api_host,
        port=config.api_port,
        reload=reload,
    )


# ---------------------------------------------------------------------------
# Global options
# ---------------------------------------------------------------------------

@app.callback()
def _callback(
    db: Optional[str] = typer.Option(
        None, "--db",
        help="SQLite database file (overrides DB_PATH).",
    ),
    version: bool = typer.Option(
        False, "--version", "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Wearable Health Hub CLI"""
    global _db_override
    _db_override = db


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
