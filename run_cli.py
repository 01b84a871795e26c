"""
Run the Wearable Health Hub CLI.

Usage:
    python run_cli.py [--db PATH] COMMAND [OPTIONS]

Commands:
    init          Create the database and tables (safe to re-run)
    seed          Load the sample users, devices, metrics and readings
    users         List all users
    readings      Readings of one person, newest first
    advice        Recommendations for one person
    report        Run one of the reporting queries
    delete-user   Delete a user and everything that belongs to them
    serve         Start the REST API

Examples:
    python run_cli.py init
    python run_cli.py seed
    python run_cli.py readings Alice Smith
    python run_cli.py report per-user --metric "Heart Rate" --above 70

Environment variables (all optional):
    DB_PATH             SQLite database file, relative to the current directory
                        (default: wearable_health.db)
    LOG_LEVEL           Logging level (default: INFO)
"""

import sys
from pathlib import Path

# Ensure src/ is importable
sys.path.insert(0, str(Path(__file__).parent / "src"))

from adapters.cli.main import app

if __name__ == "__main__":
    app()
