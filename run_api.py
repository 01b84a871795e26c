"""
Run the Wearable Health Hub REST API.

Usage:
    python run_api.py

Environment variables (all optional):
    DB_PATH             SQLite database file, relative to the current directory
                        (default: wearable_health.db)
    SEED_ON_STARTUP     Load the sample fixtures into an empty database (default: false)
    API_HOST            Bind address (default: 0.0.0.0)
    API_PORT            Port (default: 8000)
    LOG_LEVEL           Logging level (default: INFO)
"""

import logging
import sys
from pathlib import Path

# Ensure src/ is importable
sys.path.insert(0, str(Path(__file__).parent / "src"))

import uvicorn

from infrastructure.config import Settings

if __name__ == "__main__":
    config = Settings.from_env()
    logging.basicConfig(level=config.log_level)
    uvicorn.run(
        "adapters.rest.app:app",
        host=config.api_host,
        port=config.api_port,
        reload=True,
    )
