"""
infrastructure.config - Typed, injectable configuration.

A frozen dataclass that can be constructed from the environment (and an
optional .env file) or passed explicitly in tests.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Centralized configuration for the wearable health hub.

    No module-level globals: construct via from_env() or pass explicitly
    in tests.
    """
    project_root: Path

    # Database
    db_path: str = "wearable_health.db"

    # Load the sample fixtures when the API starts against an empty database
    seed_on_startup: bool = False

    # REST adapter
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    log_level: str = "INFO"

    @property
    def database_file(self) -> Path:
        """Absolute path of the SQLite file; relative paths hang off project_root."""
        path = Path(self.db_path)
        if path.is_absolute():
            return path
        return self.project_root / path

    @classmethod
    def from_env(cls, project_root: Optional[Path] = None) -> Settings:
        """Build Settings from environment variables and .env.

        A relative DB_PATH resolves against project_root, which defaults to
        the current working directory.
        """
        from dotenv import load_dotenv
        load_dotenv()

        root = project_root or Path.cwd()

        return cls(
            project_root=root,
            db_path=os.getenv("DB_PATH", "wearable_health.db"),
            seed_on_startup=os.getenv("SEED_ON_STARTUP", "false").strip().lower() in _TRUTHY,
            api_host=os.getenv("API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("API_PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
