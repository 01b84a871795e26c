"""
infrastructure.persistence.connection - Async SQLite connection manager.

Wraps aiosqlite with a context manager: one connection per operation,
foreign keys enforced, commit on success, rollback on error.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

logger = logging.getLogger(__name__)


class AsyncSQLiteConnection:
    """Async SQLite connection provider with auto-commit/rollback."""

    def __init__(self, db_path: str | Path):
        self._db_path = str(db_path)

    @property
    def db_path(self) -> str:
        return self._db_path

    async def create_database(self) -> bool:
        """Create the database file if it is absent.

        Returns:
            True if the file was created, False if it already existed.
        """
        path = Path(self._db_path)
        if path.exists():
            return False
        path.parent.mkdir(parents=True, exist_ok=True)
        async with aiosqlite.connect(self._db_path):
            pass
        logger.info("Created database %s", self._db_path)
        return True

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[aiosqlite.Connection]:
        """Yield an async SQLite connection with FK support.

        Commits on success, rolls back on exception.
        """
        async with aiosqlite.connect(self._db_path) as conn:
            # Cascades and FK checks are off by default in SQLite
            await conn.execute("PRAGMA foreign_keys = ON")
            conn.row_factory = aiosqlite.Row
            try:
                yield conn
                await conn.commit()
            except Exception:
                await conn.rollback()
                logger.exception("Database operation failed, transaction rolled back.")
                raise
