"""
infrastructure.persistence.user_repo - SQLite user repository.

Implements UserRepository port.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from domain.entities import User
from infrastructure.persistence.columns import date_from_db, date_to_db
from infrastructure.persistence.connection import AsyncSQLiteConnection

logger = logging.getLogger(__name__)

_COLUMNS = "UserID, FirstName, LastName, Age, Email, Gender, RegistrationDate"


class SQLiteUserRepository:
    """Async SQLite implementation of UserRepository."""

    def __init__(self, connection: AsyncSQLiteConnection):
        self._conn = connection

    async def save(self, user: User) -> int:
        registered = user.registration_date or date.today()
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                """INSERT INTO Users (FirstName, LastName, Age, Email, Gender, RegistrationDate)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                (user.first_name, user.last_name, user.age, user.email,
                 user.gender, date_to_db(registered)),
            )
            logger.info("Inserted user %d <%s>", cursor.lastrowid, user.email)
            return cursor.lastrowid

    async def get_by_id(self, user_id: int) -> Optional[User]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                f"SELECT {_COLUMNS} FROM Users WHERE UserID = ?",
                (user_id,),
            )
            return self._row_to_user(rows[0]) if rows else None

    async def get_by_email(self, email: str) -> Optional[User]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                f"SELECT {_COLUMNS} FROM Users WHERE Email = ?",
                (email,),
            )
            return self._row_to_user(rows[0]) if rows else None

    async def get_by_name(self, first_name: str, last_name: str) -> Optional[User]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                f"""SELECT {_COLUMNS} FROM Users
                    WHERE FirstName = ? AND LastName = ?
                    ORDER BY UserID LIMIT 1""",
                (first_name, last_name),
            )
            return self._row_to_user(rows[0]) if rows else None

    async def list_all(self) -> list[User]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                f"SELECT {_COLUMNS} FROM Users ORDER BY UserID",
            )
            return [self._row_to_user(r) for r in rows]

    async def delete(self, user_id: int) -> bool:
        """Delete a user; the schema cascades to readings, recommendations and device links."""
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                "DELETE FROM Users WHERE UserID = ?",
                (user_id,),
            )
            return cursor.rowcount > 0

    async def count_dependents(self, user_id: int) -> dict[str, int]:
        """Rows in child tables that reference the user."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT
                    (SELECT COUNT(*) FROM HealthData WHERE UserID = ?),
                    (SELECT COUNT(*) FROM Recommendation WHERE UserID = ?),
                    (SELECT COUNT(*) FROM UserDevice WHERE UserID = ?)
                """,
                (user_id, user_id, user_id),
            )
            row = rows[0]
            return {
                "readings": row[0] or 0,
                "recommendations": row[1] or 0,
                "device_links": row[2] or 0,
            }

    @staticmethod
    def _row_to_user(row) -> User:
        return User(
            id=row[0], first_name=row[1], last_name=row[2], age=row[3],
            email=row[4], gender=row[5], registration_date=date_from_db(row[6]),
        )
