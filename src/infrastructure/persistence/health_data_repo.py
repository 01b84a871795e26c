"""
infrastructure.persistence.health_data_repo - SQLite observation repository.

Implements HealthDataRepository port. HealthData is the fact table: every
row references one user, one metric and one device.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from domain.entities import HealthData
from infrastructure.persistence.columns import (
    timestamp_from_db,
    timestamp_to_db,
    value_from_db,
    value_to_db,
)
from infrastructure.persistence.connection import AsyncSQLiteConnection

_COLUMNS = "DataID, Value, Timestamp, UserID, MetricID, DeviceID"


class SQLiteHealthDataRepository:
    """Async SQLite implementation of HealthDataRepository."""

    def __init__(self, connection: AsyncSQLiteConnection):
        self._conn = connection

    async def save(self, data: HealthData) -> int:
        recorded_at = data.timestamp or datetime.now()
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                """INSERT INTO HealthData (Value, Timestamp, UserID, MetricID, DeviceID)
                   VALUES (?, ?, ?, ?, ?)""",
                (value_to_db(data.value), timestamp_to_db(recorded_at),
                 data.user_id, data.metric_id, data.device_id),
            )
            return cursor.lastrowid

    async def get_by_id(self, data_id: int) -> Optional[HealthData]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                f"SELECT {_COLUMNS} FROM HealthData WHERE DataID = ?",
                (data_id,),
            )
            return self._row_to_data(rows[0]) if rows else None

    async def get_by_user(self, user_id: int) -> list[HealthData]:
        """Readings of one user in the order they were taken."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                f"SELECT {_COLUMNS} FROM HealthData WHERE UserID = ? ORDER BY Timestamp, DataID",
                (user_id,),
            )
            return [self._row_to_data(r) for r in rows]

    async def delete(self, data_id: int) -> bool:
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                "DELETE FROM HealthData WHERE DataID = ?",
                (data_id,),
            )
            return cursor.rowcount > 0

    @staticmethod
    def _row_to_data(row) -> HealthData:
        return HealthData(
            id=row[0], value=value_from_db(row[1]), timestamp=timestamp_from_db(row[2]),
            user_id=row[3], metric_id=row[4], device_id=row[5],
        )
