"""
infrastructure.persistence.device_repo - SQLite device repository.

Implements DeviceRepository port. Ownership lives in the UserDevice link
table; the Device table itself has no owner column.
"""

from __future__ import annotations

import logging
from typing import Optional

from domain.entities import Device
from infrastructure.persistence.connection import AsyncSQLiteConnection

logger = logging.getLogger(__name__)


class SQLiteDeviceRepository:
    """Async SQLite implementation of DeviceRepository."""

    def __init__(self, connection: AsyncSQLiteConnection):
        self._conn = connection

    async def save(self, device: Device) -> int:
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                "INSERT INTO Device (Model, DeviceName) VALUES (?, ?)",
                (device.model, device.device_name),
            )
            return cursor.lastrowid

    async def get_by_id(self, device_id: int) -> Optional[Device]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                "SELECT DeviceID, Model, DeviceName FROM Device WHERE DeviceID = ?",
                (device_id,),
            )
            return self._row_to_device(rows[0]) if rows else None

    async def list_all(self) -> list[Device]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                "SELECT DeviceID, Model, DeviceName FROM Device ORDER BY DeviceID",
            )
            return [self._row_to_device(r) for r in rows]

    async def delete(self, device_id: int) -> bool:
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                "DELETE FROM Device WHERE DeviceID = ?",
                (device_id,),
            )
            return cursor.rowcount > 0

    async def assign_owner(self, device_id: int, user_id: int) -> None:
        """Link a device to a user. Linking the same pair twice is a no-op."""
        async with self._conn.acquire() as conn:
            await conn.execute(
                "INSERT OR IGNORE INTO UserDevice (UserID, DeviceID) VALUES (?, ?)",
                (user_id, device_id),
            )
            logger.info("Linked device %d to user %d", device_id, user_id)

    async def get_by_owner(self, user_id: int) -> list[Device]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT d.DeviceID, d.Model, d.DeviceName
                   FROM Device d
                   JOIN UserDevice ud ON ud.DeviceID = d.DeviceID
                   WHERE ud.UserID = ?
                   ORDER BY d.DeviceID""",
                (user_id,),
            )
            return [self._row_to_device(r) for r in rows]

    async def get_by_readings(self, user_id: int) -> list[Device]:
        """Devices that have recorded at least one reading for the user."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT DISTINCT d.DeviceID, d.Model, d.DeviceName
                   FROM Device d
                   JOIN HealthData hd ON hd.DeviceID = d.DeviceID
                   WHERE hd.UserID = ?
                   ORDER BY d.DeviceID""",
                (user_id,),
            )
            return [self._row_to_device(r) for r in rows]

    @staticmethod
    def _row_to_device(row) -> Device:
        return Device(id=row[0], model=row[1], device_name=row[2])
