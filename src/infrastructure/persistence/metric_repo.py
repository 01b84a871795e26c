"""
infrastructure.persistence.metric_repo - SQLite health metric catalog.

Implements MetricRepository port.
"""

from __future__ import annotations

import logging
from typing import Optional

from domain.entities import HealthMetric
from infrastructure.persistence.connection import AsyncSQLiteConnection

logger = logging.getLogger(__name__)


class SQLiteMetricRepository:
    """Async SQLite implementation of MetricRepository."""

    def __init__(self, connection: AsyncSQLiteConnection):
        self._conn = connection

    async def save(self, metric: HealthMetric) -> int:
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                "INSERT INTO HealthMetric (Unit, MetricName) VALUES (?, ?)",
                (metric.unit, metric.metric_name),
            )
            logger.info("Inserted metric %d (%s, %s)", cursor.lastrowid, metric.metric_name, metric.unit)
            return cursor.lastrowid

    async def get_by_id(self, metric_id: int) -> Optional[HealthMetric]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                "SELECT MetricID, Unit, MetricName FROM HealthMetric WHERE MetricID = ?",
                (metric_id,),
            )
            return self._row_to_metric(rows[0]) if rows else None

    async def get_by_name(self, metric_name: str) -> Optional[HealthMetric]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                "SELECT MetricID, Unit, MetricName FROM HealthMetric WHERE MetricName = ?",
                (metric_name,),
            )
            return self._row_to_metric(rows[0]) if rows else None

    async def list_all(self) -> list[HealthMetric]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                "SELECT MetricID, Unit, MetricName FROM HealthMetric ORDER BY MetricID",
            )
            return [self._row_to_metric(r) for r in rows]

    async def delete(self, metric_id: int) -> bool:
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                "DELETE FROM HealthMetric WHERE MetricID = ?",
                (metric_id,),
            )
            return cursor.rowcount > 0

    @staticmethod
    def _row_to_metric(row) -> HealthMetric:
        return HealthMetric(id=row[0], unit=row[1], metric_name=row[2])
