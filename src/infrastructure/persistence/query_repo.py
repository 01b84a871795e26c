"""
infrastructure.persistence.query_repo - Read-only reporting queries.

Not mapped to a domain port (these are read-only joins and aggregations,
not domain operations). Called directly from the factory, the /reports
router and the CLI `report` command.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from domain.entities import HealthData, User
from domain.models import (
    DeviceModelCount,
    GenderCount,
    Overview,
    ReadingRow,
    RecommendationText,
    UserAverage,
    UserDeviceRow,
    UserReadingCount,
)
from infrastructure.persistence.columns import (
    date_from_db,
    timestamp_from_db,
    value_from_db,
)
from infrastructure.persistence.connection import AsyncSQLiteConnection

_READING_JOIN = """
    SELECT u.FirstName, u.LastName, hm.MetricName, hd.Value, hd.Timestamp
    FROM HealthData hd
    JOIN Users u ON hd.UserID = u.UserID
    JOIN HealthMetric hm ON hd.MetricID = hm.MetricID
"""


class SQLiteQueryRepository:
    """Runs the reporting queries over the health data tables."""

    def __init__(self, connection: AsyncSQLiteConnection):
        self._conn = connection

    async def overview(self) -> Overview:
        """Row counts for every table."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT
                    (SELECT COUNT(*) FROM Users),
                    (SELECT COUNT(*) FROM Device),
                    (SELECT COUNT(*) FROM HealthMetric),
                    (SELECT COUNT(*) FROM HealthData),
                    (SELECT COUNT(*) FROM Recommendation)
                """,
            )
            row = rows[0]
            return Overview(
                users=row[0], devices=row[1], metrics=row[2],
                readings=row[3], recommendations=row[4],
            )

    async def list_users(self) -> list[User]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT UserID, FirstName, LastName, Age, Email, Gender, RegistrationDate
                   FROM Users ORDER BY UserID""",
            )
        return [
            User(id=r[0], first_name=r[1], last_name=r[2], age=r[3], email=r[4],
                 gender=r[5], registration_date=date_from_db(r[6]))
            for r in rows
        ]

    async def readings_for_user(self, user_id: int) -> list[HealthData]:
        """Readings of one user in the order they were taken."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT DataID, Value, Timestamp, UserID, MetricID, DeviceID
                   FROM HealthData WHERE UserID = ?
                   ORDER BY Timestamp, DataID""",
                (user_id,),
            )
        return [
            HealthData(id=r[0], value=value_from_db(r[1]), timestamp=timestamp_from_db(r[2]),
                       user_id=r[3], metric_id=r[4], device_id=r[5])
            for r in rows
        ]

    async def user_metric_readings(self) -> list[ReadingRow]:
        """Every reading with its user's name and metric name."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(_READING_JOIN + " ORDER BY hd.DataID")
        return [self._row_to_reading(r) for r in rows]

    async def readings_for_user_name(self, first_name: str, last_name: str) -> list[ReadingRow]:
        """All readings of one person, newest first."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                _READING_JOIN
                + """ WHERE u.FirstName = ? AND u.LastName = ?
                      ORDER BY hd.Timestamp DESC, hd.DataID DESC""",
                (first_name, last_name),
            )
        return [self._row_to_reading(r) for r in rows]

    async def recent_readings(self, limit: int = 5) -> list[ReadingRow]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                _READING_JOIN + " ORDER BY hd.Timestamp DESC, hd.DataID DESC LIMIT ?",
                (limit,),
            )
        return [self._row_to_reading(r) for r in rows]

    async def reading_counts_per_user(self) -> list[UserReadingCount]:
        """Number of readings per user, most active first."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT u.FirstName, u.LastName, COUNT(hd.DataID) AS NumberOfReadings
                   FROM HealthData hd
                   JOIN Users u ON hd.UserID = u.UserID
                   GROUP BY u.UserID, u.FirstName, u.LastName
                   ORDER BY NumberOfReadings DESC, u.UserID""",
            )
        return [UserReadingCount(first_name=r[0], last_name=r[1], readings=r[2]) for r in rows]

    async def max_metric_value(self, metric_name: str) -> Optional[Decimal]:
        """Largest recorded value for a metric, or None when it has no readings."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT MAX(hd.Value)
                   FROM HealthData hd
                   JOIN HealthMetric hm ON hd.MetricID = hm.MetricID
                   WHERE hm.MetricName = ?""",
                (metric_name,),
            )
        raw = rows[0][0]
        return value_from_db(raw) if raw is not None else None

    async def average_metric_value(self, metric_name: str) -> Optional[float]:
        """Mean of all readings for a metric, or None when it has no readings."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT AVG(hd.Value)
                   FROM HealthData hd
                   JOIN HealthMetric hm ON hd.MetricID = hm.MetricID
                   WHERE hm.MetricName = ?""",
                (metric_name,),
            )
        return rows[0][0]

    async def average_metric_per_user(
        self, metric_name: str, above: Optional[float] = None,
    ) -> list[UserAverage]:
        """Per-user mean of a metric, optionally keeping only means above a threshold."""
        sql = """SELECT u.FirstName, u.LastName, AVG(hd.Value) AS AverageValue
                 FROM HealthData hd
                 JOIN Users u ON hd.UserID = u.UserID
                 JOIN HealthMetric hm ON hd.MetricID = hm.MetricID
                 WHERE hm.MetricName = ?
                 GROUP BY u.UserID, u.FirstName, u.LastName"""
        params: tuple = (metric_name,)
        if above is not None:
            sql += " HAVING AVG(hd.Value) > ?"
            params += (above,)
        sql += " ORDER BY u.UserID"
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(sql, params)
        return [UserAverage(first_name=r[0], last_name=r[1], average=r[2]) for r in rows]

    async def recommendations_for_user_name(
        self, first_name: str, last_name: str,
    ) -> list[RecommendationText]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT r.Title, r.Description
                   FROM Recommendation r
                   JOIN Users u ON r.UserID = u.UserID
                   WHERE u.FirstName = ? AND u.LastName = ?
                   ORDER BY r.RecommendationID""",
                (first_name, last_name),
            )
        return [RecommendationText(title=r[0], description=r[1]) for r in rows]

    async def readings_per_device_model(self) -> list[DeviceModelCount]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT d.Model, COUNT(hd.DataID) AS TotalReadings
                   FROM HealthData hd
                   JOIN Device d ON hd.DeviceID = d.DeviceID
                   GROUP BY d.Model
                   ORDER BY TotalReadings DESC, d.Model""",
            )
        return [DeviceModelCount(model=r[0], readings=r[1]) for r in rows]

    async def users_in_age_range(self, low: int, high: int) -> list[User]:
        """Users whose age lies in [low, high], youngest first."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT UserID, FirstName, LastName, Age, Email, Gender, RegistrationDate
                   FROM Users
                   WHERE Age BETWEEN ? AND ?
                   ORDER BY Age, UserID""",
                (low, high),
            )
        return [
            User(id=r[0], first_name=r[1], last_name=r[2], age=r[3], email=r[4],
                 gender=r[5], registration_date=date_from_db(r[6]))
            for r in rows
        ]

    async def user_devices(self) -> list[UserDeviceRow]:
        """User/device pairs inferred from the readings they produced."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT u.FirstName, u.LastName, d.Model, d.DeviceName
                   FROM HealthData hd
                   JOIN Users u ON hd.UserID = u.UserID
                   JOIN Device d ON hd.DeviceID = d.DeviceID
                   GROUP BY u.FirstName, u.LastName, d.Model, d.DeviceName
                   ORDER BY u.FirstName, u.LastName, d.Model""",
            )
        return [
            UserDeviceRow(first_name=r[0], last_name=r[1], model=r[2], device_name=r[3])
            for r in rows
        ]

    async def users_by_gender(self) -> list[GenderCount]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT Gender, COUNT(UserID) AS NumberOfUsers
                   FROM Users
                   GROUP BY Gender
                   ORDER BY Gender""",
            )
        return [GenderCount(gender=r[0], users=r[1]) for r in rows]

    @staticmethod
    def _row_to_reading(row) -> ReadingRow:
        return ReadingRow(
            first_name=row[0], last_name=row[1], metric_name=row[2],
            value=value_from_db(row[3]), timestamp=timestamp_from_db(row[4]),
        )
