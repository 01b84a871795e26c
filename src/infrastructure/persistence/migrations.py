"""
infrastructure.persistence.migrations - Database schema creation.

Called once at startup by the factory or the CLI. Tables are created
parents first (Users, Device, HealthMetric) so the child tables'
foreign keys have something to reference.
"""

from __future__ import annotations

import logging

from infrastructure.persistence.connection import AsyncSQLiteConnection

logger = logging.getLogger(__name__)

_TABLES = [
    """CREATE TABLE IF NOT EXISTS Users (
        UserID INTEGER PRIMARY KEY AUTOINCREMENT,
        FirstName TEXT NOT NULL,
        LastName TEXT NOT NULL,
        Age INTEGER,
        Email TEXT UNIQUE NOT NULL,
        Gender TEXT,
        RegistrationDate DATE NOT NULL
    )""",
    """CREATE TABLE IF NOT EXISTS Device (
        DeviceID INTEGER PRIMARY KEY AUTOINCREMENT,
        Model TEXT NOT NULL,
        DeviceName TEXT NOT NULL
    )""",
    """CREATE TABLE IF NOT EXISTS HealthMetric (
        MetricID INTEGER PRIMARY KEY AUTOINCREMENT,
        Unit TEXT NOT NULL,
        MetricName TEXT UNIQUE NOT NULL
    )""",
    """CREATE TABLE IF NOT EXISTS HealthData (
        DataID INTEGER PRIMARY KEY AUTOINCREMENT,
        Value DECIMAL(10, 2) NOT NULL,
        Timestamp DATETIME NOT NULL,
        UserID INTEGER NOT NULL,
        MetricID INTEGER NOT NULL,
        DeviceID INTEGER NOT NULL,
        FOREIGN KEY (UserID) REFERENCES Users(UserID) ON DELETE CASCADE,
        FOREIGN KEY (MetricID) REFERENCES HealthMetric(MetricID) ON DELETE CASCADE,
        FOREIGN KEY (DeviceID) REFERENCES Device(DeviceID) ON DELETE CASCADE
    )""",
    """CREATE TABLE IF NOT EXISTS Recommendation (
        RecommendationID INTEGER PRIMARY KEY AUTOINCREMENT,
        Title TEXT NOT NULL,
        Description TEXT,
        UserID INTEGER NOT NULL,
        FOREIGN KEY (UserID) REFERENCES Users(UserID) ON DELETE CASCADE
    )""",
    """CREATE TABLE IF NOT EXISTS UserDevice (
        UserID INTEGER NOT NULL,
        DeviceID INTEGER NOT NULL,
        PRIMARY KEY (UserID, DeviceID),
        FOREIGN KEY (UserID) REFERENCES Users(UserID) ON DELETE CASCADE,
        FOREIGN KEY (DeviceID) REFERENCES Device(DeviceID) ON DELETE CASCADE
    )""",
]

# Lookups along the foreign keys; SQLite does not index FK columns itself
_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_healthdata_user ON HealthData(UserID)",
    "CREATE INDEX IF NOT EXISTS idx_healthdata_metric ON HealthData(MetricID)",
    "CREATE INDEX IF NOT EXISTS idx_healthdata_device ON HealthData(DeviceID)",
    "CREATE INDEX IF NOT EXISTS idx_recommendation_user ON Recommendation(UserID)",
    "CREATE INDEX IF NOT EXISTS idx_userdevice_device ON UserDevice(DeviceID)",
]

TABLE_NAMES = ("Users", "Device", "HealthMetric", "HealthData", "Recommendation", "UserDevice")


async def run_migrations(connection: AsyncSQLiteConnection) -> None:
    """Create the database and all tables if they don't exist.

    Safe to call multiple times (uses IF NOT EXISTS).
    """
    await connection.create_database()
    async with connection.acquire() as conn:
        for ddl in _TABLES + _INDEXES:
            await conn.execute(ddl)
    logger.info("All tables created (or already exist).")


async def list_tables(connection: AsyncSQLiteConnection) -> list[str]:
    """Return the names of the user tables present, sorted."""
    async with connection.acquire() as conn:
        rows = await conn.execute_fetchall(
            """SELECT name FROM sqlite_master
               WHERE type = 'table' AND name NOT LIKE 'sqlite_%'
               ORDER BY name""",
        )
    return [r[0] for r in rows]
