"""
Tests for schema creation and the integrity constraints it enforces.

Constraint violations must surface as sqlite3.IntegrityError straight
from the engine.
"""

import sqlite3
from datetime import date, datetime
from decimal import Decimal

import pytest

from domain.entities import Device, HealthData, HealthMetric, Recommendation, User
from domain.models import ConstraintKind
from infrastructure.persistence.connection import AsyncSQLiteConnection
from infrastructure.persistence.device_repo import SQLiteDeviceRepository
from infrastructure.persistence.errors import classify_integrity_error, violated_columns
from infrastructure.persistence.health_data_repo import SQLiteHealthDataRepository
from infrastructure.persistence.metric_repo import SQLiteMetricRepository
from infrastructure.persistence.migrations import TABLE_NAMES, list_tables, run_migrations
from infrastructure.persistence.recommendation_repo import SQLiteRecommendationRepository
from infrastructure.persistence.user_repo import SQLiteUserRepository


def _alice() -> User:
    return User(
        first_name="Alice", last_name="Smith", age=30,
        email="alice.smith@example.com", gender="Female",
        registration_date=date(2023, 1, 15),
    )


@pytest.mark.asyncio
async def test_migrations_create_every_table(connection: AsyncSQLiteConnection) -> None:
    tables = await list_tables(connection)
    for name in TABLE_NAMES:
        assert name in tables


@pytest.mark.asyncio
async def test_create_database_makes_missing_parent_dirs(tmp_path) -> None:
    path = tmp_path / "nested" / "dir" / "health.db"
    conn = AsyncSQLiteConnection(path)

    assert await conn.create_database() is True
    assert path.exists()
    assert await conn.create_database() is False


@pytest.mark.asyncio
async def test_rerunning_migrations_is_a_noop(connection: AsyncSQLiteConnection) -> None:
    users = SQLiteUserRepository(connection)
    user_id = await users.save(_alice())
    before = await list_tables(connection)

    await run_migrations(connection)
    await run_migrations(connection)

    assert await list_tables(connection) == before
    assert (await users.get_by_id(user_id)).email == "alice.smith@example.com"


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected(connection: AsyncSQLiteConnection) -> None:
    users = SQLiteUserRepository(connection)
    await users.save(_alice())

    with pytest.raises(sqlite3.IntegrityError) as exc_info:
        await users.save(User(first_name="Other", last_name="Person",
                              email="alice.smith@example.com"))

    assert classify_integrity_error(exc_info.value) is ConstraintKind.UNIQUE
    assert violated_columns(exc_info.value) == ["Users.Email"]
    assert len(await users.list_all()) == 1


@pytest.mark.asyncio
async def test_duplicate_metric_name_is_rejected(connection: AsyncSQLiteConnection) -> None:
    metrics = SQLiteMetricRepository(connection)
    await metrics.save(HealthMetric(unit="bpm", metric_name="Heart Rate"))

    with pytest.raises(sqlite3.IntegrityError) as exc_info:
        await metrics.save(HealthMetric(unit="beats/min", metric_name="Heart Rate"))

    assert classify_integrity_error(exc_info.value) is ConstraintKind.UNIQUE
    assert violated_columns(exc_info.value) == ["HealthMetric.MetricName"]


@pytest.mark.asyncio
async def test_required_columns_reject_null(connection: AsyncSQLiteConnection) -> None:
    users = SQLiteUserRepository(connection)

    with pytest.raises(sqlite3.IntegrityError) as exc_info:
        await users.save(User(first_name=None, last_name="Smith", email="x@example.com"))

    assert classify_integrity_error(exc_info.value) is ConstraintKind.NOT_NULL
    assert violated_columns(exc_info.value) == ["Users.FirstName"]

    with pytest.raises(sqlite3.IntegrityError):
        await SQLiteDeviceRepository(connection).save(Device(model="Whoop 4.0", device_name=None))


@pytest.mark.asyncio
async def test_optional_columns_accept_null(connection: AsyncSQLiteConnection) -> None:
    users = SQLiteUserRepository(connection)
    user_id = await users.save(User(first_name="Sam", last_name="Doe", email="sam@example.com"))
    rec_id = await SQLiteRecommendationRepository(connection).save(
        Recommendation(title="Walk more", description=None, user_id=user_id),
    )

    user = await users.get_by_id(user_id)
    assert user.age is None
    assert user.gender is None
    assert user.registration_date == date.today()
    recs = await SQLiteRecommendationRepository(connection).get_by_user(user_id)
    assert [r.id for r in recs] == [rec_id]
    assert recs[0].description is None


@pytest.mark.asyncio
async def test_reading_with_missing_references_is_rejected(connection: AsyncSQLiteConnection) -> None:
    user_id = await SQLiteUserRepository(connection).save(_alice())
    metric_id = await SQLiteMetricRepository(connection).save(
        HealthMetric(unit="bpm", metric_name="Heart Rate"),
    )
    data = SQLiteHealthDataRepository(connection)

    with pytest.raises(sqlite3.IntegrityError) as exc_info:
        await data.save(HealthData(
            value=Decimal("75.5"), timestamp=datetime(2024, 7, 20, 8),
            user_id=user_id, metric_id=metric_id, device_id=999,
        ))

    assert classify_integrity_error(exc_info.value) is ConstraintKind.FOREIGN_KEY
    assert violated_columns(exc_info.value) == []


@pytest.mark.asyncio
async def test_recommendation_for_missing_user_is_rejected(connection: AsyncSQLiteConnection) -> None:
    with pytest.raises(sqlite3.IntegrityError) as exc_info:
        await SQLiteRecommendationRepository(connection).save(
            Recommendation(title="Hydrate", description="Drink water.", user_id=42),
        )
    assert classify_integrity_error(exc_info.value) is ConstraintKind.FOREIGN_KEY


@pytest.mark.parametrize("message", [
    "something else went wrong",
    "CHECK constraint failed: Age >= 0",
])
def test_unrecognised_message_is_unknown(message) -> None:
    exc = sqlite3.IntegrityError(message)
    assert classify_integrity_error(exc) is ConstraintKind.UNKNOWN
    assert {kind.value for kind in ConstraintKind} == {"unique", "not_null", "foreign_key", "unknown"}
