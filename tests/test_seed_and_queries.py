"""
Tests for the sample fixtures and the reporting queries run over them.

Expected numbers are worked out by hand from the fixture lists in
infrastructure.persistence.seed.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from application.dto import RecordReadingRequest
from domain.entities import Device, HealthData, HealthMetric, User
from domain.models import Overview
from infrastructure.persistence.device_repo import SQLiteDeviceRepository
from infrastructure.persistence.health_data_repo import SQLiteHealthDataRepository
from infrastructure.persistence.metric_repo import SQLiteMetricRepository
from infrastructure.persistence.seed import DEVICES, METRICS, READINGS, RECOMMENDATIONS, USERS
from infrastructure.persistence.user_repo import SQLiteUserRepository


@pytest.fixture
def queries(seeded_factory):
    return seeded_factory.create_query_repository()


# ---------------------------------------------------------------------------
# Seed
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_seed_inserts_every_fixture(factory) -> None:
    report = await factory.seed()

    assert report.skipped is False
    assert report.inserted["Users"] == len(USERS) == 22
    assert report.inserted["HealthData"] == len(READINGS) == 29
    overview = await factory.create_query_repository().overview()
    assert overview == Overview(
        users=len(USERS), devices=len(DEVICES), metrics=len(METRICS),
        readings=len(READINGS), recommendations=len(RECOMMENDATIONS),
    )


@pytest.mark.asyncio
async def test_seed_is_skipped_when_users_exist(seeded_factory) -> None:
    before = await seeded_factory.create_query_repository().overview()

    report = await seeded_factory.seed()

    assert report.skipped is True
    assert report.inserted == {}
    assert await seeded_factory.create_query_repository().overview() == before


@pytest.mark.asyncio
async def test_every_seeded_reading_references_existing_rows(seeded_factory) -> None:
    async with seeded_factory.connection.acquire() as conn:
        rows = await conn.execute_fetchall(
            """SELECT COUNT(*) FROM HealthData hd
               LEFT JOIN Users u ON hd.UserID = u.UserID
               LEFT JOIN HealthMetric hm ON hd.MetricID = hm.MetricID
               LEFT JOIN Device d ON hd.DeviceID = d.DeviceID
               WHERE u.UserID IS NULL OR hm.MetricID IS NULL OR d.DeviceID IS NULL""",
        )
    assert rows[0][0] == 0


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_single_reading_for_named_user(factory) -> None:
    conn = factory.connection
    user_id = await SQLiteUserRepository(conn).save(
        User(first_name="Alice", last_name="Smith", email="alice.smith@example.com"),
    )
    device_id = await SQLiteDeviceRepository(conn).save(
        Device(model="FitBit Charge 5", device_name="Alice's FitBit"),
    )
    metric_id = await SQLiteMetricRepository(conn).save(
        HealthMetric(unit="bpm", metric_name="Heart Rate"),
    )
    await SQLiteHealthDataRepository(conn).save(HealthData(
        value=Decimal("75.5"), timestamp=datetime(2024, 7, 20, 8, 0),
        user_id=user_id, metric_id=metric_id, device_id=device_id,
    ))

    rows = await factory.create_query_repository().readings_for_user_name("Alice", "Smith")

    assert len(rows) == 1
    assert rows[0].metric_name == "Heart Rate"
    assert rows[0].value == Decimal("75.50")
    assert rows[0].timestamp == datetime(2024, 7, 20, 8, 0)


@pytest.mark.asyncio
async def test_readings_for_user_name_are_newest_first(queries) -> None:
    rows = await queries.readings_for_user_name("Alice", "Smith")

    assert [r.metric_name for r in rows] == [
        "Calories Burned", "Steps Count", "Heart Rate", "Sleep Duration",
    ]
    assert rows[0].value == Decimal("1500.00")
    assert await queries.readings_for_user_name("Nobody", "Here") == []


@pytest.mark.asyncio
async def test_user_metric_readings_cover_every_reading(queries) -> None:
    rows = await queries.user_metric_readings()

    assert len(rows) == len(READINGS)
    assert (rows[0].first_name, rows[0].metric_name) == ("Alice", "Heart Rate")


@pytest.mark.asyncio
async def test_reading_counts_per_user(queries) -> None:
    rows = await queries.reading_counts_per_user()

    assert [(r.first_name, r.readings) for r in rows[:3]] == [
        ("Alice", 4), ("Bob", 4), ("Charlie", 2),
    ]
    assert sum(r.readings for r in rows) == len(READINGS)
    assert len(rows) == 22


@pytest.mark.asyncio
async def test_average_heart_rate(queries) -> None:
    # 75.5, 68, 70, 65, 72, 68
    assert await queries.average_metric_value("Heart Rate") == pytest.approx(69.75)


@pytest.mark.asyncio
async def test_max_steps(queries) -> None:
    assert await queries.max_metric_value("Steps Count") == Decimal("11000.00")


@pytest.mark.asyncio
async def test_aggregates_over_a_metric_without_readings_are_none(queries) -> None:
    assert await queries.average_metric_value("Cholesterol") is None
    assert await queries.max_metric_value("Cholesterol") is None
    assert await queries.average_metric_per_user("Cholesterol") == []


@pytest.mark.asyncio
async def test_average_heart_rate_per_user_above_threshold(queries) -> None:
    everyone = await queries.average_metric_per_user("Heart Rate")
    above = await queries.average_metric_per_user("Heart Rate", above=70)

    assert len(everyone) == 6
    assert [(r.first_name, r.average) for r in above] == [
        ("Alice", pytest.approx(75.5)),
        ("Mia", pytest.approx(72.0)),
    ]


@pytest.mark.asyncio
async def test_recommendations_for_user_name(queries) -> None:
    rows = await queries.recommendations_for_user_name("Alice", "Smith")

    assert [r.title for r in rows] == ["Increase Daily Steps"]


@pytest.mark.asyncio
async def test_readings_per_device_model(queries) -> None:
    rows = await queries.readings_per_device_model()
    counts = {r.model: r.readings for r in rows}

    assert [r.model for r in rows[:2]] == ["Apple Watch Series 8", "FitBit Charge 5"]
    assert counts["FitBit Charge 5"] == 5
    assert counts["Whoop 4.0"] == 2
    assert sum(counts.values()) == len(READINGS)


@pytest.mark.asyncio
async def test_users_in_age_range_is_inclusive(queries) -> None:
    rows = await queries.users_in_age_range(30, 40)

    assert [u.first_name for u in rows] == [
        "Alice", "Olivia", "Ivy", "Diana", "Ryan", "Liam", "Ursula", "Henry",
    ]


@pytest.mark.asyncio
async def test_user_devices_inferred_from_readings(queries) -> None:
    rows = await queries.user_devices()

    assert len(rows) == 22
    alice = [r for r in rows if r.first_name == "Alice"]
    assert [(r.model, r.device_name) for r in alice] == [("FitBit Charge 5", "Alice's FitBit")]


@pytest.mark.asyncio
async def test_recent_readings(queries) -> None:
    rows = await queries.recent_readings(limit=5)

    assert [(r.first_name, r.metric_name) for r in rows] == [
        ("Liam", "Calories Burned"),
        ("Alice", "Calories Burned"),
        ("Ursula", "Steps Count"),
        ("Bob", "Calories Burned"),
        ("Alice", "Steps Count"),
    ]


@pytest.mark.asyncio
async def test_users_by_gender(queries) -> None:
    rows = await queries.users_by_gender()

    assert [(r.gender, r.users) for r in rows] == [("Female", 11), ("Male", 11)]


@pytest.mark.asyncio
async def test_list_users_and_raw_readings(queries) -> None:
    users = await queries.list_users()
    readings = await queries.readings_for_user(users[0].id)

    assert len(users) == 22
    assert users[0].email == "alice.smith@example.com"
    assert [r.value for r in readings] == [
        Decimal("7.20"), Decimal("75.50"), Decimal("10245.00"), Decimal("1500.00"),
    ]


@pytest.mark.asyncio
async def test_readings_for_user_match_the_service_listing(seeded_factory) -> None:
    from_queries = await seeded_factory.create_query_repository().readings_for_user(2)
    from_service = await seeded_factory.create_health_data_service().readings_for_user(2)

    assert [r.id for r in from_queries] == [r.id for r in from_service]
    assert [r.timestamp for r in from_queries] == sorted(r.timestamp for r in from_queries)


@pytest.mark.asyncio
async def test_recent_readings_order_offset_timestamps_by_instant(seeded_factory) -> None:
    service = seeded_factory.create_health_data_service()
    await service.record(RecordReadingRequest(
        value=1, user_id=1, device_id=1, metric_id=1,
        timestamp=datetime(2024, 7, 21, 9, 0, tzinfo=timezone(timedelta(hours=5))),
    ))
    await service.record(RecordReadingRequest(
        value=2, user_id=1, device_id=1, metric_id=1,
        timestamp=datetime(2024, 7, 21, 8, 0, tzinfo=timezone.utc),
    ))

    rows = await seeded_factory.create_query_repository().recent_readings(limit=2)

    assert [r.value for r in rows] == [Decimal("2.00"), Decimal("1.00")]
    assert rows[1].timestamp == datetime(2024, 7, 21, 4, 0)
