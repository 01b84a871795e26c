"""Read-only reporting endpoints over the health data."""

import asyncio

from fastapi import APIRouter, Depends, Query

from infrastructure.persistence.query_repo import SQLiteQueryRepository
from adapters.rest.dependencies import get_queries

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/summary")
async def get_summary(repo: SQLiteQueryRepository = Depends(get_queries)):
    """
    Return aggregated platform statistics.

    Shows:
    - Row counts per table
    - Readings per user, most active first
    - Readings per device model
    - Users per gender
    """
    overview, per_user, per_model, genders = await asyncio.gather(
        repo.overview(),
        repo.reading_counts_per_user(),
        repo.readings_per_device_model(),
        repo.users_by_gender(),
    )
    return {
        "overview": overview,
        "reading_counts": per_user,
        "device_models": per_model,
        "gender": genders,
    }


@router.get("/overview")
async def get_overview(repo: SQLiteQueryRepository = Depends(get_queries)):
    return await repo.overview()


@router.get("/readings")
async def all_readings(repo: SQLiteQueryRepository = Depends(get_queries)):
    """Every reading joined with its user and metric names."""
    return await repo.user_metric_readings()


@router.get("/reading-counts")
async def reading_counts(repo: SQLiteQueryRepository = Depends(get_queries)):
    return await repo.reading_counts_per_user()


@router.get("/device-models")
async def device_models(repo: SQLiteQueryRepository = Depends(get_queries)):
    return await repo.readings_per_device_model()


@router.get("/user-devices")
async def user_devices(repo: SQLiteQueryRepository = Depends(get_queries)):
    return await repo.user_devices()


@router.get("/gender")
async def users_by_gender(repo: SQLiteQueryRepository = Depends(get_queries)):
    return await repo.users_by_gender()


@router.get("/recent")
async def recent_readings(
    limit: int = Query(5, ge=1, le=100),
    repo: SQLiteQueryRepository = Depends(get_queries),
):
    return await repo.recent_readings(limit=limit)


@router.get("/age-range")
async def age_range(
    low: int = Query(..., ge=0),
    high: int = Query(..., ge=0),
    repo: SQLiteQueryRepository = Depends(get_queries),
):
    return await repo.users_in_age_range(low, high)


@router.get("/people/{first_name}/{last_name}/readings")
async def person_readings(
    first_name: str,
    last_name: str,
    repo: SQLiteQueryRepository = Depends(get_queries),
):
    return await repo.readings_for_user_name(first_name, last_name)


@router.get("/people/{first_name}/{last_name}/recommendations")
async def person_recommendations(
    first_name: str,
    last_name: str,
    repo: SQLiteQueryRepository = Depends(get_queries),
):
    return await repo.recommendations_for_user_name(first_name, last_name)


# {metric_name:path} so names such as "Distance Walked/Run" still route
@router.get("/metrics/{metric_name:path}/average")
async def metric_average(metric_name: str, repo: SQLiteQueryRepository = Depends(get_queries)):
    return {"metric": metric_name, "average": await repo.average_metric_value(metric_name)}


@router.get("/metrics/{metric_name:path}/max")
async def metric_max(metric_name: str, repo: SQLiteQueryRepository = Depends(get_queries)):
    return {"metric": metric_name, "max": await repo.max_metric_value(metric_name)}


@router.get("/metrics/{metric_name:path}/per-user")
async def metric_per_user(
    metric_name: str,
    above: float | None = Query(None, description="Only users whose average exceeds this"),
    repo: SQLiteQueryRepository = Depends(get_queries),
):
    return await repo.average_metric_per_user(metric_name, above)
