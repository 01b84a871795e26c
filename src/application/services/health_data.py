"""
application.services.health_data - Recording observations and metric catalog.

Values are validated against DECIMAL(10, 2) before they reach the
database. Missing user or device references are left for the schema's
foreign keys to reject.
"""

from __future__ import annotations

import logging
from datetime import datetime

from domain.entities import HealthData, HealthMetric
from domain.exceptions import NotFoundError
from domain.models import to_reading_value
from domain.ports import HealthDataRepository, MetricRepository
from application.dto import RecordReadingRequest

logger = logging.getLogger(__name__)


class HealthDataService:
    """Records readings and manages the metric catalog."""

    def __init__(
        self,
        data_repo: HealthDataRepository,
        metric_repo: MetricRepository,
    ):
        self._data_repo = data_repo
        self._metric_repo = metric_repo

    async def add_metric(self, metric_name: str, unit: str) -> HealthMetric:
        """Add a catalog entry. A duplicate name raises sqlite3.IntegrityError."""
        metric = HealthMetric(unit=unit, metric_name=metric_name)
        metric.id = await self._metric_repo.save(metric)
        return metric

    async def list_metrics(self) -> list[HealthMetric]:
        return await self._metric_repo.list_all()

    async def record(self, request: RecordReadingRequest) -> HealthData:
        """Write one reading.

        Raises:
            InvalidValueError: If the value does not fit DECIMAL(10, 2).
            NotFoundError: If the metric name is not in the catalog.
            ValueError: If neither metric_id nor metric_name is given.
            sqlite3.IntegrityError: If user, metric or device id does not exist.
        """
        value = to_reading_value(request.value)
        metric_id = await self._resolve_metric(request)
        data = HealthData(
            value=value,
            timestamp=request.timestamp or datetime.now().replace(microsecond=0),
            user_id=request.user_id,
            metric_id=metric_id,
            device_id=request.device_id,
        )
        data.id = await self._data_repo.save(data)
        logger.debug(
            "Recorded reading %d: user=%d metric=%d device=%d value=%s",
            data.id, data.user_id, data.metric_id, data.device_id, data.value,
        )
        return data

    async def readings_for_user(self, user_id: int) -> list[HealthData]:
        return await self._data_repo.get_by_user(user_id)

    async def _resolve_metric(self, request: RecordReadingRequest) -> int:
        if request.metric_id is not None:
            return request.metric_id
        if not request.metric_name:
            raise ValueError("Either metric_id or metric_name is required.")
        metric = await self._metric_repo.get_by_name(request.metric_name)
        if metric is None:
            raise NotFoundError(f"Metric '{request.metric_name}' is not in the catalog.")
        return metric.id
