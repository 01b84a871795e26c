"""Health metric catalog endpoints."""

from fastapi import APIRouter, Depends, status

from factory import ServiceFactory
from adapters.rest.dependencies import get_factory
from adapters.rest.schemas import MetricBody, MetricOut

router = APIRouter(prefix="/metrics", tags=["metrics"])


@router.post("", response_model=MetricOut, status_code=status.HTTP_201_CREATED)
async def add_metric(body: MetricBody, factory: ServiceFactory = Depends(get_factory)):
    metric = await factory.create_health_data_service().add_metric(body.metric_name, body.unit)
    return MetricOut.from_entity(metric)


@router.get("", response_model=list[MetricOut])
async def list_metrics(factory: ServiceFactory = Depends(get_factory)):
    metrics = await factory.create_health_data_service().list_metrics()
    return [MetricOut.from_entity(m) for m in metrics]
