"""Endpoint for recording health readings."""

from fastapi import APIRouter, Depends, status

from factory import ServiceFactory
from application.dto import RecordReadingRequest
from adapters.rest.dependencies import get_factory
from adapters.rest.schemas import ReadingBody, ReadingOut

router = APIRouter(prefix="/readings", tags=["readings"])


@router.post("", response_model=ReadingOut, status_code=status.HTTP_201_CREATED)
async def record_reading(body: ReadingBody, factory: ServiceFactory = Depends(get_factory)):
    """Record one observation. Unknown user, metric or device ids give 409."""
    data = await factory.create_health_data_service().record(RecordReadingRequest(
        value=body.value,
        user_id=body.user_id,
        device_id=body.device_id,
        metric_id=body.metric_id,
        metric_name=body.metric_name,
        timestamp=body.timestamp,
    ))
    return ReadingOut.from_entity(data)
