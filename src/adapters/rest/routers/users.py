"""User endpoints: registration, lookup, audited deletion, per-user views."""

from fastapi import APIRouter, Depends, status

from factory import ServiceFactory
from application.dto import RegisterUserRequest
from adapters.rest.dependencies import get_factory
from adapters.rest.schemas import DeletionOut, DeviceOut, ReadingOut, UserBody, UserOut

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserBody,
    factory: ServiceFactory = Depends(get_factory),
):
    service = factory.create_user_service()
    user = await service.register(RegisterUserRequest(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        age=body.age,
        gender=body.gender,
        registration_date=body.registration_date,
    ))
    return UserOut.from_entity(user)


@router.get("", response_model=list[UserOut])
async def list_users(factory: ServiceFactory = Depends(get_factory)):
    users = await factory.create_user_service().list_users()
    return [UserOut.from_entity(u) for u in users]


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: int, factory: ServiceFactory = Depends(get_factory)):
    user = await factory.create_user_service().get(user_id)
    return UserOut.from_entity(user)


@router.delete("/{user_id}", response_model=DeletionOut)
async def delete_user(user_id: int, factory: ServiceFactory = Depends(get_factory)):
    """Delete a user along with their readings, recommendations and device links."""
    report = await factory.create_user_service().delete_user(user_id)
    return DeletionOut(
        user_id=report.user_id,
        email=report.email,
        readings=report.readings,
        recommendations=report.recommendations,
        device_links=report.device_links,
    )


@router.get("/{user_id}/devices", response_model=list[DeviceOut])
async def user_devices(user_id: int, factory: ServiceFactory = Depends(get_factory)):
    devices = await factory.create_device_service().devices_for_user(user_id)
    return [DeviceOut.from_entity(d) for d in devices]


@router.get("/{user_id}/readings", response_model=list[ReadingOut])
async def user_readings(user_id: int, factory: ServiceFactory = Depends(get_factory)):
    await factory.create_user_service().get(user_id)
    readings = await factory.create_health_data_service().readings_for_user(user_id)
    return [ReadingOut.from_entity(r) for r in readings]
