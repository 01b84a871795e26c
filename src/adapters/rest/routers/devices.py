"""Device endpoints."""

from fastapi import APIRouter, Depends, Response, status

from factory import ServiceFactory
from application.dto import RegisterDeviceRequest
from adapters.rest.dependencies import get_factory
from adapters.rest.schemas import DeviceBody, DeviceOut

router = APIRouter(prefix="/devices", tags=["devices"])


@router.post("", response_model=DeviceOut, status_code=status.HTTP_201_CREATED)
async def register_device(
    body: DeviceBody,
    factory: ServiceFactory = Depends(get_factory),
):
    device = await factory.create_device_service().register_device(RegisterDeviceRequest(
        model=body.model,
        device_name=body.device_name,
        owner_id=body.owner_id,
    ))
    return DeviceOut.from_entity(device)


@router.get("", response_model=list[DeviceOut])
async def list_devices(factory: ServiceFactory = Depends(get_factory)):
    devices = await factory.create_device_service().list_devices()
    return [DeviceOut.from_entity(d) for d in devices]


@router.put("/{device_id}/owners/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def assign_owner(
    device_id: int,
    user_id: int,
    factory: ServiceFactory = Depends(get_factory),
):
    await factory.create_device_service().assign_owner(device_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_device(device_id: int, factory: ServiceFactory = Depends(get_factory)):
    """Delete a device; its readings go with it."""
    await factory.create_device_service().delete_device(device_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
