"""
application.services.devices - Device registration and ownership.
"""

from __future__ import annotations

import logging

from domain.entities import Device
from domain.exceptions import NotFoundError
from domain.ports import DeviceRepository, UserRepository
from application.dto import RegisterDeviceRequest

logger = logging.getLogger(__name__)


class DeviceService:
    """Registers devices and answers which devices a user has."""

    def __init__(self, device_repo: DeviceRepository, user_repo: UserRepository):
        self._device_repo = device_repo
        self._user_repo = user_repo

    async def register_device(self, request: RegisterDeviceRequest) -> Device:
        if request.owner_id is not None:
            await self._require_user(request.owner_id)
        device = Device(model=request.model, device_name=request.device_name)
        device.id = await self._device_repo.save(device)
        if request.owner_id is not None:
            await self._device_repo.assign_owner(device.id, request.owner_id)
        logger.info("Registered device %d (%s)", device.id, device.model)
        return device

    async def assign_owner(self, device_id: int, user_id: int) -> None:
        await self._require_user(user_id)
        if await self._device_repo.get_by_id(device_id) is None:
            raise NotFoundError(f"Device {device_id} does not exist.")
        await self._device_repo.assign_owner(device_id, user_id)

    async def list_devices(self) -> list[Device]:
        return await self._device_repo.list_all()

    async def delete_device(self, device_id: int) -> None:
        """Delete a device; its readings and ownership links cascade."""
        if not await self._device_repo.delete(device_id):
            raise NotFoundError(f"Device {device_id} does not exist.")
        logger.info("Deleted device %d", device_id)

    async def devices_for_user(self, user_id: int) -> list[Device]:
        """Devices the user owns, plus any that recorded readings for them.

        Ordered by device id, each device listed once.
        """
        await self._require_user(user_id)
        owned = await self._device_repo.get_by_owner(user_id)
        used = await self._device_repo.get_by_readings(user_id)
        merged = {d.id: d for d in owned + used}
        return [merged[k] for k in sorted(merged)]

    async def _require_user(self, user_id: int) -> None:
        if await self._user_repo.get_by_id(user_id) is None:
            raise NotFoundError(f"User {user_id} does not exist.")
