"""
domain.ports - Abstract interfaces (Protocols) for all system boundaries.

These define WHAT the application needs from storage without specifying
HOW. Infrastructure modules provide the SQLite implementations.
Application services depend only on these protocols, never on concrete
classes.

Using typing.Protocol (structural typing) instead of ABC: any class that
implements the methods satisfies the port without explicit inheritance.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from domain.entities import (
    User,
    Device,
    HealthMetric,
    HealthData,
    Recommendation,
)


@runtime_checkable
class UserRepository(Protocol):
    """CRUD operations for User entities."""

    async def save(self, user: User) -> int: ...
    async def get_by_id(self, user_id: int) -> User | None: ...
    async def get_by_email(self, email: str) -> User | None: ...
    async def get_by_name(self, first_name: str, last_name: str) -> User | None: ...
    async def list_all(self) -> list[User]: ...
    async def delete(self, user_id: int) -> bool: ...
    async def count_dependents(self, user_id: int) -> dict[str, int]: ...


@runtime_checkable
class DeviceRepository(Protocol):
    """CRUD operations for Device entities and their owners."""

    async def save(self, device: Device) -> int: ...
    async def get_by_id(self, device_id: int) -> Device | None: ...
    async def list_all(self) -> list[Device]: ...
    async def delete(self, device_id: int) -> bool: ...
    async def assign_owner(self, device_id: int, user_id: int) -> None: ...
    async def get_by_owner(self, user_id: int) -> list[Device]: ...
    async def get_by_readings(self, user_id: int) -> list[Device]: ...


@runtime_checkable
class MetricRepository(Protocol):
    """CRUD operations for the HealthMetric catalog."""

    async def save(self, metric: HealthMetric) -> int: ...
    async def get_by_id(self, metric_id: int) -> HealthMetric | None: ...
    async def get_by_name(self, metric_name: str) -> HealthMetric | None: ...
    async def list_all(self) -> list[HealthMetric]: ...
    async def delete(self, metric_id: int) -> bool: ...


@runtime_checkable
class HealthDataRepository(Protocol):
    """CRUD operations for HealthData observations."""

    async def save(self, data: HealthData) -> int: ...
    async def get_by_id(self, data_id: int) -> HealthData | None: ...
    async def get_by_user(self, user_id: int) -> list[HealthData]: ...
    async def delete(self, data_id: int) -> bool: ...


@runtime_checkable
class RecommendationRepository(Protocol):
    """CRUD operations for Recommendation entities."""

    async def save(self, recommendation: Recommendation) -> int: ...
    async def get_by_user(self, user_id: int) -> list[Recommendation]: ...
    async def delete(self, recommendation_id: int) -> bool: ...
