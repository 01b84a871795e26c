"""Pydantic models for REST API request/response validation.

Length limits follow the declared column sizes
(NVARCHAR(255) names, NVARCHAR(10) gender, NVARCHAR(50) unit).
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from domain.entities import Device, HealthData, HealthMetric, Recommendation, User


# --- Users ---

class UserBody(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    age: int | None = Field(default=None, ge=0, le=150)
    gender: str | None = Field(default=None, max_length=10)
    registration_date: date | None = None


class UserOut(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    age: int | None
    gender: str | None
    registration_date: date

    @classmethod
    def from_entity(cls, user: User) -> UserOut:
        return cls(
            id=user.id, first_name=user.first_name, last_name=user.last_name,
            email=user.email, age=user.age, gender=user.gender,
            registration_date=user.registration_date,
        )


class DeletionOut(BaseModel):
    user_id: int
    email: str
    readings: int
    recommendations: int
    device_links: int


# --- Devices ---

class DeviceBody(BaseModel):
    model: str = Field(..., min_length=1, max_length=255)
    device_name: str = Field(..., min_length=1, max_length=255)
    owner_id: int | None = None


class DeviceOut(BaseModel):
    id: int
    model: str
    device_name: str

    @classmethod
    def from_entity(cls, device: Device) -> DeviceOut:
        return cls(id=device.id, model=device.model, device_name=device.device_name)


# --- Metrics ---

class MetricBody(BaseModel):
    metric_name: str = Field(..., min_length=1, max_length=255)
    unit: str = Field(..., min_length=1, max_length=50)


class MetricOut(BaseModel):
    id: int
    metric_name: str
    unit: str

    @classmethod
    def from_entity(cls, metric: HealthMetric) -> MetricOut:
        return cls(id=metric.id, metric_name=metric.metric_name, unit=metric.unit)


# --- Readings ---

class ReadingBody(BaseModel):
    value: Decimal
    user_id: int
    device_id: int
    metric_id: int | None = None
    metric_name: str | None = None
    timestamp: datetime | None = None

    @model_validator(mode="after")
    def _metric_given(self) -> ReadingBody:
        if self.metric_id is None and not self.metric_name:
            raise ValueError("Either metric_id or metric_name is required.")
        return self


class ReadingOut(BaseModel):
    id: int
    value: float
    timestamp: datetime
    user_id: int
    metric_id: int
    device_id: int

    @classmethod
    def from_entity(cls, data: HealthData) -> ReadingOut:
        return cls(
            id=data.id, value=float(data.value), timestamp=data.timestamp,
            user_id=data.user_id, metric_id=data.metric_id, device_id=data.device_id,
        )


# --- Recommendations ---

class RecommendationBody(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class RecommendationOut(BaseModel):
    id: int
    title: str
    description: str | None
    user_id: int

    @classmethod
    def from_entity(cls, rec: Recommendation) -> RecommendationOut:
        return cls(id=rec.id, title=rec.title, description=rec.description, user_id=rec.user_id)
