"""
domain.entities - Persistence-aware types (have IDs).

One dataclass per table. No SQL concerns, no DB imports; the repository
implementations convert rows to and from these types.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass
class User:
    """A person who owns wearable devices.

    The 'email' column has a UNIQUE constraint in the DB schema.
    """
    id: Optional[int] = None
    first_name: str = ""
    last_name: str = ""
    age: Optional[int] = None
    email: str = ""
    gender: Optional[str] = None
    registration_date: Optional[date] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


@dataclass
class Device:
    """A wearable hardware unit."""
    id: Optional[int] = None
    model: str = ""
    device_name: str = ""


@dataclass
class HealthMetric:
    """Catalog entry for a measurable quantity (e.g. Heart Rate in bpm)."""
    id: Optional[int] = None
    unit: str = ""
    metric_name: str = ""


@dataclass
class HealthData:
    """A single observation recorded by a device for a user."""
    id: Optional[int] = None
    value: Decimal = Decimal("0.00")
    timestamp: Optional[datetime] = None
    user_id: Optional[int] = None
    metric_id: Optional[int] = None
    device_id: Optional[int] = None


@dataclass
class Recommendation:
    """Personalized advice tied to one user."""
    id: Optional[int] = None
    title: str = ""
    description: Optional[str] = None
    user_id: Optional[int] = None

