"""
application.dto - Data Transfer Objects for service input.

These are the structured requests that adapters (REST endpoints, CLI
commands) hand to services.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class RegisterUserRequest:
    """Input for user registration."""
    first_name: str
    last_name: str
    email: str
    age: Optional[int] = None
    gender: Optional[str] = None
    registration_date: Optional[date] = None


@dataclass(frozen=True)
class RegisterDeviceRequest:
    """Input for adding a device, optionally with its owner."""
    model: str
    device_name: str
    owner_id: Optional[int] = None


@dataclass(frozen=True)
class RecordReadingRequest:
    """Input for recording one observation.

    The metric is given either by id or by its catalog name.
    """
    value: object
    user_id: int
    device_id: int
    metric_id: Optional[int] = None
    metric_name: Optional[str] = None
    timestamp: Optional[datetime] = None
