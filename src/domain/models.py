"""
domain.models - Value objects returned by queries and services.

These are immutable data containers with no dependencies on
infrastructure (no SQLite, no FastAPI). Query rows come back as these
types instead of raw tuples so adapters can render them directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional

from domain.exceptions import InvalidValueError

# DECIMAL(10, 2): ten digits in total, two after the point
VALUE_PRECISION = 10
VALUE_SCALE = 2
_QUANTUM = Decimal(1).scaleb(-VALUE_SCALE)
_MAX_VALUE = Decimal(10) ** (VALUE_PRECISION - VALUE_SCALE) - _QUANTUM


def to_reading_value(raw: object) -> Decimal:
    """Convert a raw number to a Decimal quantized to two places.

    Floats go through str() first so 75.5 becomes Decimal("75.50") rather
    than its binary expansion.

    Raises:
        InvalidValueError: If the value is not numeric, not finite, or
            has more than eight integer digits.
    """
    if isinstance(raw, bool):
        raise InvalidValueError(f"Reading value must be numeric, got {raw!r}")
    try:
        value = raw if isinstance(raw, Decimal) else Decimal(str(raw))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidValueError(f"Reading value must be numeric, got {raw!r}") from exc
    if not value.is_finite():
        raise InvalidValueError(f"Reading value must be finite, got {raw!r}")
    if value and value.adjusted() >= VALUE_PRECISION - VALUE_SCALE:
        raise InvalidValueError(
            f"Reading value {value} exceeds DECIMAL({VALUE_PRECISION}, {VALUE_SCALE})"
        )
    # Rounding can still carry into a ninth integer digit
    value = value.quantize(_QUANTUM)
    if abs(value) > _MAX_VALUE:
        raise InvalidValueError(
            f"Reading value {value} exceeds DECIMAL({VALUE_PRECISION}, {VALUE_SCALE})"
        )
    return value


# ---------------------------------------------------------------------------
# Integrity errors
# ---------------------------------------------------------------------------

class ConstraintKind(str, Enum):
    """Kind of integrity constraint the engine reported as violated."""
    UNIQUE = "unique"
    NOT_NULL = "not_null"
    FOREIGN_KEY = "foreign_key"
    UNKNOWN = "unknown"


# ---------------------------------------------------------------------------
# Query rows
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ReadingRow:
    """One observation joined with its user and metric."""
    first_name: str
    last_name: str
    metric_name: str
    value: Decimal
    timestamp: datetime


@dataclass(frozen=True)
class UserReadingCount:
    first_name: str
    last_name: str
    readings: int


@dataclass(frozen=True)
class UserAverage:
    first_name: str
    last_name: str
    average: float


@dataclass(frozen=True)
class DeviceModelCount:
    model: str
    readings: int


@dataclass(frozen=True)
class UserDeviceRow:
    """A user paired with a device they have recorded readings on."""
    first_name: str
    last_name: str
    model: str
    device_name: str


@dataclass(frozen=True)
class GenderCount:
    gender: Optional[str]
    users: int


@dataclass(frozen=True)
class RecommendationText:
    title: str
    description: Optional[str]


@dataclass(frozen=True)
class Overview:
    """Row counts per table."""
    users: int = 0
    devices: int = 0
    metrics: int = 0
    readings: int = 0
    recommendations: int = 0


# ---------------------------------------------------------------------------
# Service results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SeedReport:
    """Outcome of loading the sample fixtures."""
    skipped: bool
    inserted: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class DeletionReport:
    """What a user deletion removed, captured before the cascade ran."""
    user_id: int
    email: str
    readings: int
    recommendations: int
    device_links: int
