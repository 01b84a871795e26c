"""
infrastructure.persistence.columns - Column value conversions.

SQLite has no DATE, DATETIME or DECIMAL storage class. Dates are kept as
'YYYY-MM-DD' text and timestamps as 'YYYY-MM-DD HH:MM:SS' text, converted
to UTC when the value carries an offset. Reading values are bound as
decimal strings so the NUMERIC affinity of DECIMAL(10, 2) stores them as
numbers.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

from domain.models import to_reading_value


def date_to_db(value: date) -> str:
    return value.isoformat()


def date_from_db(raw: Optional[str]) -> Optional[date]:
    if not raw:
        return None
    return date.fromisoformat(raw[:10])


def timestamp_to_db(value: datetime) -> str:
    """Naive values are taken as already in storage time; aware ones are stored as UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.replace(microsecond=0).isoformat(sep=" ")


def timestamp_from_db(raw: Optional[str]) -> Optional[datetime]:
    if not raw:
        return None
    return datetime.fromisoformat(raw)


def value_to_db(value: Decimal) -> str:
    return str(to_reading_value(value))


def value_from_db(raw) -> Decimal:
    return to_reading_value(raw)
