"""
domain.exceptions - Custom exception hierarchy for the wearable health hub.

All domain-level errors inherit from DomainError so callers can catch
broad or specific exceptions as needed. Constraint violations raised by
the database engine are not wrapped here; they reach callers as
sqlite3.IntegrityError.
"""


class DomainError(Exception):
    """Base exception for all domain-level errors."""


class NotFoundError(DomainError):
    """Raised when a referenced user, device, metric or reading does not exist."""


class InvalidValueError(DomainError):
    """Raised when a reading value does not fit DECIMAL(10, 2)."""


class RepositoryError(DomainError):
    """Raised when a database operation leaves the store in an unexpected state."""
