"""
Shared FastAPI dependencies.

- get_factory(): the ServiceFactory built by the app lifespan.
- get_queries(): the read-only reporting repository, for /reports routes.
"""

from __future__ import annotations

from fastapi import Depends

from factory import ServiceFactory
from infrastructure.persistence.query_repo import SQLiteQueryRepository

# Set by the app lifespan, cleared on shutdown
_factory: ServiceFactory | None = None


def set_factory(factory: ServiceFactory | None) -> None:
    global _factory
    _factory = factory


def get_factory() -> ServiceFactory:
    if _factory is None:
        raise RuntimeError("ServiceFactory not initialized.")
    return _factory


def get_queries(factory: ServiceFactory = Depends(get_factory)) -> SQLiteQueryRepository:
    return factory.create_query_repository()
