"""Shared fixtures: every test gets its own SQLite file under tmp_path."""

import pytest
import pytest_asyncio

from factory import ServiceFactory
from infrastructure.config import Settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(project_root=tmp_path, db_path=str(tmp_path / "health.db"))


@pytest_asyncio.fixture
async def factory(settings: Settings) -> ServiceFactory:
    """Factory over an initialised, empty database."""
    f = ServiceFactory(settings)
    await f.initialize(seed=False)
    return f


@pytest_asyncio.fixture
async def seeded_factory(factory: ServiceFactory) -> ServiceFactory:
    """Factory over a database holding the sample fixtures."""
    await factory.seed()
    return factory


@pytest.fixture
def connection(factory: ServiceFactory):
    return factory.connection
