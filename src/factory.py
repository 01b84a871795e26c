"""
factory - Composition root for the wearable health hub.

ALL dependency wiring happens here. No other module constructs its own
dependencies. Adapters (CLI, REST) call this factory to get fully
configured services and repositories.

Usage:
    from factory import ServiceFactory
    from infrastructure.config import Settings

    config = Settings.from_env()
    factory = ServiceFactory(config)
    await factory.initialize()  # one-time startup

    users = factory.create_user_service()
    report = await users.delete_user(user_id)
"""

from __future__ import annotations

import logging

from domain.models import SeedReport
from infrastructure.config import Settings
from infrastructure.persistence.connection import AsyncSQLiteConnection
from infrastructure.persistence.migrations import run_migrations
from infrastructure.persistence.seed import seed_database
from infrastructure.persistence.user_repo import SQLiteUserRepository
from infrastructure.persistence.device_repo import SQLiteDeviceRepository
from infrastructure.persistence.metric_repo import SQLiteMetricRepository
from infrastructure.persistence.health_data_repo import SQLiteHealthDataRepository
from infrastructure.persistence.recommendation_repo import SQLiteRecommendationRepository
from infrastructure.persistence.query_repo import SQLiteQueryRepository
from application.services.users import UserService
from application.services.devices import DeviceService
from application.services.health_data import HealthDataService
from application.services.recommendations import RecommendationService

logger = logging.getLogger(__name__)


class ServiceFactory:
    """Composition root: wires all dependencies together.

    Call initialize() once at startup, then create services as needed.
    """

    def __init__(self, config: Settings):
        self._config = config
        self._connection = AsyncSQLiteConnection(config.database_file)
        self._initialized = False

    @property
    def connection(self) -> AsyncSQLiteConnection:
        return self._connection

    async def initialize(self, seed: bool | None = None) -> None:
        """One-time startup: create the database and tables, optionally seed.

        Args:
            seed: Load the sample fixtures. Defaults to config.seed_on_startup.
        """
        logger.info("Initializing ServiceFactory (db=%s)...", self._connection.db_path)
        await run_migrations(self._connection)
        logger.info("Database migrations complete")

        if self._config.seed_on_startup if seed is None else seed:
            await self.seed()

        self._initialized = True
        logger.info("ServiceFactory ready")

    async def seed(self) -> SeedReport:
        """Load the sample fixtures (no-op when users already exist)."""
        return await seed_database(self._connection)

    # ------------------------------------------------------------------
    # Service creation
    # ------------------------------------------------------------------

    def create_user_service(self) -> UserService:
        self._ensure_initialized()
        return UserService(user_repo=SQLiteUserRepository(self._connection))

    def create_device_service(self) -> DeviceService:
        self._ensure_initialized()
        return DeviceService(
            device_repo=SQLiteDeviceRepository(self._connection),
            user_repo=SQLiteUserRepository(self._connection),
        )

    def create_health_data_service(self) -> HealthDataService:
        self._ensure_initialized()
        return HealthDataService(
            data_repo=SQLiteHealthDataRepository(self._connection),
            metric_repo=SQLiteMetricRepository(self._connection),
        )

    def create_recommendation_service(self) -> RecommendationService:
        self._ensure_initialized()
        return RecommendationService(
            recommendation_repo=SQLiteRecommendationRepository(self._connection),
        )

    def create_query_repository(self) -> SQLiteQueryRepository:
        """Return the repository for read-only reporting queries."""
        return SQLiteQueryRepository(self._connection)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError(
                "ServiceFactory not initialized. Call await factory.initialize() first."
            )
