"""
FastAPI application: REST adapter for the Wearable Health Hub.

Usage:
    python run_api.py

Or directly:
    uvicorn adapters.rest.app:app --host 0.0.0.0 --port 8000 --reload
"""

from __future__ import annotations

import logging
import sqlite3
import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

# Ensure src/ is on sys.path when invoked via uvicorn directly
_src_dir = Path(__file__).resolve().parent.parent.parent
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

from infrastructure.config import Settings
from infrastructure.persistence.errors import classify_integrity_error, violated_columns
from domain.exceptions import InvalidValueError, NotFoundError
from factory import ServiceFactory
from adapters.rest.dependencies import set_factory
from adapters.rest.routers import users, devices, metrics, readings, recommendations, reports

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def create_app(config: Settings | None = None) -> FastAPI:
    """Build the API. Settings default to the environment when omitted."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize ServiceFactory on startup."""
        settings = config or Settings.from_env()
        factory = ServiceFactory(settings)
        await factory.initialize()
        set_factory(factory)
        yield
        # aiosqlite connections are per-operation, nothing to close
        set_factory(None)

    app = FastAPI(
        title="Wearable Health Hub",
        version=__version__,
        description="Users, wearable devices, health readings and recommendations.",
        lifespan=lifespan,
    )

    app.add_exception_handler(sqlite3.IntegrityError, _integrity_error_handler)
    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(InvalidValueError, _invalid_value_handler)

    # Register routers
    app.include_router(users.router)
    app.include_router(recommendations.router)
    app.include_router(devices.router)
    app.include_router(metrics.router)
    app.include_router(readings.router)
    app.include_router(reports.router)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok", "version": __version__}

    return app


async def _integrity_error_handler(request: Request, exc: sqlite3.IntegrityError) -> JSONResponse:
    kind = classify_integrity_error(exc)
    logger.warning("Integrity violation on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={
            "detail": str(exc),
            "constraint": kind.value,
            "columns": violated_columns(exc),
        },
    )


async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def _invalid_value_handler(request: Request, exc: InvalidValueError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"detail": str(exc)},
    )


app = create_app()
