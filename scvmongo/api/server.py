"""
FastAPI application wiring.

- Lifespan connects to MongoDB and closes the client on shutdown
- Logfire instrumentation when a token is configured
- Registers the 401 / 500 error handlers
- Provides health check endpoints
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import logfire
from fastapi import FastAPI, HTTPException, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from scvmongo import __version__
from scvmongo.config import Settings, get_settings
from scvmongo.mongo import check_mongodb, close_mongodb, connect_mongodb
from scvmongo.observability import initialize_logfire

from .errors import install_error_handlers

logger = logging.getLogger(__name__)


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """FastAPI dependency returning the database opened by the lifespan."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise HTTPException(status_code=503, detail="database is not connected")
    return database


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application. Routers are added by the caller."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting scvmongo API ({settings.environment})")
        app.state.database = await connect_mongodb(
            settings.mongo.database,
            settings.mongo.url,
            settings.mongo,
        )

        yield

        logger.info("Shutting down scvmongo API")
        close_mongodb(app.state.database)
        app.state.database = None

    app = FastAPI(
        title="scvmongo API",
        version=__version__,
        lifespan=lifespan,
        debug=settings.is_development,
    )
    app.state.database = None
    install_error_handlers(app)

    if initialize_logfire(settings):
        logfire.instrument_fastapi(app)

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request) -> Dict[str, Any]:
        """Health status of the service and its database."""
        database = request.app.state.database
        db_connected = database is not None and await check_mongodb(database)

        return {
            "status": "healthy" if db_connected else "degraded",
            "version": __version__,
            "database": "connected" if db_connected else "disconnected",
            "environment": settings.environment,
        }

    @app.get("/", tags=["Root"])
    async def root() -> Dict[str, str]:
        """Basic API information."""
        return {
            "name": "scvmongo API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app
