"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from commerce_api.config import configure_logging, get_settings
from commerce_api.database import create_schema, dispose_engine, initialize_database
from commerce_api.exceptions import register_exception_handlers
from commerce_api.infrastructure.common.routers import settings as settings_router
from commerce_api.infrastructure.identity.routers import users

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Set up logging and the database on startup; release the engine on shutdown."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    create_schema()
    logger.info("application_started", environment=settings.ENVIRONMENT, version=settings.VERSION)
    yield
    dispose_engine()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

    register_exception_handlers(app)

    app.include_router(users.router, prefix=settings.API_V1_PREFIX)
    app.include_router(settings_router.router, prefix=settings.API_V1_PREFIX)

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
