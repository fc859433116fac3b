"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from fixturelink.api.routes import health, matching
from fixturelink.config import VERSION
from fixturelink.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    setup_logging()
    logger.info("fixturelink API ready")

    yield

    logger.info("fixturelink API stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="fixturelink API",
        description="Cross-source football fixture reconciliation",
        version=VERSION,
        lifespan=lifespan,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(matching.router, prefix="/api/v1")

    return app


app = create_app()
