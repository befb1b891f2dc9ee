"""
Main FastAPI application.

This is the entry point for the admin API server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from gallery_admin.core.config import settings
from gallery_admin.errors import AppError, OrderingError, app_error_handler, ordering_error_handler
from gallery_admin.routers import galleries, health, pages, uploads

logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    """Apply the configured log level and a plain line format to the root logger."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.

    Configures logging on startup.
    """
    configure_logging()
    logger.info("Starting %s", settings.APP_NAME)

    yield

    logger.info("Shutting down %s", settings.APP_NAME)


# Create the FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Admin API for static pages and photo galleries",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(OrderingError, ordering_error_handler)


# Include routers (API endpoints)
app.include_router(health.router, tags=["Health"])
app.include_router(pages.router)
app.include_router(galleries.router)
app.include_router(uploads.router)
