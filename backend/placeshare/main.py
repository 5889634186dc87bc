"""PlaceShare API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers are the single translation of failures to responses
    - CORS configured from settings (not hardcoded)
    - Geocoder (and database, for the database backend) initialized on startup
      via lifespan context manager and released on shutdown

Run with: uvicorn placeshare.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from placeshare.api.error_handlers import register_error_handlers
from placeshare.api.routes import health, places, users
from placeshare.config import get_settings
from placeshare.infrastructure.database import close_db, init_db
from placeshare.infrastructure.geocoding_client import (
    close_geocoder, init_geocoder,
)
from placeshare.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.storage_backend == "database":
        init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
    init_geocoder(
        settings.geocoding_api_key,
        base_url=settings.geocoding_base_url,
        timeout_seconds=settings.geocoding_timeout_seconds,
    )
    logger.info(
        f"PlaceShare API started (storage={settings.storage_backend})",
    )
    yield
    await close_geocoder()
    await close_db()
    logger.info("PlaceShare API shutting down")


app = FastAPI(
    title="PlaceShare API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(places.router)
app.include_router(users.router)

register_error_handlers(app)
