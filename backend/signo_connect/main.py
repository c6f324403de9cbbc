"""SIGNO Connect API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SignoError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialised on startup only for the database storage backend
    - Frappe client created on startup and closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module's imports short
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from signo_connect.api.error_handlers import register_error_handlers
from signo_connect.api.routes import (
    documents, engagement, frappe_drivers, health, job_applications, jobs,
    navigation, profiles, realtime, registration, transporter, trips, vehicles,
)
from signo_connect.config import get_settings
from signo_connect.infrastructure import database
from signo_connect.infrastructure.frappe_client import (
    close_frappe_client, init_frappe_client,
)
from signo_connect.infrastructure.observability import (
    RequestLoggingMiddleware, setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.storage_backend == "database":
        database.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_auto_create:
            await database.db_manager.create_all()
    init_frappe_client(
        base_url=settings.frappe_base_url,
        api_token=settings.frappe_api_token,
        x_key=settings.frappe_x_key,
        timeout_seconds=settings.frappe_timeout_seconds,
        max_retries=settings.frappe_max_retries,
        base_delay_ms=settings.frappe_base_delay_ms,
    )
    logger.info(
        "SIGNO Connect API started",
        extra={"storage_backend": settings.storage_backend},
    )
    yield
    logger.info("SIGNO Connect API shutting down")
    await close_frappe_client()
    if database.db_manager is not None:
        await database.db_manager.dispose()


app = FastAPI(
    title="SIGNO Connect API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router)
app.include_router(registration.router)
app.include_router(profiles.router)
app.include_router(jobs.router)
app.include_router(job_applications.router)
app.include_router(documents.router)
app.include_router(vehicles.router)
app.include_router(trips.router)
app.include_router(engagement.router)
app.include_router(navigation.router)
app.include_router(frappe_drivers.router)
app.include_router(transporter.router)
app.include_router(transporter.driver_router)
app.include_router(realtime.router)

register_error_handlers(app)

# Static files — serves the client build in production
# Mounted after API routes so /api/* takes precedence
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
