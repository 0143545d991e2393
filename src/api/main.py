"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures middleware, exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.dependencies import close_email_sender
from src.api.routes import router
from src.config.settings import get_settings
from src.domain.exceptions import PersistenceFailure

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "registration",
        "description": "Workshop signup and seat availability",
    },
    {
        "name": "admin",
        "description": "Participant roster for organizers",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates database connection pool on startup
    - Runs migrations on startup
    - Closes the email sender and connection pool on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info("Connecting to database...")

    # Create connection pool with explicit sizing
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )

    logger.info("Running database migrations...")
    run_migrations(pool)

    # Store pool in app state for dependency injection
    app.state.pool = pool

    logger.info(
        "Application startup complete (capacity=%d, email_backend=%s)",
        settings.capacity,
        settings.email_backend,
    )

    yield

    # Shutdown
    logger.info("Shutting down application...")
    close_email_sender()
    pool.close()
    logger.info("Email sender and database connection pool closed")


app = FastAPI(
    title="workshop-registration",
    description="Workshop Registration API - Capacity-gated signup with email notifications",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Registration form and admin dashboard are served from a separate origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(router)


@app.exception_handler(PersistenceFailure)
async def persistence_failure_handler(request: Request, exc: PersistenceFailure) -> JSONResponse:
    """Generic 500 for store failures that escape a route."""
    logger.error("Persistence failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


@app.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    Raises exception if database connection fails.
    """
    pool = request.app.state.pool
    with pool.connection() as conn:
        conn.execute("SELECT 1")

    return {"status": "healthy"}
