# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI Application Factory.

This module provides the main application factory for the Baila Admin API.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from baila_admin import __version__
from baila_admin.api.admin import router as admin_router
from baila_admin.api.middleware.auth import AuthMiddleware
from baila_admin.api.middleware.request_context import RequestContextMiddleware
from baila_admin.api.routes import health
from baila_admin.core.config import get_settings
from baila_admin.domains.pricing import PriceBook
from baila_admin.infrastructure.database.connection import (
    DatabaseError,
    close_database,
    init_database,
)
from baila_admin.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Loads the price tables and opens the database pool on startup, and
    disposes the pool on shutdown. A broken pricing file stops startup.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    settings = get_settings()
    setup_logging(settings)
    logger.info(
        "Starting Baila Admin API: environment=%s, term=%s",
        settings.environment,
        settings.enrollment.current_session,
    )

    app.state.price_book = PriceBook.from_file(settings.enrollment.pricing_file)

    try:
        await init_database(settings)
        logger.info("Database connection initialized")
    except DatabaseError as e:
        logger.warning("Failed to initialize database connection: %s", str(e))

    yield

    await close_database()
    logger.info("Shutting down Baila Admin API")


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report malformed requests as 400 Bad Request."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Baila Admin API",
        description="Admin backend for Baila Kids dance class enrollment",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        # Avoid 307 redirects that drop the Authorization header
        redirect_slashes=False,
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Middleware (last added is first executed)
    app.add_middleware(AuthMiddleware)
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins_list,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allow_methods,
        allow_headers=settings.cors.allow_headers,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(admin_router)

    return app
