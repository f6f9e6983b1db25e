"""FastAPI application factory.

Creates the FastAPI app with lifespan management, exception handlers,
and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from geocache_api.core.config import get_settings
from geocache_api.core.logging import setup_logging
from geocache_api.lib.geocoder import CacheRegistry, get_provider
from geocache_api.lib.geocoder.base import GeocodingProviderError, InvalidInputError, NoDataError
from geocache_api.services.geocoding_service import GeocodingResolver


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifecycle: build the caches, provider and resolver on startup."""
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir)

    provider = get_provider(settings)
    app.state.resolver = GeocodingResolver(provider, CacheRegistry())
    logger.info(f"Geocoding resolver ready (provider={provider.provider_name})")

    yield

    app.state.resolver = None


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Geocache API",
        description="Forward and reverse geocoding with process-local result caching",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Register exception handlers
    @app.exception_handler(NoDataError)
    async def no_data_handler(request: Request, exc: NoDataError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": exc.message},
        )

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.message},
        )

    @app.exception_handler(GeocodingProviderError)
    async def provider_error_handler(request: Request, exc: GeocodingProviderError) -> JSONResponse:
        logger.warning(f"Geocoding provider failure: {exc}")
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": "Geocoding provider is temporarily unavailable. Please retry later."},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    from geocache_api.api.router import create_router

    app.include_router(create_router(settings))

    return app
