"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from application.exceptions import (
    ProgramGenerationError,
    ProgramNotFoundError,
    RepositoryError,
)
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title="Liftlog API",
        description="Progressive overload, program matching and training analytics",
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _register_exception_handlers(app)
    _include_routers(app)

    logger.info(
        f"Liftlog API created (environment={settings.environment}, "
        f"streak_timezone={settings.streak_timezone})"
    )
    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )
        logger.info("Sentry initialized for liftlog-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]
    trusted_origins.extend(settings.cors_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


async def _repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    logger.error(f"Repository error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"detail": "Database request failed"})


async def _program_not_found_handler(request: Request, exc: ProgramNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _program_generation_handler(request: Request, exc: ProgramGenerationError) -> JSONResponse:
    logger.warning(f"Program generation failed: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def _register_exception_handlers(app: FastAPI) -> None:
    """Translate application exceptions into HTTP responses."""
    app.add_exception_handler(RepositoryError, _repository_error_handler)
    app.add_exception_handler(ProgramNotFoundError, _program_not_found_handler)
    app.add_exception_handler(ProgramGenerationError, _program_generation_handler)


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        health_router,
        progression_router,
        programs_router,
        progress_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Domain routers (with prefixes defined in each router)
    app.include_router(progression_router)
    app.include_router(programs_router)
    app.include_router(progress_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
