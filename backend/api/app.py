"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import (
    KommyutError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    StorageUnavailableError,
)
from .models.errors import ErrorResponse, ValidationErrorResponse
from .routes import health, users
from modules.accounts.routes import router as accounts_router
from modules.verification.routes import router as verification_router
from modules.trips.routes import router as trips_router

logger = logging.getLogger(__name__)


def status_for_error(exc: KommyutError) -> int:
    """HTTP status for a domain error that reached the app boundary."""
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, AuthenticationError):
        return 401
    if isinstance(exc, AuthorizationError):
        return 403
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, ConflictError):
        return 409
    if isinstance(exc, StorageUnavailableError):
        return 503
    return 500


async def handle_domain_error(request: Request, exc: KommyutError) -> JSONResponse:
    """Render domain errors not handled by a route."""
    status_code = status_for_error(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")

    body = ErrorResponse(
        error=exc.code,
        detail=exc.message,
        code=exc.code,
        details=exc.details,
    )
    headers = {"Retry-After": "1"} if isinstance(exc, StorageUnavailableError) else None
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body), headers=headers)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies and parameters are client errors (400)."""
    body = ValidationErrorResponse(detail=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=400, content=body.model_dump())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logger.info(
        f"Starting {settings.app_name} on {settings.host}:{settings.port} "
        f"(storage: {settings.storage_backend})"
    )
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Back-office API for ID verification and trip lifecycle",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(KommyutError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)

    # Register routes. Fixed /api/users paths must come before /{uid}.
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(verification_router, prefix="/api/users", tags=["verification"])
    app.include_router(accounts_router, prefix="/api/users", tags=["users"])
    app.include_router(trips_router, prefix="/api/trips", tags=["trips"])

    return app


# Application instance for uvicorn
app = create_app()
