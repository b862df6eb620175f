"""
FastAPI application factory.

Creates and configures the FastAPI application instance, and maps
domain errors to ``{"message": ...}`` JSON responses.
"""

import logging
import time
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DataError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.router import api_router
from app.core import messages
from app.core.config import settings
from app.core.exceptions import DomainError
from app.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json")

    # Include API router
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        logger.info("domain_error", extra={"error": type(exc).__name__, "status_code": exc.status_code,
                                           "path": request.url.path, "detail": exc.message})
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        detail = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'][1:]) or error['loc'][0]}: {error['msg']}"
            for error in exc.errors())
        logger.info("invalid_request", extra={"path": request.url.path, "detail": detail})
        return JSONResponse(status_code=400, content={"message": messages.text("invalid_request", detail=detail)})

    @app.exception_handler(DataError)
    async def data_error_handler(request: Request, exc: DataError) -> JSONResponse:
        logger.warning("value_rejected_by_database", extra={"path": request.url.path, "detail": str(exc.orig)})
        return JSONResponse(status_code=400, content={"message": messages.text("value_out_of_range")})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)},
                            headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_error", extra={"path": request.url.path})
        return JSONResponse(status_code=500, content={"message": messages.text("internal_error")})

    @app.middleware("http")
    async def request_logging(request: Request, call_next: Callable) -> Response:
        started = time.monotonic()
        response = await call_next(request)
        logger.info("http_request", extra={"method": request.method, "path": request.url.path,
                                           "status_code": response.status_code,
                                           "duration_ms": round((time.monotonic() - started) * 1000, 2)})
        return response

    @app.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "message": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "status": "healthy"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "service": "training-service",
            "version": settings.VERSION
        }

    return app


app = create_app()
