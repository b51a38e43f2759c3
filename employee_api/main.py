"""
Employee Directory API - FastAPI Application Entry Point

This module initializes the FastAPI application with all middleware,
routes, exception handlers and lifecycle event handlers.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from employee_api import __version__
from employee_api.core.config import settings
from employee_api.core.database import init_db, close_db
from employee_api.core.exceptions import EmployeeNotFoundError, StorageError
from employee_api.core.logging_config import log_with_context, setup_logging
from employee_api.middleware.request_id import RequestIDMiddleware
from employee_api.middleware.logging import LoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
        - Set up logging
        - Initialize database (create tables when enabled)

    Shutdown:
        - Close database connections
    """
    setup_logging(level=settings.log_level, json_format=settings.log_json)

    await init_db()
    logger.info("Startup complete", extra={"version": __version__})

    yield

    await close_db()


app = FastAPI(
    title=settings.project_name,
    version=__version__,
    description="CRUD service for employee records",
    openapi_url=f"{settings.api_prefix}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# Configure middleware
# Note: Middleware is executed in reverse order of registration
# (last registered = first executed)

# Logging middleware (runs after RequestID to access request_id)
app.add_middleware(LoggingMiddleware)

# Request ID middleware (first to run - sets correlation ID)
app.add_middleware(RequestIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(EmployeeNotFoundError)
async def employee_not_found_handler(request: Request, exc: EmployeeNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    # Driver details stay in the logs
    log_with_context(
        logger,
        "error",
        "Storage failure",
        request_id=getattr(request.state, "request_id", None),
        employee_id=request.path_params.get("employee_id"),
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage failure"},
    )


# Import and include routers
from employee_api.api.routes import employees, health  # noqa: E402

app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(employees.router, prefix=settings.api_prefix)


@app.get("/")
async def root() -> Dict[str, str]:
    """
    Root endpoint.

    Returns basic API information.
    """
    return {
        "message": settings.project_name,
        "version": __version__,
        "docs": "/docs",
    }
