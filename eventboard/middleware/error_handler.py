"""
Exception handlers that turn application errors into JSON responses.

Every error body has the same shape::

    {"detail": "<human readable message>", "category": "<error category>"}
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from eventboard.core.exceptions import AppError, ErrorCategory

logger = logging.getLogger(__name__)


def handle_app_error(error: AppError, request: Request) -> JSONResponse:
    """Handle structured application errors"""

    log = logger.error if error.status_code >= 500 else logger.warning
    log(
        f"{error.category} on {request.method} {request.url.path}: {error.message}",
        extra={"category": error.category, "status_code": error.status_code},
    )

    return JSONResponse(
        status_code=error.status_code,
        content={"detail": error.message, "category": error.category, **error.details},
    )


def handle_database_error(error: SQLAlchemyError, request: Request) -> JSONResponse:
    """Database errors that escaped the accessors' own wrapping"""

    logger.error(
        f"Database error: {type(error).__name__}",
        extra={"path": request.url.path, "method": request.method},
        exc_info=True,
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": f"Database operation failed: {error}",
            "category": ErrorCategory.DATABASE,
        },
    )


# Exception handlers for FastAPI
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """FastAPI exception handler for AppError"""
    return handle_app_error(exc, request)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """FastAPI exception handler for SQLAlchemyError"""
    return handle_database_error(exc, request)
