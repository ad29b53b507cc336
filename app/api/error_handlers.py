"""
Global exception handlers.

Every failure leaves the API as `{"error": "..."}`, plus `details` for
validation failures. Internal details are logged, never returned.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.errors import InvoiceFlowError, UpstreamError


logger = logging.getLogger(__name__)

# First element of a validation error location -> response message
VALIDATION_MESSAGES = {
    "body": "Invalid input",
    "query": "Invalid query parameters",
    "path": "Invalid resource ID",
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_http_error_handler(app)
    _register_validation_error_handler(app)
    _register_database_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(InvoiceFlowError)
    async def domain_error_handler(request: Request, exc: InvoiceFlowError):
        if exc.http_status >= 500:
            logger.error("%s on %s", exc.message, request.url.path, exc_info=exc)
        else:
            logger.warning("%s on %s", exc.message, request.url.path)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_http_error_handler(app: FastAPI) -> None:
    """Unknown routes, wrong methods and explicit HTTPExceptions."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        logger.warning("HTTP %s on %s: %s", exc.status_code, request.url.path, exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc),
        )


def _register_database_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        error = UpstreamError(f"{request.method} {request.url.path}")
        logger.error("Database error during %s", error.operation, exc_info=exc)
        return JSONResponse(status_code=error.http_status, content=error.to_response())


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def build_validation_error_response(exc: RequestValidationError) -> dict:
    """
    Build the 400 body from pydantic's error list.

    The message depends on where the first issue sits (body, query or
    path); every issue is listed in `details`.
    """
    errors = exc.errors()
    source = errors[0]["loc"][0] if errors and errors[0]["loc"] else "body"
    return {
        "error": VALIDATION_MESSAGES.get(source, "Invalid input"),
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"][1:]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in errors
        ],
    }
