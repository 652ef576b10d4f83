"""Error Handlers — global exception handlers for the Albums API.

Invariants:
    - Every handler answers with AlbumsError.to_response(): one envelope shape
    - AlbumsError → its own http_status
    - RequestValidationError → 400 AlbumValidationError, violations in context.details
    - StarletteHTTPException (unmatched route, wrong method) → same envelope
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain, validation (Pydantic), routing (Starlette), catch-all
    - Expected errors logged at WARNING, 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from albums_api.core.errors import (
    AlbumValidationError,
    AlbumsError,
    status_for_http,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_albums_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _respond(request: Request, exc: AlbumsError) -> JSONResponse:
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(
        status_code=exc.http_status, content=exc.to_response(),
    )


def _register_albums_error_handler(app: FastAPI) -> None:
    """Register album domain error handler."""

    @app.exception_handler(AlbumsError)
    async def albums_error_handler(request: Request, exc: AlbumsError):
        return _respond(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        return _respond(request, AlbumValidationError(_violations(exc)))


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for routing errors raised by Starlette."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        error = AlbumsError(
            str(exc.detail), f"HTTP_{exc.status_code}",
            status_for_http(exc.status_code), http_status=exc.status_code,
        )
        response = _respond(request, error)
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        error = AlbumsError("An unexpected error occurred", "INTERNAL_ERROR")
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _violations(exc: RequestValidationError) -> list[dict[str, str]]:
    """Pydantic errors in the {field, rule, message} shape of validate_album."""
    violations = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        if len(loc) > 1 and loc[0] == "body":
            loc = loc[1:]
        violations.append({
            "field": ".".join(loc),
            "rule": e["type"],
            "message": e["msg"],
        })
    return violations
