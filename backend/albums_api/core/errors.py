"""Error Hierarchy — typed exceptions for every album failure mode.

Invariants:
    - Every error has a code (str), a status label (ErrorStatus) and an http_status
    - Domain errors (400-level) are expected and surfaced verbatim to the caller
    - to_response() is the ONLY error envelope: request validation, unmatched
      routes and the catch-all handler all build an AlbumsError and call it
    - Field-level problems always live under context.details
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with AlbumsError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from typing import Any
from datetime import datetime, timezone

from albums_api.core.domain_types import ErrorStatus


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    album_id: str | None = None
    app_code: int | None = None
    details: list[dict[str, Any]] | None = None


class AlbumsError(Exception):
    """Base exception for all Albums API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        status: ErrorStatus = ErrorStatus.INTERNAL,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "status": self.status.value,
                "message": self.message,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "album_id": self.context.album_id,
                    "app_code": self.context.app_code,
                    "details": self.context.details,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class AlbumValidationError(AlbumsError):
    """Album payload failed one or more field rules."""
    def __init__(
        self, violations: list[dict[str, Any]], context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.details = violations
        fields = ", ".join(v["field"] for v in violations)
        super().__init__(
            f"Invalid album: {fields}", "VALIDATION_ERROR",
            ErrorStatus.INVALID_ARGUMENT, ctx, 400,
        )
        self.violations = violations


class AlbumNotFoundError(AlbumsError):
    """No album with the requested id."""
    def __init__(self, album_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.album_id = album_id
        super().__init__(
            f"Album '{album_id}' not found", "ALBUM_NOT_FOUND",
            ErrorStatus.NOT_FOUND, ctx, 404,
        )
        self.album_id = album_id


class AlbumAlreadyExistsError(AlbumsError):
    """Create attempted with an id already present in the catalog."""
    def __init__(self, album_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.album_id = album_id
        super().__init__(
            f"Album '{album_id}' already exists", "ALBUM_ALREADY_EXISTS",
            ErrorStatus.ALREADY_EXISTS, ctx, 409,
        )
        self.album_id = album_id


# ─── Transport Errors ───────────────────────────────────────────

def status_for_http(http_status: int) -> ErrorStatus:
    """Status label for an HTTP status raised outside the album handlers."""
    if http_status == 404:
        return ErrorStatus.NOT_FOUND
    if http_status == 405:
        return ErrorStatus.UNIMPLEMENTED
    if http_status >= 500:
        return ErrorStatus.INTERNAL
    return ErrorStatus.INVALID_ARGUMENT
