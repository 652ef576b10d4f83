"""Error Schemas — documents the error envelope in the OpenAPI description.

Invariants:
    - Mirrors AlbumsError.to_response(), the only envelope the API emits
    - Used only for documentation (responses=...), never to build responses
"""

from typing import Any

from pydantic import BaseModel


class ErrorContextSchema(BaseModel):
    album_id: str | None = None
    app_code: int | None = None
    details: list[dict[str, Any]] | None = None


class ErrorBody(BaseModel):
    code: str
    status: str
    message: str
    timestamp: str
    context: ErrorContextSchema


class ErrorResponse(BaseModel):
    """Error envelope returned for 400, 404, 409 and 500 responses."""
    error: ErrorBody
