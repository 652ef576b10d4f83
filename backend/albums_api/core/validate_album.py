"""Album Validation — explicit field rules, independent of any HTTP framework.

Invariants:
    - check_album_fields is PURE: returns violations, never raises, never mutates
    - validate_album raises AlbumValidationError with ALL violations, not the first
    - id and title: required, min length 1
    - artist: no rule (absent and empty both mean unspecified)
    - price: absent -> 0.0; present must be finite and >= MIN_PRICE

Design Decisions:
    - Violations as dicts (field, rule, message): same shape the error envelope
      publishes under context.details, so no translation layer is needed
    - bool rejected as price: Python treats True as 1, JSON clients never mean that
"""

import math
from typing import Any

from albums_api.core.album import Album
from albums_api.core.domain_types import AlbumId, Price
from albums_api.core.errors import AlbumValidationError


MIN_PRICE: float = 0.0
REQUIRED_TEXT_FIELDS: tuple[str, ...] = ("id", "title")

FieldViolation = dict[str, str]


def _violation(field: str, rule: str, message: str) -> FieldViolation:
    return {"field": field, "rule": rule, "message": message}


def _check_required_text(data: dict[str, Any], field: str) -> FieldViolation | None:
    if field not in data or data[field] is None:
        return _violation(field, "required", f"{field} is required")
    value = data[field]
    if not isinstance(value, str):
        return _violation(field, "type", f"{field} must be a string")
    if len(value) < 1:
        return _violation(field, "min_length", f"{field} must not be empty")
    return None


def _check_artist(data: dict[str, Any]) -> FieldViolation | None:
    artist = data.get("artist")
    if artist is not None and not isinstance(artist, str):
        return _violation("artist", "type", "artist must be a string")
    return None


def _check_price(data: dict[str, Any]) -> FieldViolation | None:
    price = data.get("price")
    if price is None:
        return None
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return _violation("price", "type", "price must be a number")
    try:
        finite = math.isfinite(price)
    except OverflowError:
        finite = False
    if not finite:
        return _violation("price", "finite", "price must be a finite number")
    if price < MIN_PRICE:
        return _violation(
            "price", "minimum", f"price must be >= {MIN_PRICE}, got {price}",
        )
    return None


def check_album_fields(data: dict[str, Any]) -> list[FieldViolation]:
    """Collect every rule violation in an album payload. Pure."""
    checks = [_check_required_text(data, f) for f in REQUIRED_TEXT_FIELDS]
    checks.append(_check_artist(data))
    checks.append(_check_price(data))
    return [v for v in checks if v is not None]


def validate_album(data: dict[str, Any]) -> Album:
    """Build an Album from a payload or raise AlbumValidationError."""
    violations = check_album_fields(data)
    if violations:
        raise AlbumValidationError(violations)
    return Album(
        id=AlbumId(data["id"]),
        title=data["title"],
        artist=data.get("artist") or "",
        price=Price(float(data.get("price") or 0.0)),
    )
