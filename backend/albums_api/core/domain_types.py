"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AlbumId wraps str, never empty once an Album exists
    - Price is a non-negative float in USD
    - ErrorStatus labels are the only status strings used in error envelopes

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AlbumId = NewType("AlbumId", str)


# ─── Value Types ─────────────────────────────────────────────────

Price = NewType("Price", float)   # USD, >= 0.0


# ─── Enums ───────────────────────────────────────────────────────

class ErrorStatus(str, Enum):
    """Status labels carried by every error envelope."""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    UNIMPLEMENTED = "UNIMPLEMENTED"
    INTERNAL = "INTERNAL"


class ApiTag(str, Enum):
    """OpenAPI tags used to group routes in the docs UI."""
    ALBUM = "Album"
    HEALTH = "health"
