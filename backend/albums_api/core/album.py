"""Album — the catalog's single domain record.

Invariants:
    - Album is immutable (frozen): the catalog hands out records without copying
    - artist == "" means unspecified (multi-artist compilations)
    - Album instances are only built through validate_album() by the shell

Design Decisions:
    - dataclass over Pydantic model: core stays free of serialization concerns,
      schemas/ owns the JSON contract
"""

from dataclasses import asdict, dataclass

from albums_api.core.domain_types import AlbumId, Price


@dataclass(frozen=True)
class Album:
    """One record album in the catalog."""
    id: AlbumId
    title: str
    artist: str = ""
    price: Price = Price(0.0)

    def to_dict(self) -> dict:
        return asdict(self)
