"""Album Schemas — Pydantic model for album request bodies and responses.

Invariants:
    - id, title: required, min_length 1
    - price: defaults to 0.0, must be finite and >= 0
    - artist: optional; empty string normalized to None so responses omit it

Design Decisions:
    - One model for input and output: create echoes the request record unchanged
    - Field descriptions carried into OpenAPI for the docs UI
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from albums_api.core.album import Album


class AlbumSchema(BaseModel):
    """Album JSON shape: {id, title, artist?, price}."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{
                "id": "4",
                "title": "Kind of Blue",
                "artist": "Miles Davis",
                "price": 49.99,
            }],
        },
    )

    id: str = Field(
        min_length=1,
        description="ID is a unique string that determines album.",
    )
    title: str = Field(min_length=1, description="Title of the album.")
    artist: str | None = Field(
        None,
        description="Album author, can be empty for multi-artist compilations.",
    )
    price: float = Field(
        0.0, ge=0, allow_inf_nan=False, description="Price in USD.",
    )

    @field_validator("artist")
    @classmethod
    def empty_artist_is_unspecified(cls, v: str | None) -> str | None:
        return v or None

    @classmethod
    def from_album(cls, album: Album) -> "AlbumSchema":
        return cls(
            id=album.id, title=album.title,
            artist=album.artist, price=album.price,
        )
