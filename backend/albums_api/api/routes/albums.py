"""Album Routes — GET /albums, GET /albums/{album_id}, POST /albums.

Invariants:
    - Any stored id can be fetched back: album_id is a path converter, so ids
      containing "/" (sent as %2F or raw) still reach get_album_by_id
    - POST returns 201 with the stored album echoed back
    - Declared errors: 400 (validation), 404 (unknown id), 409 (duplicate id)
    - Empty artist omitted from every response (response_model_exclude_none)

Design Decisions:
    - Sync def handlers: the catalog does no IO, FastAPI runs them in its
      threadpool and the catalog lock keeps concurrent creates atomic
    - Typed signatures per route: body and path params bound by FastAPI,
      no runtime casting
"""

from fastapi import APIRouter, Depends, status

from albums_api.api.dependencies import get_album_handlers
from albums_api.core.domain_types import ApiTag
from albums_api.schemas.album import AlbumSchema
from albums_api.schemas.errors import ErrorResponse
from albums_api.services.handle_albums import AlbumHandlers

router = APIRouter(prefix="/albums", tags=[ApiTag.ALBUM.value])


@router.get(
    "", response_model=list[AlbumSchema], response_model_exclude_none=True,
)
def get_albums(
    handlers: AlbumHandlers = Depends(get_album_handlers),
) -> list[AlbumSchema]:
    """List all albums in insertion order."""
    return [AlbumSchema.from_album(a) for a in handlers.list_albums()]


@router.post(
    "",
    response_model=AlbumSchema,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
def post_albums(
    body: AlbumSchema,
    handlers: AlbumHandlers = Depends(get_album_handlers),
) -> AlbumSchema:
    """Add an album. The id must not already be in the catalog."""
    album = handlers.create_album(body.model_dump())
    return AlbumSchema.from_album(album)


@router.get(
    "/{album_id:path}",
    response_model=AlbumSchema,
    response_model_exclude_none=True,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
def get_album_by_id(
    album_id: str,
    handlers: AlbumHandlers = Depends(get_album_handlers),
) -> AlbumSchema:
    """Get one album by its id."""
    return AlbumSchema.from_album(handlers.get_album(album_id))
