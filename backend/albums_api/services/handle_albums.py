"""Album Handlers — list_albums, get_album, create_album.

Invariants:
    - list_albums never fails; an empty catalog yields []
    - get_album raises AlbumNotFoundError on no match; lookups never mutate
    - create_album validates BEFORE touching the catalog; on any failure the
      catalog is left unchanged
    - create_album returns the stored record unchanged (echo)

Design Decisions:
    - Catalog injected through __init__: handlers own no state
    - Each operation is a single synchronous step: no retries, no timeouts
"""

import logging
from typing import Any

from albums_api.core.album import Album
from albums_api.core.catalog import AlbumCatalog
from albums_api.core.errors import AlbumAlreadyExistsError, AlbumValidationError
from albums_api.core.validate_album import validate_album

logger = logging.getLogger(__name__)


class AlbumHandlers:
    """Catalog operations exposed by the /albums routes."""

    def __init__(self, catalog: AlbumCatalog):
        self.catalog = catalog

    def list_albums(self) -> list[Album]:
        """Every album, in insertion order."""
        return list(self.catalog.list_all())

    def get_album(self, album_id: str) -> Album:
        """Album by id, or AlbumNotFoundError."""
        return self.catalog.find_by_id(album_id)

    def create_album(self, data: dict[str, Any]) -> Album:
        """Validate and append a new album; echo it back."""
        try:
            album = validate_album(data)
            self.catalog.insert(album)
        except AlbumValidationError as e:
            logger.warning(
                f"Rejected album payload: {e.message}",
                extra={"error_code": e.code},
            )
            raise
        except AlbumAlreadyExistsError as e:
            logger.warning(
                f"Duplicate album id: {e.album_id}",
                extra={"error_code": e.code, "album_id": e.album_id},
            )
            raise
        logger.info(
            f"Album {album.id} created", extra={"album_id": album.id},
        )
        return album
