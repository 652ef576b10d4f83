"""Album Catalog — the in-memory, insertion-ordered album store.

Invariants:
    - No two albums share an id (checked on insert, never retroactively)
    - Append-only: no update, no delete
    - Every read and the check-then-append of insert run under self._lock
    - list_all() returns a tuple snapshot: callers cannot mutate the store

Design Decisions:
    - Explicit object over module-level list: one catalog per app instance,
      constructed at startup and injected into handlers
    - threading.Lock over asyncio.Lock: sync route handlers run in the
      threadpool, async ones on the loop; a thread lock covers both
    - Linear scan in find_by_id: tutorial-scale data, no index warranted
"""

import logging
import threading
from collections.abc import Iterable

from albums_api.core.album import Album
from albums_api.core.domain_types import AlbumId, Price
from albums_api.core.errors import AlbumAlreadyExistsError, AlbumNotFoundError

logger = logging.getLogger(__name__)


SEED_ALBUMS: tuple[Album, ...] = (
    Album(AlbumId("1"), "Blue Train", "John Coltrane", Price(56.99)),
    Album(AlbumId("2"), "Jeru", "Gerry Mulligan", Price(17.99)),
    Album(
        AlbumId("3"), "Sarah Vaughan and Clifford Brown",
        "Sarah Vaughan", Price(39.99),
    ),
)


class AlbumCatalog:
    """Lock-guarded, insertion-ordered collection of albums."""

    def __init__(self, albums: Iterable[Album] = ()):
        self._lock = threading.Lock()
        self._albums: list[Album] = []
        for album in albums:
            self.insert(album)

    @classmethod
    def seeded(cls) -> "AlbumCatalog":
        """Catalog pre-loaded with the three seed albums."""
        return cls(SEED_ALBUMS)

    def __len__(self) -> int:
        return self.count()

    def count(self) -> int:
        with self._lock:
            return len(self._albums)

    def list_all(self) -> tuple[Album, ...]:
        """Snapshot of every album in insertion order."""
        with self._lock:
            return tuple(self._albums)

    def find_by_id(self, album_id: str) -> Album:
        """Return the album with this id or raise AlbumNotFoundError."""
        with self._lock:
            for album in self._albums:
                if album.id == album_id:
                    return album
        raise AlbumNotFoundError(album_id)

    def insert(self, album: Album) -> Album:
        """Append album unless its id is taken. Atomic under the lock."""
        with self._lock:
            if any(a.id == album.id for a in self._albums):
                raise AlbumAlreadyExistsError(album.id)
            self._albums.append(album)
            logger.debug(
                f"Album {album.id} added to catalog",
                extra={"album_id": album.id},
            )
        return album
