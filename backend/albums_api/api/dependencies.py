"""Route Dependencies — hands the app-owned catalog to route handlers.

Invariants:
    - The catalog lives on app.state.catalog, set once by create_app()
    - get_album_handlers builds a stateless AlbumHandlers per request

Design Decisions:
    - app.state over a module-level global: each app instance (and each test)
      owns its own catalog
"""

from fastapi import Depends, Request

from albums_api.core.catalog import AlbumCatalog
from albums_api.services.handle_albums import AlbumHandlers


def get_catalog(request: Request) -> AlbumCatalog:
    """FastAPI dependency for the application's album catalog."""
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise RuntimeError("Album catalog not initialized")
    return catalog


def get_album_handlers(
    catalog: AlbumCatalog = Depends(get_catalog),
) -> AlbumHandlers:
    return AlbumHandlers(catalog)
