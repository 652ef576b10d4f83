"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - Reports catalog size; never mutates it
"""

from fastapi import APIRouter, Depends, Request, status

from albums_api.api.dependencies import get_catalog
from albums_api.core.catalog import AlbumCatalog
from albums_api.core.domain_types import ApiTag

router = APIRouter(prefix="/health", tags=[ApiTag.HEALTH.value])


@router.get("", status_code=status.HTTP_200_OK)
def health_check(
    request: Request, catalog: AlbumCatalog = Depends(get_catalog),
):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "albums-api",
        "version": request.app.version,
        "albums": catalog.count(),
    }
