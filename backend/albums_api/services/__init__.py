"""Services Layer — handlers that sit between routes and the catalog.

Invariants:
    - Handlers never touch FastAPI types (no Request, no HTTPException)
    - Failures raised as AlbumsError subclasses; the api layer maps them to HTTP
"""
