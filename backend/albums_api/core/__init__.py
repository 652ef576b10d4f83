"""Core Layer — album domain logic, no HTTP, no async.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - Validation functions are pure and deterministic
    - AlbumCatalog is the only stateful object; its state is guarded by a lock

Design Decisions:
    - Functional core separated from the FastAPI shell: rules testable without a client
"""
