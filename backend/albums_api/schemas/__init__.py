"""Pydantic Schemas — request/response contracts for the HTTP boundary.

Invariants:
    - Schemas validate at system boundary and feed the OpenAPI document
    - Field constraints mirror core/validate_album.py rules

Design Decisions:
    - Separate from core.album.Album: schemas are the JSON contract,
      the dataclass is the domain record
"""
