"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, responses)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, core types are domain values
"""
