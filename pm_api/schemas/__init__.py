"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary (types, lengths, required keys)
    - Semantic checks (id format, empty names, time windows) live in services/
      so non-HTTP callers get the same errors

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
