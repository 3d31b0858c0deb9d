"""API Layer: FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error responses share the {"error": {...}} envelope

Design Decisions:
    - Thin routes delegate to services; sentinel errors become HTTP statuses
      in error_handlers.py only
"""
