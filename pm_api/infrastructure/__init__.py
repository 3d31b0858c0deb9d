"""Infrastructure Layer: database engine/session management and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
"""
