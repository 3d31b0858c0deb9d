"""Core Layer: error hierarchy shared by services and the API.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
"""
