"""Services Layer: one data-access module per entity.

Invariants:
    - One async function per entity per verb (get, list, create, update, delete)
    - Functions raise core/errors.py sentinel errors, never HTTPException

Design Decisions:
    - Plain module functions taking an AsyncSession: routes and scripts call
      the same code
"""
