"""pm-api package: project-management backend (accounts, projects, statuses, tasks).

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
