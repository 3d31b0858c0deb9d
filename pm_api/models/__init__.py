"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base and EntityMixin (db/base.py)
    - Ownership chain: Account -> Project -> Status -> Task (Task also -> Project)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before
      create_all or alembic autogenerate runs
"""

from pm_api.models.account import Account  # noqa: F401
from pm_api.models.project import Project  # noqa: F401
from pm_api.models.status import Status  # noqa: F401
from pm_api.models.task import Task  # noqa: F401
