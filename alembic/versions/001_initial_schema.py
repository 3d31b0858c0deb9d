"""Initial schema: accounts, projects, statuses, tasks.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _entity_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("deleted", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "accounts",
        *_entity_columns(),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("avatar", sa.String(1024), nullable=False, server_default=""),
    )

    op.create_table(
        "projects",
        *_entity_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("owner_id", sa.Uuid(), sa.ForeignKey("accounts.id"), nullable=False),
    )
    op.create_index("ix_projects_owner_id", "projects", ["owner_id"])

    op.create_table(
        "statuses",
        *_entity_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("project_id", sa.Uuid(), sa.ForeignKey("projects.id"), nullable=False),
    )
    op.create_index("ix_statuses_project_id", "statuses", ["project_id"])

    op.create_table(
        "tasks",
        *_entity_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("start", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end", sa.DateTime(timezone=True), nullable=False),
        sa.Column("project_id", sa.Uuid(), sa.ForeignKey("projects.id"), nullable=False),
        sa.Column("status_id", sa.Uuid(), sa.ForeignKey("statuses.id"), nullable=False),
        sa.CheckConstraint('"end" >= "start"', name="ck_tasks_window"),
    )
    op.create_index("ix_tasks_status_id", "tasks", ["status_id"])
    op.create_index("ix_tasks_project_id_status_id", "tasks", ["project_id", "status_id"])


def downgrade() -> None:
    op.drop_index("ix_tasks_project_id_status_id", table_name="tasks")
    op.drop_index("ix_tasks_status_id", table_name="tasks")
    op.drop_table("tasks")
    op.drop_index("ix_statuses_project_id", table_name="statuses")
    op.drop_table("statuses")
    op.drop_index("ix_projects_owner_id", table_name="projects")
    op.drop_table("projects")
    op.drop_table("accounts")
