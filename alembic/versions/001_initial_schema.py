"""Initial schema — assignees and department assignments.

Revision ID: 001
Revises: None
Create Date: 2026-10-18
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Assignees
    op.create_table(
        "assignees",
        sa.Column("id", sa.Text, primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("color", sa.Text, nullable=False),
    )

    # Assignments — no ON DELETE rule, deletes nullify references themselves
    op.create_table(
        "assignments",
        sa.Column("code", sa.Text, primary_key=True),
        sa.Column(
            "assignee_id", sa.Text, sa.ForeignKey("assignees.id"), nullable=True
        ),
    )
    op.create_index("idx_assignments_assignee", "assignments", ["assignee_id"])


def downgrade() -> None:
    op.drop_index("idx_assignments_assignee", table_name="assignments")
    op.drop_table("assignments")
    op.drop_table("assignees")
