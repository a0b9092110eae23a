"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

from sqlalchemy import ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.adapters.persistence.database import Base


class AssigneeModel(Base):
    __tablename__ = "assignees"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    color: Mapped[str] = mapped_column(Text, nullable=False)


class AssignmentModel(Base):
    __tablename__ = "assignments"

    code: Mapped[str] = mapped_column(Text, primary_key=True)
    # No ON DELETE rule: deleting an assignee nullifies these rows explicitly first.
    assignee_id: Mapped[str | None] = mapped_column(
        Text, ForeignKey("assignees.id"), nullable=True
    )

    __table_args__ = (Index("idx_assignments_assignee", "assignee_id"),)
