"""SQLAlchemy ORM models for Pomodoro Todo."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, Text, text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from pomodoro_todo.core.models import DEFAULT_CATEGORY, Priority


class Base(DeclarativeBase):
    pass


class TodoRecord(Base):
    """A persisted todo item.

    Defaults live on the server so rows inserted by ``PostgresStore`` with
    plain SQL get the same values as the migration declares.
    """

    __tablename__ = "todos"

    id: Mapped[str] = mapped_column(
        PG_UUID(as_uuid=False), primary_key=True, server_default=text("gen_random_uuid()")
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("''"))
    completed: Mapped[bool] = mapped_column(nullable=False, server_default=text("false"))
    priority: Mapped[str] = mapped_column(
        Text, nullable=False, server_default=text(f"'{Priority.MEDIUM.value}'")
    )
    category: Mapped[str] = mapped_column(
        Text, nullable=False, server_default=text(f"'{DEFAULT_CATEGORY}'")
    )
    due_date: Mapped[datetime | None] = mapped_column(DateTime(), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(), nullable=False, server_default=text("now()")
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(), nullable=False, server_default=text("now()")
    )

    __table_args__ = (
        CheckConstraint("priority IN ('low', 'medium', 'high')", name="ck_todos_priority"),
        CheckConstraint("length(trim(title)) > 0", name="ck_todos_title_not_blank"),
        Index("idx_todos_completed", "completed"),
        Index("idx_todos_priority", "priority"),
        Index("idx_todos_category", "category"),
        Index("idx_todos_created_at", "created_at"),
    )
