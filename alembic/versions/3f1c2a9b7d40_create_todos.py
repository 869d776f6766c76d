"""create todos table

Revision ID: 3f1c2a9b7d40
Revises:
Create Date: 2026-10-19 09:12:44.204517

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '3f1c2a9b7d40'
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "todos",
        sa.Column("id", sa.UUID(), nullable=False, server_default=sa.text("gen_random_uuid()")),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column(
            "priority",
            sa.Text(),
            nullable=False,
            server_default=sa.text("'medium'"),
        ),
        sa.Column(
            "category",
            sa.Text(),
            nullable=False,
            server_default=sa.text("'General'"),
        ),
        sa.Column("due_date", sa.DateTime(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "priority IN ('low', 'medium', 'high')", name="ck_todos_priority"
        ),
        sa.CheckConstraint("length(trim(title)) > 0", name="ck_todos_title_not_blank"),
    )
    op.create_index("idx_todos_completed", "todos", ["completed"])
    op.create_index("idx_todos_priority", "todos", ["priority"])
    op.create_index("idx_todos_category", "todos", ["category"])
    op.create_index("idx_todos_created_at", "todos", ["created_at"])


def downgrade() -> None:
    op.drop_index("idx_todos_created_at", table_name="todos")
    op.drop_index("idx_todos_category", table_name="todos")
    op.drop_index("idx_todos_priority", table_name="todos")
    op.drop_index("idx_todos_completed", table_name="todos")
    op.drop_table("todos")
