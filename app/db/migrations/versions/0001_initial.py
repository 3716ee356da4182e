"""users, thoughts and thought likes

Revision ID: 0001
Revises:
Create Date: 2026-10-18 12:00:00

"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("uuid", sa.Uuid(), primary_key=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "thoughts",
        sa.Column("uuid", sa.Uuid(), primary_key=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("hearts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("category", sa.String(100), nullable=False, server_default="General"),
    )

    op.create_table(
        "thought_likes",
        sa.Column("uuid", sa.Uuid(), primary_key=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column(
            "thought_id",
            sa.Uuid(),
            sa.ForeignKey("thoughts.uuid", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.UniqueConstraint("thought_id", "user_id", name="uq_thought_likes_thought_user"),
    )
    op.create_index("ix_thought_likes_thought_id", "thought_likes", ["thought_id"])
    op.create_index("ix_thought_likes_user_id", "thought_likes", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_thought_likes_user_id", table_name="thought_likes")
    op.drop_index("ix_thought_likes_thought_id", table_name="thought_likes")
    op.drop_table("thought_likes")
    op.drop_table("thoughts")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
