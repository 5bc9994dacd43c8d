"""initial_schema

Create the schema for Inkwell:
- Users (username/email/bcrypt password)
- Posts
- User posts (each user's owned-posts set, in insertion order)
- Post likes (one row per liking user)

Revision ID: 3f2b9c41d7a0
Revises:
Create Date: 2026-10-19 10:12:44.518230

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2b9c41d7a0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(30), nullable=False),  # Lowercased
        sa.Column("email", sa.String(255), nullable=False),  # Lowercased
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="users_username_key"),
        sa.UniqueConstraint("email", name="users_email_key"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("char_length(title) > 0", name="check_title_not_empty"),
        sa.CheckConstraint(
            "char_length(content) > 0", name="check_content_not_empty"
        ),
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])
    op.create_index(
        "idx_posts_updated_at", "posts", [sa.text("updated_at DESC")]
    )

    # ========================================================================
    # USER_POSTS table (owned-posts set)
    # ========================================================================
    op.create_table(
        "user_posts",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "post_id", name="pk_user_posts"),
        sa.UniqueConstraint("post_id", name="user_posts_post_id_key"),
    )
    op.create_index(
        "idx_user_posts_user_position", "user_posts", ["user_id", "position"]
    )

    # ========================================================================
    # POST_LIKES table
    # ========================================================================
    op.create_table(
        "post_likes",
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id", "user_id", name="uq_post_likes_post_user"),
    )
    op.create_index("idx_post_likes_user_id", "post_likes", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_post_likes_user_id", table_name="post_likes")
    op.drop_table("post_likes")
    op.drop_index("idx_user_posts_user_position", table_name="user_posts")
    op.drop_table("user_posts")
    op.drop_index("idx_posts_updated_at", table_name="posts")
    op.drop_index("idx_posts_author_id", table_name="posts")
    op.drop_table("posts")
    op.drop_table("users")
