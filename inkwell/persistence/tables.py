"""SQLAlchemy table definitions for Inkwell.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (credential store)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(30), nullable=False, unique=True),  # Lowercased
    Column("email", String(255), nullable=False, unique=True),  # Lowercased
    Column("password_hash", String(255), nullable=False),  # bcrypt
    Column("name", String(50), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(100), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_updated_at", posts_table.c.updated_at.desc())

# ============================================================================
# USER_POSTS TABLE (each user's owned-posts set, in insertion order)
# ============================================================================
user_posts_table = Table(
    "user_posts",
    metadata,
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,  # A post has exactly one owner
    ),
    Column("position", Integer, nullable=False),
    PrimaryKeyConstraint("user_id", "post_id", name="pk_user_posts"),
)

Index("idx_user_posts_user_position", user_posts_table.c.user_id, user_posts_table.c.position)

# ============================================================================
# POST_LIKES TABLE (one row per user liking a post)
# ============================================================================
post_likes_table = Table(
    "post_likes",
    metadata,
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    PrimaryKeyConstraint("post_id", "user_id", name="uq_post_likes_post_user"),
)

Index("idx_post_likes_user_id", post_likes_table.c.user_id)
