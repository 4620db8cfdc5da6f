"""SQLAlchemy table definitions for the article service.

Column types are dialect-neutral so the same metadata serves PostgreSQL in
production and SQLite in repository tests. They match the schema created by
the Alembic migrations.
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    Uuid,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("full_name", String(100), nullable=False),
    Column("email", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("email", name="uq_users_email"),
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("name", String(100), nullable=False),  # lower-cased
    Column("created_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("name", name="uq_tags_name"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("category", String(100), nullable=False),
    Column("status", String(20), nullable=False, server_default="draft"),
    Column("featured_image_url", Text, nullable=True),
    Column(
        "author_id",
        Uuid,
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    Column("deleted_at", DateTime(timezone=True), nullable=True),  # soft delete
)

Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_created_at", posts_table.c.created_at)
Index("idx_posts_status", posts_table.c.status)

# ============================================================================
# POST_TAGS TABLE (many-to-many)
# ============================================================================
post_tags_table = Table(
    "post_tags",
    metadata,
    Column(
        "post_id",
        Uuid,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "tag_id",
        Uuid,
        ForeignKey("tags.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    UniqueConstraint("post_id", "tag_id", name="uq_post_tags_post_tag"),
)

Index("idx_post_tags_tag_id", post_tags_table.c.tag_id)
