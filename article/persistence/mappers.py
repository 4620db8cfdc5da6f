"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from article.domain.model import Post, Tag, User, UserSummary
from article.domain.value import PostId, PostStatus, TagId, TagName, UserId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops tzinfo; stored values are always UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        full_name=row["full_name"],
        email=row["email"],
        password_hash=row["password_hash"],
        created_at=_as_utc(row["created_at"]),
        updated_at=_as_utc(row["updated_at"]),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_author(row: Dict[str, Any]) -> UserSummary:
    """Convert the author columns of a joined post row to a UserSummary.

    Expects columns labelled ``author_full_name``, ``author_email`` and
    ``author_created_at``.
    """
    return UserSummary(
        id=UserId(_as_uuid(row["author_id"])),
        full_name=row["author_full_name"],
        email=row["author_email"],
        created_at=_as_utc(row["author_created_at"]),
    )


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_as_uuid(row["id"])),
        name=TagName(row["name"]),
        created_at=_as_utc(row["created_at"]),
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return {"id": tag.id, "name": tag.name.root, "created_at": tag.created_at}


def row_to_post(
    row: Dict[str, Any],
    tags: Optional[list[Tag]] = None,
    author: Optional[UserSummary] = None,
) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tags: Tags attached to the post
        author: Author summary, when the row was joined with users

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        category=row["category"],
        status=PostStatus(row["status"]),
        featured_image_url=row.get("featured_image_url"),
        author_id=UserId(_as_uuid(row["author_id"])),
        author=author,
        tags=tags or [],
        created_at=_as_utc(row["created_at"]),
        updated_at=_as_utc(row["updated_at"]),
        deleted_at=_as_utc(row.get("deleted_at")),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to a dict of ``posts`` columns.

    Author and tags are stored in their own tables.
    """
    return {
        "id": post.id,
        "title": post.title,
        "content": post.content,
        "category": post.category,
        "status": post.status.value,
        "featured_image_url": post.featured_image_url,
        "author_id": post.author_id,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
        "deleted_at": post.deleted_at,
    }
