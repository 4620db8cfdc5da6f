"""Post aggregate root."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, HttpUrl, TypeAdapter, field_validator

from article.domain.model.common import DomainModel
from article.domain.model.tag import Tag
from article.domain.model.user import UserSummary
from article.domain.value import PostId, PostStatus, TagName, UserId

_url_adapter = TypeAdapter(HttpUrl)


class PostContent(DomainModel):
    """Author-editable fields of a post.

    Used as input to both create and update, so every write is validated
    against the same rules before storage is touched.
    """

    title: str = Field(min_length=20, max_length=200)
    content: str = Field(min_length=200)
    category: str = Field(min_length=3, max_length=100)
    status: PostStatus
    featured_image_url: Optional[str] = None
    tag_names: list[TagName] = Field(default_factory=list)

    @field_validator("featured_image_url", mode="before")
    @classmethod
    def blank_url_is_absent(cls, v: object) -> object:
        """Treat an empty image URL as no image."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("featured_image_url")
    @classmethod
    def validate_url(cls, v: Optional[str]) -> Optional[str]:
        """Image URL must be a well-formed http(s) URL (kept as given)."""
        if v is not None:
            _url_adapter.validate_python(v)
        return v


class Post(DomainModel):
    """Post aggregate root.

    ``author`` and ``tags`` are populated when the post is read back from
    storage; they are references resolved by identity, never owned copies.
    """

    id: PostId
    title: str
    content: str
    category: str
    status: PostStatus = PostStatus.DRAFT
    featured_image_url: Optional[str] = None
    author_id: UserId
    author: Optional[UserSummary] = None
    tags: list[Tag] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        """Whether the post has been soft-deleted."""
        return self.deleted_at is not None

    @property
    def tag_names(self) -> list[str]:
        """Names of the attached tags."""
        return [tag.name.root for tag in self.tags]

    def apply(self, content: PostContent, now: datetime) -> "Post":
        """Return a copy with the editable fields overwritten."""
        return self.model_copy(
            update={
                "title": content.title,
                "content": content.content,
                "category": content.category,
                "status": content.status,
                "featured_image_url": content.featured_image_url,
                "updated_at": now,
            }
        )
