"""Shared post response models."""

from datetime import datetime

from pydantic import BaseModel

from article.domain.model import Post
from article.domain.value import PostStatus


class AuthorResponse(BaseModel):
    """Author summary embedded in a post."""

    id: str
    full_name: str
    email: str
    created_at: datetime


class TagResponse(BaseModel):
    """Tag embedded in a post."""

    id: str
    name: str


class PostResponse(BaseModel):
    """Post joined with its author and tags."""

    id: str
    title: str
    content: str
    category: str
    status: PostStatus
    featured_image_url: str | None
    author_id: str
    author: AuthorResponse | None
    tags: list[TagResponse]
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        author = None
        if post.author is not None:
            author = AuthorResponse(
                id=str(post.author.id),
                full_name=post.author.full_name,
                email=post.author.email,
                created_at=post.author.created_at,
            )
        return cls(
            id=str(post.id),
            title=post.title,
            content=post.content,
            category=post.category,
            status=post.status,
            featured_image_url=post.featured_image_url,
            author_id=str(post.author_id),
            author=author,
            tags=[TagResponse(id=str(tag.id), name=tag.name.root) for tag in post.tags],
            created_at=post.created_at,
            updated_at=post.updated_at,
            deleted_at=post.deleted_at,
        )


class PostPageResponse(BaseModel):
    """One page of posts plus pagination metadata."""

    posts: list[PostResponse]
    total: int
    limit: int
    offset: int
