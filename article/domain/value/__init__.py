"""Domain value objects."""

from article.domain.value.identifiers import PostId, TagId, UserId
from article.domain.value.types import AuthenticatedCaller, PostStatus, TagName

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "TagId",
    # Types
    "AuthenticatedCaller",
    "PostStatus",
    "TagName",
]
