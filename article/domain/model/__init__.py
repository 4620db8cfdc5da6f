"""Domain model entities."""

from article.domain.model.post import Post, PostContent
from article.domain.model.tag import Tag
from article.domain.model.user import User, UserSummary

__all__ = [
    "User",
    "UserSummary",
    "Post",
    "PostContent",
    "Tag",
]
