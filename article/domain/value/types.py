"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

from enum import Enum

from pydantic import field_validator

from article.domain.value.common import RootValueObject, ValueObject
from article.domain.value.identifiers import UserId


class PostStatus(str, Enum):
    """Lifecycle status of a post.

    Any status can move to any other through an author update. ``THRASH``
    is a logical trash bin; soft deletion is tracked separately.
    """

    PUBLISH = "publish"
    DRAFT = "draft"
    THRASH = "thrash"


class TagName(RootValueObject[str]):
    """Tag name for labelling posts.

    Names are trimmed and lower-cased, so "Go" and "go" are the same tag.
    """

    @field_validator("root")
    @classmethod
    def normalize_tag_name(cls, v: str) -> str:
        """Normalize and validate tag name."""
        v = v.strip().lower()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Tag name must be 1-100 characters")
        return v


class AuthenticatedCaller(ValueObject):
    """Identity of the caller behind a verified session token."""

    id: UserId
    email: str
    full_name: str
