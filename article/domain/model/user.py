"""User aggregate root."""

from datetime import datetime, timezone

from pydantic import Field

from article.domain.model.common import DomainModel
from article.domain.value import UserId


class User(DomainModel):
    """Registered author.

    The password hash never leaves the domain; responses use
    :class:`UserSummary`.
    """

    id: UserId
    full_name: str = Field(min_length=3, max_length=100)
    email: str = Field(max_length=255)
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def summary(self) -> "UserSummary":
        """Public view of this user."""
        return UserSummary(
            id=self.id,
            full_name=self.full_name,
            email=self.email,
            created_at=self.created_at,
        )


class UserSummary(DomainModel):
    """Public user view (no credentials)."""

    id: UserId
    full_name: str
    email: str
    created_at: datetime
