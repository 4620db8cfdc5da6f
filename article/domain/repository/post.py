"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from article.domain.model.post import Post
from article.domain.value import PostId, PostStatus, TagId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Read methods return posts joined with their author summary and tags.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(
        self, post_id: PostId, include_deleted: bool = False
    ) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier
            include_deleted: Whether a soft-deleted post may be returned

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        status: Optional[PostStatus] = None,
        author_id: Optional[UserId] = None,
        include_deleted: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination, newest first.

        Args:
            status: Restrict to this status (None for all statuses)
            author_id: Restrict to this author (None for all authors)
            include_deleted: Whether to include soft-deleted posts
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        status: Optional[PostStatus] = None,
        author_id: Optional[UserId] = None,
        include_deleted: bool = False,
    ) -> int:
        """Count posts matching the given filters.

        Computed independently of any page so pagination metadata stays
        correct.
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> None:
        """Insert or update the post's own fields.

        Tag associations are managed by :meth:`replace_tags`.

        Raises:
            ConflictError: If a constraint (e.g. the author reference) is violated
        """
        pass

    @abstractmethod
    async def replace_tags(self, post_id: PostId, tag_ids: List[TagId]) -> None:
        """Replace the post's tag association set wholesale.

        Associations to tags not listed are removed, listed ones are added.

        Raises:
            ConflictError: If a referenced post or tag does not exist
        """
        pass

    @abstractmethod
    async def soft_delete(self, post_id: PostId, deleted_at: datetime) -> None:
        """Mark a post deleted without removing rows or tag associations."""
        pass
