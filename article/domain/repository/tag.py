"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from article.domain.model.tag import Tag
from article.domain.value import TagId, TagName


class TagRepository(ABC):
    """Repository interface for Tag entities."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag

        Raises:
            ConflictError: If a tag with the same name already exists
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID.

        Args:
            tag_id: Tag identifier

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by exact (normalized) name.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass
