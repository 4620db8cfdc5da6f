"""In-memory tag repository for testing."""

from typing import Optional

from article.domain.error import ConflictError
from article.domain.model.tag import Tag
from article.domain.repository.tag import TagRepository
from article.domain.value import TagId, TagName

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def save(self, tag: Tag) -> Tag:
        if await self.find_by_name(tag.name):
            raise ConflictError(f"tag {tag.name.root!r} already exists")
        self.store.tags[tag.id] = tag
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        return self.store.tags.get(tag_id)

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        for tag in self.store.tags.values():
            if tag.name == name:
                return tag
        return None
