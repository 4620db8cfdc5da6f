"""Shared state for the in-memory repositories."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

from article.domain.model import Post, Tag, User
from article.domain.repository import TransactionManager
from article.domain.value import PostId, TagId, UserId
from article.persistence.database import SchemaMigrator


@dataclass
class InMemoryStore:
    """Tables of the in-memory backend.

    Posts are stored without author or tags; those are joined on read like
    the SQL backend does.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    tags: dict[TagId, Tag] = field(default_factory=dict)
    posts: dict[PostId, Post] = field(default_factory=dict)
    post_tags: dict[PostId, list[TagId]] = field(default_factory=dict)

    def snapshot(self) -> "InMemoryStore":
        # Models are frozen, so copying the containers is enough
        return InMemoryStore(
            users=dict(self.users),
            tags=dict(self.tags),
            posts=dict(self.posts),
            post_tags={k: list(v) for k, v in self.post_tags.items()},
        )

    def restore(self, snapshot: "InMemoryStore") -> None:
        self.users = snapshot.users
        self.tags = snapshot.tags
        self.posts = snapshot.posts
        self.post_tags = snapshot.post_tags


class InMemoryTransactionManager(TransactionManager):
    """Restores the store to its prior state when an atomic unit fails."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        snapshot = self.store.snapshot()
        try:
            yield
        except BaseException:
            self.store.restore(snapshot)
            raise


class InMemorySchemaMigrator(SchemaMigrator):
    """Nothing to migrate; always reachable."""

    async def migrate(self) -> None:
        pass

    async def ping(self) -> bool:
        return True
