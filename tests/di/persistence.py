"""Mock persistence providers for testing."""

from dishka import Scope, provide

from article.domain.repository import (
    PostRepository,
    TagRepository,
    TransactionManager,
    UserRepository,
)
from article.persistence.database import SchemaMigrator
from article.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemorySchemaMigrator,
    InMemoryStore,
    InMemoryTagRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository,
)
from article.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store lives for the container (one per test), so data survives
    across requests made by the same test client. Repositories are
    REQUEST-scoped views over it.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.APP)
    def get_schema_migrator(self) -> SchemaMigrator:
        return InMemorySchemaMigrator()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, store: InMemoryStore) -> TransactionManager:
        return InMemoryTransactionManager(store)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, store: InMemoryStore) -> TagRepository:
        """Provide in-memory tag repository."""
        return InMemoryTagRepository(store)
