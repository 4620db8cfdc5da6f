"""In-memory repository implementations for testing."""

from .post import InMemoryPostRepository
from .store import InMemorySchemaMigrator, InMemoryStore, InMemoryTransactionManager
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryPostRepository",
    "InMemorySchemaMigrator",
    "InMemoryStore",
    "InMemoryTagRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
]
