"""PostgreSQL repository implementations."""

from article.persistence.repository.post import PostgresPostRepository
from article.persistence.repository.tag import PostgresTagRepository
from article.persistence.repository.transaction import SqlTransactionManager
from article.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresTagRepository",
    "SqlTransactionManager",
]
