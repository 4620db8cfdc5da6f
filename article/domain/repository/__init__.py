"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from article.domain.repository.post import PostRepository
from article.domain.repository.tag import TagRepository
from article.domain.repository.transaction import TransactionManager
from article.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "TagRepository",
    "TransactionManager",
]
