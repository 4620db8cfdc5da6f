"""In-memory user repository for testing."""

from typing import Optional

from article.domain.error import ConflictError
from article.domain.model import User
from article.domain.repository import UserRepository
from article.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self.store.users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in self.store.users.values():
            if user.email == email:
                return user
        return None

    async def save(self, user: User) -> User:
        if await self.find_by_email(user.email):
            raise ConflictError("email already exists")
        self.store.users[user.id] = user
        return user
