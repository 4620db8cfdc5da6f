"""PostgreSQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from article.domain.error import ConflictError
from article.domain.model import User
from article.domain.repository import UserRepository
from article.domain.value import UserId
from article.persistence.mappers import row_to_user, user_to_dict
from article.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        with logfire.span("user_repository.save", user_id=str(user.id)):
            try:
                await self.session.execute(
                    insert(users_table).values(**user_to_dict(user))
                )
            except IntegrityError as e:
                logfire.warn("User insert violated a constraint", error=str(e.orig))
                raise ConflictError("email already exists", detail=str(e.orig)) from e
            return user
