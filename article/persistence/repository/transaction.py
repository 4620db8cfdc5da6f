"""SQL transaction manager backed by savepoints."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from article.domain.repository import TransactionManager


class SqlTransactionManager(TransactionManager):
    """Runs each atomic unit in a SAVEPOINT of the request session.

    The surrounding request transaction is committed or rolled back by the
    session provider; a failed unit only rolls back to its savepoint.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
