"""PostgreSQL implementation of Tag repository."""

from typing import Optional

import logfire
from sqlalchemy import Select, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from article.domain.error import ConflictError, InternalError
from article.domain.model.tag import Tag
from article.domain.repository.tag import TagRepository
from article.domain.value import TagId, TagName
from article.persistence.mappers import row_to_tag, tag_to_dict
from article.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository.

    Driver failures surface as domain errors so tag resolution can skip
    the affected name instead of failing the whole request.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag; a taken name raises ConflictError."""
        try:
            await self.session.execute(insert(tags_table).values(**tag_to_dict(tag)))
        except IntegrityError as e:
            raise ConflictError(
                f"tag {tag.name.root!r} already exists", detail=str(e.orig)
            ) from e
        except SQLAlchemyError as e:
            logfire.error("Tag insert failed", tag_name=tag.name.root, error=str(e))
            raise InternalError("tag write failed", detail=str(e)) from e
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        return await self._find_one(select(tags_table).where(tags_table.c.id == tag_id))

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        return await self._find_one(
            select(tags_table).where(tags_table.c.name == name.root)
        )

    async def _find_one(self, stmt: Select) -> Optional[Tag]:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error("Tag lookup failed", error=str(e))
            raise InternalError("tag lookup failed", detail=str(e)) from e
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None
