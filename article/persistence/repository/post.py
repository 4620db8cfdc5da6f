"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import Select, delete, desc, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from article.domain.error import ConflictError
from article.domain.model import Post, Tag
from article.domain.repository.post import PostRepository
from article.domain.value import PostId, PostStatus, TagId, UserId
from article.persistence.mappers import (
    post_to_dict,
    row_to_author,
    row_to_post,
    row_to_tag,
)
from article.persistence.tables import (
    post_tags_table,
    posts_table,
    tags_table,
    users_table,
)


def _filtered(
    stmt: Select,
    status: Optional[PostStatus],
    author_id: Optional[UserId],
    include_deleted: bool,
) -> Select:
    if status is not None:
        stmt = stmt.where(posts_table.c.status == status.value)
    if author_id is not None:
        stmt = stmt.where(posts_table.c.author_id == author_id)
    if not include_deleted:
        stmt = stmt.where(posts_table.c.deleted_at.is_(None))
    return stmt


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_with_author(self) -> Select:
        """Select post columns joined with the author summary."""
        return select(
            posts_table,
            users_table.c.full_name.label("author_full_name"),
            users_table.c.email.label("author_email"),
            users_table.c.created_at.label("author_created_at"),
        ).select_from(
            posts_table.join(users_table, posts_table.c.author_id == users_table.c.id)
        )

    async def _fetch_tags_for_posts(
        self, post_ids: list[PostId]
    ) -> dict[PostId, list[Tag]]:
        """Fetch tags for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> tags ordered by name
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, tags_table)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)

        post_tag_map: dict[PostId, list[Tag]] = defaultdict(list)
        for row in result.mappings():
            post_tag_map[row["post_id"]].append(row_to_tag(dict(row)))

        return post_tag_map

    async def _hydrate(self, rows: list[dict]) -> List[Post]:
        post_tag_map = await self._fetch_tags_for_posts([row["id"] for row in rows])
        return [
            row_to_post(
                row,
                tags=post_tag_map.get(row["id"], []),
                author=row_to_author(row),
            )
            for row in rows
        ]

    async def find_by_id(
        self, post_id: PostId, include_deleted: bool = False
    ) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = self._select_with_author().where(posts_table.c.id == post_id)
            if not include_deleted:
                stmt = stmt.where(posts_table.c.deleted_at.is_(None))

            result = await self.session.execute(stmt)
            row = result.mappings().first()
            if not row:
                return None

            posts = await self._hydrate([dict(row)])
            return posts[0]

    async def find_all(
        self,
        status: Optional[PostStatus] = None,
        author_id: Optional[UserId] = None,
        include_deleted: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            status=status.value if status else None,
            author_id=str(author_id) if author_id else None,
            include_deleted=include_deleted,
            limit=limit,
            offset=offset,
        ):
            stmt = _filtered(
                self._select_with_author(), status, author_id, include_deleted
            )
            stmt = (
                stmt.order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            rows = [dict(row) for row in result.mappings()]

            posts = await self._hydrate(rows)
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(
        self,
        status: Optional[PostStatus] = None,
        author_id: Optional[UserId] = None,
        include_deleted: bool = False,
    ) -> int:
        """Count posts matching the filters."""
        stmt = _filtered(
            select(func.count()).select_from(posts_table),
            status,
            author_id,
            include_deleted,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> None:
        """Insert the post, or update its columns if it already exists."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            values = post_to_dict(post)
            exists = await self.session.execute(
                select(posts_table.c.id).where(posts_table.c.id == post.id)
            )

            try:
                if exists.first():
                    await self.session.execute(
                        update(posts_table)
                        .where(posts_table.c.id == post.id)
                        .values(**values)
                    )
                else:
                    await self.session.execute(insert(posts_table).values(**values))
            except IntegrityError as e:
                logfire.warn("Post write violated a constraint", error=str(e.orig))
                raise ConflictError(
                    "post violates a constraint", detail=str(e.orig)
                ) from e

    async def replace_tags(self, post_id: PostId, tag_ids: List[TagId]) -> None:
        """Replace the post's tag set."""
        with logfire.span(
            "post_repository.replace_tags", post_id=str(post_id), count=len(tag_ids)
        ):
            try:
                await self.session.execute(
                    delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
                )
                unique_ids = list(dict.fromkeys(tag_ids))
                if unique_ids:
                    await self.session.execute(
                        insert(post_tags_table),
                        [{"post_id": post_id, "tag_id": tag_id} for tag_id in unique_ids],
                    )
            except IntegrityError as e:
                logfire.warn("Tag association violated a constraint", error=str(e.orig))
                raise ConflictError(
                    "tag association violates a constraint", detail=str(e.orig)
                ) from e

    async def soft_delete(self, post_id: PostId, deleted_at: datetime) -> None:
        """Soft delete a post."""
        await self.session.execute(
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(deleted_at=deleted_at)
        )
