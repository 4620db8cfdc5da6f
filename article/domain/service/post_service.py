"""Post domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from article.config import PaginationSettings
from article.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from article.domain.model.post import Post, PostContent
from article.domain.repository import PostRepository, TransactionManager
from article.domain.value import PostId, PostStatus, UserId

from .base import Service
from .tag_service import TagService


class PostService(Service):
    """Domain service for post operations.

    Owns the post/tag consistency rules: tags are resolved, associations
    replaced and fields written inside a single atomic unit.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        tag_service: TagService,
        transactions: TransactionManager,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            tag_service: Tag resolver
            transactions: Transaction manager
            pagination: Pagination limits
        """
        self.post_repository = post_repository
        self.tag_service = tag_service
        self.transactions = transactions
        self.pagination = pagination

    async def create_post(self, author_id: UserId, content: PostContent) -> Post:
        """Create a post with its tags.

        Args:
            author_id: Author of the new post
            content: Validated post fields

        Returns:
            The stored post, joined with author and tags
        """
        with logfire.span(
            "post_service.create_post", author_id=str(author_id), title=content.title
        ):
            now = datetime.now(timezone.utc)
            post = Post(
                id=PostId(uuid4()),
                title=content.title,
                content=content.content,
                category=content.category,
                status=content.status,
                featured_image_url=content.featured_image_url,
                author_id=author_id,
                created_at=now,
                updated_at=now,
            )

            async with self.transactions.atomic():
                resolution = await self.tag_service.resolve_or_create(
                    content.tag_names
                )
                await self.post_repository.save(post)
                await self.post_repository.replace_tags(
                    post.id, [tag.id for tag in resolution.tags]
                )

            logfire.info(
                "Post created",
                post_id=str(post.id),
                tags=len(resolution.tags),
                failed_tags=len(resolution.failed),
            )
            return await self._reload(post.id)

    async def get_post(self, post_id: PostId) -> Post:
        """Get a live (not soft-deleted) post by ID.

        Raises:
            NotFoundError: If the post does not exist or was deleted
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("post", str(post_id))
            return post

    async def list_posts(
        self,
        status: PostStatus | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Post], int]:
        """List live posts, newest first.

        Args:
            status: Optional status filter
            limit: Page size (defaults to the configured default)
            offset: Number of posts to skip

        Returns:
            Tuple of (page of posts, total matching posts)
        """
        limit = self._check_page(limit, offset)
        with logfire.span(
            "post_service.list_posts",
            status=status.value if status else None,
            limit=limit,
            offset=offset,
        ):
            total = await self.post_repository.count(status=status)
            posts = await self.post_repository.find_all(
                status=status, limit=limit, offset=offset
            )
            logfire.info("Posts listed", count=len(posts), total=total)
            return posts, total

    async def list_posts_by_author(
        self, author_id: UserId, limit: int | None = None, offset: int = 0
    ) -> tuple[list[Post], int]:
        """List the author's live posts in any status, newest first."""
        limit = self._check_page(limit, offset)
        with logfire.span(
            "post_service.list_posts_by_author",
            author_id=str(author_id),
            limit=limit,
            offset=offset,
        ):
            total = await self.post_repository.count(author_id=author_id)
            posts = await self.post_repository.find_all(
                author_id=author_id, limit=limit, offset=offset
            )
            return posts, total

    async def list_all_posts(
        self,
        status: PostStatus | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> tuple[list[Post], int]:
        """List every post, including trashed and soft-deleted ones."""
        limit = self._check_page(limit, offset)
        with logfire.span(
            "post_service.list_all_posts",
            status=status.value if status else None,
            limit=limit,
            offset=offset,
        ):
            total = await self.post_repository.count(
                status=status, include_deleted=True
            )
            posts = await self.post_repository.find_all(
                status=status, include_deleted=True, limit=limit, offset=offset
            )
            return posts, total

    async def update_post(
        self, post_id: PostId, caller_id: UserId, content: PostContent
    ) -> Post:
        """Overwrite a post's fields and tags.

        Tag resolution, association replacement and the field write happen
        in one atomic unit; any failure leaves the post as it was.

        Args:
            post_id: Post to update
            caller_id: Authenticated caller
            content: Validated new field values

        Returns:
            The updated post, joined with author and tags

        Raises:
            NotFoundError: If the post does not exist or was deleted
            ForbiddenError: If the caller is not the author
            ConflictError: If a constraint was violated while writing
            InternalError: If the write failed for any other reason
        """
        with logfire.span(
            "post_service.update_post", post_id=str(post_id), caller_id=str(caller_id)
        ):
            post = await self.get_owned_post(post_id, caller_id)

            try:
                async with self.transactions.atomic():
                    resolution = await self.tag_service.resolve_or_create(
                        content.tag_names
                    )
                    await self.post_repository.replace_tags(
                        post.id, [tag.id for tag in resolution.tags]
                    )
                    await self.post_repository.save(
                        post.apply(content, datetime.now(timezone.utc))
                    )
            except ConflictError as e:
                logfire.error(
                    "Post update rolled back", post_id=str(post_id), error=e.message
                )
                raise ConflictError(
                    "failed to update tags, constraint violation", detail=e.detail
                ) from e
            except DomainError:
                raise
            except Exception as e:
                logfire.error(
                    "Post update rolled back", post_id=str(post_id), error=str(e)
                )
                raise InternalError("failed to update post", detail=str(e)) from e

            logfire.info(
                "Post updated",
                post_id=str(post_id),
                tags=len(resolution.tags),
                failed_tags=len(resolution.failed),
            )
            return await self._reload(post.id)

    async def delete_post(self, post_id: PostId, caller_id: UserId) -> None:
        """Soft-delete a post.

        Raises:
            NotFoundError: If the post does not exist or was already deleted
            ForbiddenError: If the caller is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), caller_id=str(caller_id)
        ):
            post = await self.get_owned_post(post_id, caller_id)
            await self.post_repository.soft_delete(
                post.id, datetime.now(timezone.utc)
            )
            logfire.info("Post deleted", post_id=str(post_id))

    async def get_owned_post(self, post_id: PostId, caller_id: UserId) -> Post:
        """Get a live post the caller is allowed to modify.

        Raises:
            NotFoundError: If the post does not exist or was deleted
            ForbiddenError: If the caller is not the author
        """
        post = await self.get_post(post_id)
        if post.author_id != caller_id:
            logfire.warn(
                "Post modification by non-author",
                post_id=str(post_id),
                caller_id=str(caller_id),
            )
            raise ForbiddenError("post", str(post_id), str(caller_id))
        return post

    async def _reload(self, post_id: PostId) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise InternalError("post vanished after write", detail=str(post_id))
        return post

    def _check_page(self, limit: int | None, offset: int) -> int:
        """Apply the default page size and reject out-of-range values."""
        if limit is None:
            limit = self.pagination.default_limit
        if limit < 1 or limit > self.pagination.max_limit:
            raise ValidationError(
                "invalid pagination",
                detail=f"limit must be between 1 and {self.pagination.max_limit}",
            )
        if offset < 0:
            raise ValidationError(
                "invalid pagination", detail="offset must not be negative"
            )
        return limit
