"""List posts use case."""

import logfire
from pydantic import BaseModel

from article.application.usecase.base import BaseUseCase
from article.domain.service import PostService
from article.domain.value import PostStatus

from .common import PostPageResponse, PostResponse


class ListPostsRequest(BaseModel):
    """List posts request.

    ``limit`` falls back to the configured default page size; range checks
    happen in the post service.
    """

    status: PostStatus | None = None
    limit: int | None = None
    offset: int = 0


class ListPostsUseCase(BaseUseCase):
    """Use case for the public post listing."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> PostPageResponse:
        """List live posts, newest first.

        Raises:
            ValidationError: If limit or offset is out of range
        """
        with logfire.span(
            "list_posts.execute",
            status=request.status.value if request.status else None,
            limit=request.limit,
            offset=request.offset,
        ):
            posts, total = await self.post_service.list_posts(
                status=request.status, limit=request.limit, offset=request.offset
            )
            return PostPageResponse(
                posts=[PostResponse.from_post(post) for post in posts],
                total=total,
                limit=request.limit or self.post_service.pagination.default_limit,
                offset=request.offset,
            )
