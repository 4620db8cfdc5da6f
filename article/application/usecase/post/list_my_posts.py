"""List the caller's own posts."""

from uuid import UUID

from pydantic import BaseModel

from article.application.usecase.base import BaseUseCase
from article.domain.service import PostService
from article.domain.value import UserId

from .common import PostPageResponse, PostResponse


class ListMyPostsRequest(BaseModel):
    """List my posts request."""

    user_id: str  # Authenticated caller
    limit: int | None = None
    offset: int = 0


class ListMyPostsUseCase(BaseUseCase):
    """Use case for listing the caller's posts in every status."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListMyPostsRequest) -> PostPageResponse:
        posts, total = await self.post_service.list_posts_by_author(
            UserId(UUID(request.user_id)), limit=request.limit, offset=request.offset
        )
        return PostPageResponse(
            posts=[PostResponse.from_post(post) for post in posts],
            total=total,
            limit=request.limit or self.post_service.pagination.default_limit,
            offset=request.offset,
        )
