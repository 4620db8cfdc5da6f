"""Administrative post listing."""

from pydantic import BaseModel

from article.application.usecase.base import BaseUseCase
from article.domain.service import PostService
from article.domain.value import PostStatus

from .common import PostPageResponse, PostResponse


class ListAdminPostsRequest(BaseModel):
    """Admin listing request."""

    status: PostStatus | None = None
    limit: int | None = None
    offset: int = 0


class ListAdminPostsUseCase(BaseUseCase):
    """Use case for listing every post, trashed and soft-deleted included."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListAdminPostsRequest) -> PostPageResponse:
        posts, total = await self.post_service.list_all_posts(
            status=request.status, limit=request.limit, offset=request.offset
        )
        return PostPageResponse(
            posts=[PostResponse.from_post(post) for post in posts],
            total=total,
            limit=request.limit or self.post_service.pagination.default_limit,
            offset=request.offset,
        )
