"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from article.application.usecase.base import BaseUseCase
from article.domain.service import PostService
from article.domain.value import PostId

from .common import PostResponse


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostUseCase(BaseUseCase):
    """Use case for fetching a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Fetch a live post by ID.

        Raises:
            NotFoundError: If the post does not exist or was deleted
        """
        post = await self.post_service.get_post(PostId(UUID(request.post_id)))
        return PostResponse.from_post(post)
