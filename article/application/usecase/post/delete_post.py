"""Delete post use case."""

from uuid import UUID

from pydantic import BaseModel

from article.application.usecase.base import BaseUseCase
from article.domain.service import PostService
from article.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Current user ID (must be author)


class DeletePostUseCase(BaseUseCase):
    """Use case for soft-deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Soft-delete the post.

        Raises:
            NotFoundError: If the post does not exist or was already deleted
            ForbiddenError: If the caller is not the author
        """
        await self.post_service.delete_post(
            PostId(UUID(request.post_id)), UserId(UUID(request.user_id))
        )
