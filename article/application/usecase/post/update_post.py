"""Update post use case."""

from uuid import UUID

from pydantic import BaseModel

from article.application.usecase.base import BaseUseCase, build_content
from article.domain.model import PostContent
from article.domain.service import PostService
from article.domain.value import PostId, UserId

from .common import PostResponse


class UpdatePostRequest(BaseModel):
    """Update post request (full replacement of the editable fields)."""

    post_id: str
    user_id: str  # Current user ID (must be author)
    title: str
    content: str
    category: str
    status: str
    featured_image_url: str | None = None
    tags: list[str] = []


class UpdatePostUseCase(BaseUseCase):
    """Use case for updating a post's fields and tags."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostResponse:
        """Execute update post flow.

        Args:
            request: Post ID, caller and new field values

        Returns:
            Updated post details

        Raises:
            NotFoundError: If the post does not exist
            ForbiddenError: If the caller is not the author
            ValidationError: If any field violates the post rules
            ConflictError: If the tag update violated a constraint
        """
        post_id = PostId(UUID(request.post_id))
        caller_id = UserId(UUID(request.user_id))

        # Existence and ownership are reported before field problems
        await self.post_service.get_owned_post(post_id, caller_id)

        content = build_content(
            PostContent,
            title=request.title,
            content=request.content,
            category=request.category,
            status=request.status,
            featured_image_url=request.featured_image_url,
            tag_names=request.tags,
        )
        post = await self.post_service.update_post(post_id, caller_id, content)
        return PostResponse.from_post(post)
