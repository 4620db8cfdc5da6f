"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel

from article.application.usecase.base import BaseUseCase, build_content
from article.domain.model import PostContent
from article.domain.service import PostService
from article.domain.value import UserId

from .common import PostResponse


class CreatePostRequest(BaseModel):
    """Create post request.

    Field rules (lengths, status, URL, tags) are enforced by the domain
    model, so this only carries the raw values.
    """

    author_id: str  # Authenticated caller
    title: str
    content: str
    category: str
    status: str
    featured_image_url: str | None = None
    tags: list[str] = []


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Validate the fields and create the post with its tags.

        Raises:
            ValidationError: If any field violates the post rules
        """
        content = build_content(
            PostContent,
            title=request.title,
            content=request.content,
            category=request.category,
            status=request.status,
            featured_image_url=request.featured_image_url,
            tag_names=request.tags,
        )
        post = await self.post_service.create_post(
            UserId(UUID(request.author_id)), content
        )
        return PostResponse.from_post(post)
