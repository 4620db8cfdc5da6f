"""Upload image use case."""

import logfire
from pydantic import BaseModel

from article.application.usecase.base import BaseUseCase
from article.domain.service import MediaService


class UploadImageRequest(BaseModel):
    """Upload image request."""

    filename: str | None
    content: bytes
    content_type: str | None
    user_id: str  # Uploading caller


class UploadImageResponse(BaseModel):
    """Upload image response."""

    url: str


class UploadImageUseCase(BaseUseCase):
    """Use case for storing an image on the media host."""

    def __init__(self, media_service: MediaService) -> None:
        self.media_service = media_service

    async def execute(self, request: UploadImageRequest) -> UploadImageResponse:
        """Upload the image and return its hosted URL.

        Raises:
            ValidationError: If the file is empty or not an image
            InternalError: If the media host is unavailable or rejects the file
        """
        with logfire.span("upload_image.execute", user_id=request.user_id):
            url = await self.media_service.upload_image(
                filename=request.filename,
                content=request.content,
                content_type=request.content_type,
            )
        return UploadImageResponse(url=url)
