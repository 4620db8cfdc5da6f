"""Media upload domain service."""

from abc import ABC, abstractmethod

import logfire

from article.domain.error import ValidationError

from .base import Service


class MediaUploader(ABC):
    """Interface for the external image host."""

    @abstractmethod
    async def upload(self, filename: str, content: bytes, content_type: str) -> str:
        """Store an image and return its public URL.

        Args:
            filename: Original file name
            content: Raw file bytes
            content_type: MIME type of the file

        Returns:
            Hosted HTTPS URL of the image

        Raises:
            InternalError: If the host is not configured, unreachable or
                returns an unusable response
        """
        raise NotImplementedError

    @property
    def is_configured(self) -> bool:
        """Whether uploads can be attempted at all."""
        return True


class MediaService(Service):
    """Domain service for image uploads."""

    def __init__(self, uploader: MediaUploader) -> None:
        """Initialize media service.

        Args:
            uploader: Image host client
        """
        self.uploader = uploader

    async def upload_image(
        self, filename: str | None, content: bytes, content_type: str | None
    ) -> str:
        """Validate an image upload and hand it to the image host.

        Args:
            filename: Original file name, if the client sent one
            content: Raw file bytes
            content_type: Declared MIME type

        Returns:
            Hosted URL of the image

        Raises:
            ValidationError: If the file is empty or not an image
            InternalError: If the upload fails
        """
        with logfire.span("media_service.upload_image", filename=filename):
            if not content:
                raise ValidationError("image file is required", detail="empty file")

            if not content_type or not content_type.startswith("image/"):
                raise ValidationError(
                    "only image files are allowed",
                    detail=f"content type: {content_type}",
                )

            url = await self.uploader.upload(filename or "upload", content, content_type)
            logfire.info("Image uploaded", filename=filename, size=len(content))
            return url
