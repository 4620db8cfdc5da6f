"""Unit tests for MediaService."""

import pytest

from article.adapter.cloudinary import MockMediaUploader
from article.domain.error import InternalError, ValidationError
from article.domain.service import MediaService

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class TestUploadImage:
    """Tests for upload_image."""

    @pytest.mark.asyncio
    async def test_image_is_forwarded_to_uploader(self):
        # Arrange
        uploader = MockMediaUploader()
        service = MediaService(uploader)

        # Act
        url = await service.upload_image("cover.png", PNG_BYTES, "image/png")

        # Assert
        assert url.startswith("https://")
        assert url.endswith("cover.png")
        assert uploader.uploads == [("cover.png", PNG_BYTES, "image/png")]

    @pytest.mark.asyncio
    async def test_empty_file_is_rejected(self):
        uploader = MockMediaUploader()
        service = MediaService(uploader)

        with pytest.raises(ValidationError, match="image file is required"):
            await service.upload_image("cover.png", b"", "image/png")

        assert uploader.uploads == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content_type", ["text/plain", "application/pdf", None])
    async def test_non_image_is_rejected(self, content_type):
        uploader = MockMediaUploader()
        service = MediaService(uploader)

        with pytest.raises(ValidationError, match="only image files are allowed"):
            await service.upload_image("notes.txt", b"hello", content_type)

        assert uploader.uploads == []

    @pytest.mark.asyncio
    async def test_missing_filename_gets_placeholder(self):
        uploader = MockMediaUploader()
        service = MediaService(uploader)

        await service.upload_image(None, PNG_BYTES, "image/jpeg")

        assert uploader.uploads[0][0] == "upload"

    @pytest.mark.asyncio
    async def test_unconfigured_host_fails(self):
        service = MediaService(MockMediaUploader(configured=False))

        with pytest.raises(InternalError, match="media storage not configured"):
            await service.upload_image("cover.png", PNG_BYTES, "image/png")
