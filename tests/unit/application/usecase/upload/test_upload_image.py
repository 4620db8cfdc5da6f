"""Unit tests for UploadImageUseCase."""

from uuid import uuid4

import pytest

from article.application.usecase.upload import UploadImageRequest, UploadImageUseCase
from article.domain.error import ValidationError
from article.domain.service import MediaUploader
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUploadImageUseCase:
    """Tests for UploadImageUseCase."""

    @pytest.mark.asyncio
    async def test_upload_returns_hosted_url(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UploadImageUseCase)
        uploader = await unit_env.get(MediaUploader)

        # Act
        response = await use_case.execute(
            UploadImageRequest(
                filename="cover.jpg",
                content=b"\xff\xd8\xff\xe0",
                content_type="image/jpeg",
                user_id=str(uuid4()),
            )
        )

        # Assert
        assert response.url.endswith("/cover.jpg")
        assert len(uploader.uploads) == 1

    @pytest.mark.asyncio
    async def test_non_image_never_reaches_host(self, unit_env):
        use_case = await unit_env.get(UploadImageUseCase)
        uploader = await unit_env.get(MediaUploader)

        with pytest.raises(ValidationError):
            await use_case.execute(
                UploadImageRequest(
                    filename="notes.txt",
                    content=b"hello",
                    content_type="text/plain",
                    user_id=str(uuid4()),
                )
            )

        assert uploader.uploads == []
