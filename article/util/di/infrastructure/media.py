"""Media storage infrastructure providers."""

from collections.abc import AsyncIterator

import httpx
from dishka import Scope, provide

from article.adapter.cloudinary import CloudinaryUploader
from article.config import MediaSettings
from article.domain.service import MediaUploader
from article.util.di.base import ProviderBase


class MediaProvider(ProviderBase):
    """Media component base."""

    __mock_component__ = "media"


class ProdMediaProvider(MediaProvider):
    """Production media provider uploading to Cloudinary."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, media_settings: MediaSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide the shared HTTP client, closed with the container."""
        async with httpx.AsyncClient(
            timeout=media_settings.upload_timeout_seconds
        ) as client:
            yield client

    @provide(scope=Scope.APP)
    def get_media_uploader(
        self, media_settings: MediaSettings, client: httpx.AsyncClient
    ) -> MediaUploader:
        """Provide Cloudinary uploader."""
        return CloudinaryUploader(settings=media_settings, client=client)
