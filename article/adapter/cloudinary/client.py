"""Cloudinary image upload client.

Uses Cloudinary's signed upload API directly over httpx:
https://cloudinary.com/documentation/upload_images#uploading_with_a_direct_call_to_the_rest_api
"""

import hashlib
import time

import httpx
import logfire

from article.config import MediaSettings
from article.domain.error import InternalError
from article.domain.service.media_service import MediaUploader


class CloudinaryError(InternalError):
    """Image host rejected the upload or could not be reached."""

    pass


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """Compute a Cloudinary request signature.

    Parameters are sorted by name, joined as ``k=v`` pairs with ``&``, the
    API secret is appended and the result is SHA-1 hashed.

    Args:
        params: Parameters to sign (excluding file, api_key and signature)
        api_secret: Cloudinary API secret

    Returns:
        Hex digest signature
    """
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryUploader(MediaUploader):
    """Uploads images to Cloudinary with signed requests."""

    def __init__(self, settings: MediaSettings, client: httpx.AsyncClient) -> None:
        """Initialize uploader.

        Args:
            settings: Media settings with credentials and folder
            client: Shared HTTP client
        """
        self.settings = settings
        self.client = client

    @property
    def is_configured(self) -> bool:
        return self.settings.is_configured

    @property
    def upload_url(self) -> str:
        return f"{self.settings.api_base_url}/{self.settings.cloud_name}/image/upload"

    async def upload(self, filename: str, content: bytes, content_type: str) -> str:
        """Upload an image and return its secure URL.

        Raises:
            CloudinaryError: If credentials are missing, the request fails or
                times out, or the response has no ``secure_url``
        """
        if not self.is_configured:
            logfire.error("Upload attempted without media credentials")
            raise CloudinaryError("media storage not configured")

        params = {
            "folder": self.settings.folder,
            "timestamp": str(int(time.time())),
        }
        data = {
            **params,
            "api_key": self.settings.api_key,
            "signature": sign_params(params, self.settings.api_secret),
        }

        with logfire.span(
            "cloudinary.upload", filename=filename, folder=self.settings.folder
        ):
            try:
                response = await self.client.post(
                    self.upload_url,
                    data=data,
                    files={"file": (filename, content, content_type)},
                    timeout=self.settings.upload_timeout_seconds,
                )
            except httpx.TimeoutException as e:
                logfire.error("Cloudinary upload timed out", error=str(e))
                raise CloudinaryError("failed to upload image", detail="timeout") from e
            except httpx.HTTPError as e:
                logfire.error("Cloudinary upload HTTP error", error=str(e))
                raise CloudinaryError("failed to upload image", detail=str(e)) from e

            if response.status_code != 200:
                logfire.error(
                    "Cloudinary upload rejected",
                    status_code=response.status_code,
                    error=response.text,
                )
                raise CloudinaryError(
                    "failed to upload image",
                    detail=f"upstream status {response.status_code}",
                )

            try:
                secure_url = response.json().get("secure_url")
            except ValueError:
                secure_url = None

            if not secure_url:
                logfire.error("Cloudinary response missing secure_url")
                raise CloudinaryError(
                    "failed to upload image", detail="response missing secure_url"
                )

            logfire.info("Image uploaded to Cloudinary", url=secure_url)
            return secure_url


class MockMediaUploader(MediaUploader):
    """Mock uploader for testing.

    Records uploads and returns deterministic URLs without network calls.
    """

    def __init__(self, configured: bool = True) -> None:
        self.configured = configured
        self.uploads: list[tuple[str, bytes, str]] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def upload(self, filename: str, content: bytes, content_type: str) -> str:
        if not self.configured:
            raise CloudinaryError("media storage not configured")
        self.uploads.append((filename, content, content_type))
        return f"https://res.cloudinary.com/mock/image/upload/article-project/{filename}"
