"""Domain services."""

from .base import Service
from .credential_service import CredentialService
from .jwt_service import JWTService
from .media_service import MediaService, MediaUploader
from .post_service import PostService
from .tag_service import TagResolution, TagService

__all__ = [
    "CredentialService",
    "JWTService",
    "MediaService",
    "MediaUploader",
    "PostService",
    "Service",
    "TagResolution",
    "TagService",
]
