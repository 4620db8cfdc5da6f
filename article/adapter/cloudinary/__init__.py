"""Cloudinary media adapter."""

from .client import CloudinaryError, CloudinaryUploader, MockMediaUploader, sign_params

__all__ = ["CloudinaryError", "CloudinaryUploader", "MockMediaUploader", "sign_params"]
