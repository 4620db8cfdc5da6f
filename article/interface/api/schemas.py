"""Response envelope shared by every API route.

Every body has ``status`` ("success" or "error") and ``message``; payloads
go in ``data``, pagination in ``meta`` and error detail in ``error``.
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class MessageResponse(BaseModel):
    """Envelope without payload."""

    status: Literal["success"] = "success"
    message: str


class DataResponse(BaseModel, Generic[T]):
    """Envelope carrying a single payload."""

    status: Literal["success"] = "success"
    message: str
    data: T


class PageMeta(BaseModel):
    """Pagination metadata."""

    total: int
    limit: int
    offset: int


class PageResponse(BaseModel, Generic[T]):
    """Envelope carrying one page of items."""

    status: Literal["success"] = "success"
    message: str
    data: list[T]
    meta: PageMeta


class ErrorResponse(BaseModel):
    """Envelope for failures."""

    status: Literal["error"] = "error"
    message: str
    error: str | None = None
