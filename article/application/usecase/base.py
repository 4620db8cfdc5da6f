"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from article.domain.error import ValidationError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def build_content(factory: Any, **fields: Any) -> Any:
    """Build a domain model, reporting field violations as ValidationError."""
    try:
        return factory(**fields)
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e
