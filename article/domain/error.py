"""Domain layer errors.

Every error the API can surface belongs to this closed taxonomy. Each class
carries the HTTP status it maps to so the interface layer can translate
them in one place.
"""

from pydantic import ValidationError as PydanticValidationError


class DomainError(Exception):
    """Base domain error."""

    status_code: int = 500

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationError(DomainError):
    """Malformed or out-of-range input."""

    status_code = 400

    @classmethod
    def from_pydantic(
        cls, exc: PydanticValidationError, message: str = "validation failed"
    ) -> "ValidationError":
        """Build a validation error from a pydantic validation failure."""
        problems = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            problems.append(f"{field}: {error['msg']}" if field else error["msg"])
        return cls(message, detail="; ".join(problems))


class AuthError(DomainError):
    """Missing, invalid or expired credentials."""

    status_code = 401


class ForbiddenError(DomainError):
    """Authenticated, but not allowed to touch this resource."""

    status_code = 403

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"you are not authorized to modify this {resource}",
            detail=f"user {user_id} is not the author of {resource} {resource_id}",
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found", detail=f"{resource}: {identifier}")


class ConflictError(DomainError):
    """Uniqueness or other constraint violation."""

    status_code = 409


class InternalError(DomainError):
    """Unexpected store or upstream failure."""

    status_code = 500
