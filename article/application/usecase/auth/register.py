"""Register use case."""

from datetime import datetime

from pydantic import BaseModel

from article.application.usecase.base import BaseUseCase
from article.domain.service import CredentialService


class RegisterRequest(BaseModel):
    """Register request."""

    full_name: str
    email: str
    password: str


class RegisterResponse(BaseModel):
    """Registered user (never includes the password hash)."""

    id: str
    full_name: str
    email: str
    created_at: datetime


class RegisterUseCase(BaseUseCase):
    """Use case for creating a user account."""

    def __init__(self, credential_service: CredentialService) -> None:
        """Initialize register use case.

        Args:
            credential_service: Credential domain service
        """
        self.credential_service = credential_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Register a new user.

        Raises:
            ValidationError: If a field is malformed
            ConflictError: If the email is already registered
        """
        user = await self.credential_service.register(
            full_name=request.full_name,
            email=request.email,
            password=request.password,
        )
        return RegisterResponse(
            id=str(user.id),
            full_name=user.full_name,
            email=user.email,
            created_at=user.created_at,
        )
