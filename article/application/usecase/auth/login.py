"""Login use case."""

from pydantic import BaseModel

from article.application.usecase.base import BaseUseCase
from article.domain.service import CredentialService


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    token: str


class LoginUseCase(BaseUseCase):
    """Use case for exchanging credentials for a session token."""

    def __init__(self, credential_service: CredentialService) -> None:
        self.credential_service = credential_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a token.

        Raises:
            AuthError: If the email is unknown or the password is wrong
        """
        token = await self.credential_service.login(request.email, request.password)
        return LoginResponse(token=token)
