"""JWT token domain service."""

from uuid import UUID

import logfire

from article.config import AuthSettings
from article.domain.error import AuthError
from article.domain.model.user import User
from article.domain.value import AuthenticatedCaller, UserId
from article.util.jwt import JWTError, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create a session token for the user.

        Args:
            user: Authenticated user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user.id)):
            token = create_token(
                str(user.id), user.email, user.full_name, self.auth_settings
            )
            logfire.info("JWT token created", user_id=str(user.id))
            return token

    def verify_token(self, token: str) -> AuthenticatedCaller:
        """Verify a session token and return the caller it identifies.

        Args:
            token: JWT token string

        Returns:
            Typed caller identity built from the token claims

        Raises:
            AuthError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                caller = AuthenticatedCaller(
                    id=UserId(UUID(payload.user_id)),
                    email=payload.email,
                    full_name=payload.full_name,
                )
            except (JWTError, ValueError) as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise AuthError("invalid or expired token", detail=str(e)) from e

            logfire.info("JWT token verified", user_id=str(caller.id))
            return caller
