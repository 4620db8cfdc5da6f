"""Bearer token gate for protected routes."""

from typing import Annotated

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Depends, Header

from article.domain.error import AuthError
from article.domain.service import JWTService
from article.domain.value import AuthenticatedCaller


@inject
async def require_caller(
    jwt_service: FromDishka[JWTService],
    authorization: Annotated[str | None, Header()] = None,
) -> AuthenticatedCaller:
    """Resolve the caller from an ``Authorization: Bearer <token>`` header.

    Raises:
        AuthError: If the header is missing, malformed, or carries an
            invalid or expired token
    """
    if not authorization:
        raise AuthError("missing authorization header")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise AuthError("invalid format")

    return jwt_service.verify_token(parts[1])


CurrentCaller = Annotated[AuthenticatedCaller, Depends(require_caller)]
