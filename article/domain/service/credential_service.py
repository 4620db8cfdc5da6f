"""Credential domain service (registration and login)."""

from functools import lru_cache
from uuid import uuid4

import logfire
from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from article.config import AuthSettings
from article.domain.error import AuthError, ConflictError, ValidationError
from article.domain.model.user import User
from article.domain.repository import TransactionManager, UserRepository
from article.domain.value import UserId
from article.util.password import hash_password, verify_password

from .base import Service
from .jwt_service import JWTService

MIN_PASSWORD_LENGTH = 8

_email_adapter = TypeAdapter(EmailStr)


def normalize_email(email: str) -> str:
    """Return the stored form of an email address (domain lower-cased).

    Raises:
        pydantic.ValidationError: If the address is malformed
    """
    return _email_adapter.validate_python(email)


@lru_cache(maxsize=4)
def _dummy_hash(rounds: int) -> str:
    """Hash compared against when the email is unknown, so both login paths cost the same."""
    return hash_password("dummy-password-for-timing", rounds=rounds)


class CredentialService(Service):
    """Domain service for user credentials."""

    def __init__(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
        transactions: TransactionManager,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize credential service.

        Args:
            user_repository: User repository
            jwt_service: JWT token service
            transactions: Transaction manager for atomic writes
            auth_settings: Authentication settings
        """
        self.user_repository = user_repository
        self.jwt_service = jwt_service
        self.transactions = transactions
        self.auth_settings = auth_settings

    async def register(self, full_name: str, email: str, password: str) -> User:
        """Register a new user.

        Args:
            full_name: Display name (3..100 characters)
            email: Email address (must be unique)
            password: Raw password (at least 8 characters)

        Returns:
            The stored user

        Raises:
            ValidationError: If any field is malformed
            ConflictError: If the email is already registered
        """
        with logfire.span("credential_service.register", email=email):
            try:
                email = normalize_email(email)
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e) from e

            if len(password) < MIN_PASSWORD_LENGTH:
                raise ValidationError(
                    "validation failed",
                    detail=f"password: must be at least {MIN_PASSWORD_LENGTH} characters",
                )

            try:
                user = User(
                    id=UserId(uuid4()),
                    full_name=full_name,
                    email=email,
                    password_hash=hash_password(
                        password, rounds=self.auth_settings.bcrypt_rounds
                    ),
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e) from e

            if await self.user_repository.find_by_email(user.email):
                logfire.warn("Registration with existing email", email=user.email)
                raise ConflictError("email already exists")

            # Unique constraint still guards against a concurrent registration
            async with self.transactions.atomic():
                saved = await self.user_repository.save(user)

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def login(self, email: str, password: str) -> str:
        """Check credentials and issue a session token.

        Unknown email and wrong password fail identically.

        Args:
            email: Email address
            password: Raw password

        Returns:
            Signed session token

        Raises:
            AuthError: If the credentials do not match a user
        """
        with logfire.span("credential_service.login", email=email):
            user = None
            try:
                email = normalize_email(email)
            except PydanticValidationError:
                logfire.warn("Login with malformed email")
            else:
                user = await self.user_repository.find_by_email(email)

            if user is None:
                verify_password(password, _dummy_hash(self.auth_settings.bcrypt_rounds))
                logfire.warn("Login for unknown email", email=email)
                raise AuthError("invalid credentials")

            if not verify_password(password, user.password_hash):
                logfire.warn("Login with wrong password", user_id=str(user.id))
                raise AuthError("invalid credentials")

            logfire.info("User logged in", user_id=str(user.id))
            return self.jwt_service.create_token(user)
