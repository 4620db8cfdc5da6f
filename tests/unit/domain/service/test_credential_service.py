"""Unit tests for CredentialService."""

import pytest
from dishka import AsyncContainer

from article.domain.error import AuthError, ConflictError, ValidationError
from article.domain.repository import UserRepository
from article.domain.service import CredentialService, JWTService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_stores_hash_not_password(self, unit_env: AsyncContainer):
        """Registration should persist a bcrypt hash, never the raw password."""
        # Arrange
        service = await unit_env.get(CredentialService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        user = await service.register("Alice Doe", "alice@mail.com", "password123")

        # Assert
        stored = await user_repo.find_by_email("alice@mail.com")
        assert stored is not None
        assert stored.id == user.id
        assert stored.password_hash != "password123"
        assert stored.password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, unit_env: AsyncContainer):
        """Registering the same email twice should raise ConflictError."""
        # Arrange
        service = await unit_env.get(CredentialService)
        await service.register("Alice Doe", "alice@mail.com", "password123")

        # Act & Assert
        with pytest.raises(ConflictError, match="email already exists"):
            await service.register("Alice Again", "alice@mail.com", "password456")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "full_name,email,password",
        [
            ("Al", "alice@mail.com", "password123"),
            ("Alice Doe", "not-an-email", "password123"),
            ("Alice Doe", "alice@mail.com", "short"),
        ],
    )
    async def test_invalid_fields_are_rejected(
        self, unit_env: AsyncContainer, full_name, email, password
    ):
        """Short names, malformed emails and short passwords should fail."""
        service = await unit_env.get(CredentialService)

        with pytest.raises(ValidationError):
            await service.register(full_name, email, password)

        user_repo = await unit_env.get(UserRepository)
        assert await user_repo.find_by_email(email) is None


class TestLogin:
    """Tests for login."""

    @pytest.mark.asyncio
    async def test_login_returns_token_for_caller(self, unit_env: AsyncContainer):
        """Correct credentials should yield a token identifying the user."""
        # Arrange
        service = await unit_env.get(CredentialService)
        jwt_service = await unit_env.get(JWTService)
        user = await service.register("Alice Doe", "alice@mail.com", "password123")

        # Act
        token = await service.login("alice@mail.com", "password123")

        # Assert
        caller = jwt_service.verify_token(token)
        assert caller.id == user.id
        assert caller.email == "alice@mail.com"
        assert caller.full_name == "Alice Doe"

    @pytest.mark.asyncio
    async def test_unknown_email_and_wrong_password_fail_identically(
        self, unit_env: AsyncContainer
    ):
        """Both failure paths should raise the same error message."""
        # Arrange
        service = await unit_env.get(CredentialService)
        await service.register("Alice Doe", "alice@mail.com", "password123")

        # Act
        with pytest.raises(AuthError) as unknown:
            await service.login("nobody@mail.com", "password123")
        with pytest.raises(AuthError) as wrong:
            await service.login("alice@mail.com", "wrong-password")

        # Assert
        assert unknown.value.message == wrong.value.message == "invalid credentials"
        assert unknown.value.detail == wrong.value.detail

    @pytest.mark.asyncio
    async def test_login_matches_registered_address_form(
        self, unit_env: AsyncContainer
    ):
        """An upper-case domain at registration and login resolves one user."""
        # Arrange
        service = await unit_env.get(CredentialService)
        jwt_service = await unit_env.get(JWTService)
        user = await service.register("Alice Doe", "alice@Mail.COM", "password123")

        # Act
        token = await service.login("alice@Mail.COM", "password123")

        # Assert
        assert user.email == "alice@mail.com"
        assert jwt_service.verify_token(token).id == user.id
