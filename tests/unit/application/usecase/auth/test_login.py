"""Unit tests for LoginUseCase."""

import pytest

from article.application.usecase.auth.login import LoginRequest, LoginUseCase
from article.application.usecase.auth.register import RegisterRequest, RegisterUseCase
from article.domain.error import AuthError
from article.domain.service import JWTService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def register(env, email: str = "reader@mail.com", password: str = "password123"):
    use_case = await env.get(RegisterUseCase)
    return await use_case.execute(
        RegisterRequest(full_name="Reader One", email=email, password=password)
    )


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_user(self, unit_env):
        # Arrange
        registered = await register(unit_env)
        use_case = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await use_case.execute(
            LoginRequest(email="reader@mail.com", password="password123")
        )

        # Assert
        caller = jwt_service.verify_token(response.token)
        assert str(caller.id) == registered.id
        assert caller.email == "reader@mail.com"
        assert caller.full_name == "Reader One"

    @pytest.mark.asyncio
    async def test_unknown_email_and_wrong_password_look_the_same(self, unit_env):
        """Both failures produce the same error so emails cannot be probed."""
        # Arrange
        await register(unit_env)
        use_case = await unit_env.get(LoginUseCase)

        # Act
        with pytest.raises(AuthError) as unknown:
            await use_case.execute(
                LoginRequest(email="nobody@mail.com", password="password123")
            )
        with pytest.raises(AuthError) as wrong:
            await use_case.execute(
                LoginRequest(email="reader@mail.com", password="wrong-password")
            )

        # Assert
        assert unknown.value.message == wrong.value.message == "invalid credentials"
        assert unknown.value.status_code == wrong.value.status_code == 401
