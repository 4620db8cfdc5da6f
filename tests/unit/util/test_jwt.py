"""Unit tests for JWT helpers."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from article.config import AuthSettings
from article.util.jwt import JWTError, create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="unit-test-secret-key-with-enough-length")


class TestCreateToken:
    """Tests for create_token."""

    def test_token_carries_identity_claims(self):
        """Token should carry user_id, email, full_name, iat and exp."""
        # Arrange
        user_id = str(uuid4())

        # Act
        token = create_token(user_id, "a@mail.com", "Alice Doe", SETTINGS)
        payload = verify_token(token, SETTINGS)

        # Assert
        assert payload.user_id == user_id
        assert payload.email == "a@mail.com"
        assert payload.full_name == "Alice Doe"

    def test_expiry_defaults_to_72_hours(self):
        """exp should be iat plus the configured lifetime."""
        # Arrange
        now = datetime.now(timezone.utc).replace(microsecond=0)

        # Act
        token = create_token(str(uuid4()), "a@mail.com", "Alice Doe", SETTINGS, now=now)
        payload = verify_token(token, SETTINGS)

        # Assert
        assert payload.exp - payload.iat == timedelta(hours=72)

    def test_token_is_signed_with_hs256(self):
        """Header should name the configured algorithm."""
        token = create_token(str(uuid4()), "a@mail.com", "Alice Doe", SETTINGS)

        assert jwt.get_unverified_header(token)["alg"] == "HS256"


class TestVerifyToken:
    """Tests for verify_token."""

    def test_expired_token_is_rejected(self):
        """A token past exp should fail."""
        # Arrange
        issued = datetime.now(timezone.utc) - timedelta(hours=73)
        token = create_token(
            str(uuid4()), "a@mail.com", "Alice Doe", SETTINGS, now=issued
        )

        # Act & Assert
        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_wrong_secret_is_rejected(self):
        """A token signed with another key should fail."""
        other = AuthSettings(jwt_secret="another-secret-key-with-enough-length")
        token = create_token(str(uuid4()), "a@mail.com", "Alice Doe", other)

        with pytest.raises(JWTError):
            verify_token(token, SETTINGS)

    def test_other_algorithm_is_rejected(self):
        """A validly signed token using a different algorithm should fail."""
        # Arrange
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {
                "user_id": str(uuid4()),
                "email": "a@mail.com",
                "full_name": "Alice Doe",
                "iat": now,
                "exp": now + timedelta(hours=1),
            },
            SETTINGS.jwt_secret,
            algorithm="HS512",
        )

        # Act & Assert
        with pytest.raises(JWTError):
            verify_token(token, SETTINGS)

    def test_garbage_is_rejected(self):
        with pytest.raises(JWTError):
            verify_token("not-a-token", SETTINGS)
