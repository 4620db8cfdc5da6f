"""Test configuration and fixtures."""

import os

# Must be set before any Settings() is built
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE__URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

from datetime import datetime, timedelta, timezone  # noqa: E402
from uuid import uuid4  # noqa: E402

import logfire  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from article.domain.model import Post, User  # noqa: E402
from article.domain.value import PostId, PostStatus, UserId  # noqa: E402
from article.interface.api.app import create_app  # noqa: E402
from article.util.password import hash_password  # noqa: E402
from tests.di import build_test_container  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)

VALID_TITLE = "A title that is long enough"
VALID_CONTENT = "x" * 200


def make_user(
    email: str = "author@mail.com",
    full_name: str = "Test Author",
    password: str = "password123",
) -> User:
    """Build a user with a real (cheap) bcrypt hash."""
    return User(
        id=UserId(uuid4()),
        full_name=full_name,
        email=email,
        password_hash=hash_password(password, rounds=4),
    )


def make_post(
    author_id: UserId,
    title: str = VALID_TITLE,
    status: PostStatus = PostStatus.PUBLISH,
    created_at: datetime | None = None,
) -> Post:
    """Build a post that passes every field rule."""
    created_at = created_at or datetime.now(timezone.utc)
    return Post(
        id=PostId(uuid4()),
        title=title,
        content=VALID_CONTENT,
        category="engineering",
        status=status,
        author_id=author_id,
        created_at=created_at,
        updated_at=created_at,
    )


def seconds_ago(n: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(seconds=n)


@pytest.fixture
def client():
    """Test client for an app wired with in-memory persistence and mock media."""
    app = create_app(container=build_test_container())
    with TestClient(app) as test_client:
        yield test_client


def post_body(**overrides) -> dict:
    """Request body for create/update with valid defaults."""
    body = {
        "title": VALID_TITLE,
        "content": VALID_CONTENT,
        "category": "engineering",
        "status": "publish",
        "tags": ["go", "backend"],
    }
    body.update(overrides)
    return body


def register_and_login(
    client: TestClient,
    email: str = "author@mail.com",
    password: str = "password123",
    full_name: str = "Test Author",
) -> dict:
    """Register a user through the API and return auth headers."""
    response = client.post(
        "/api/register",
        json={"full_name": full_name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    response = client.post("/api/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['data']['token']}"}
