"""Unit tests for CreatePostUseCase."""

import pytest

from article.application.usecase.post.create_post import (
    CreatePostRequest,
    CreatePostUseCase,
)
from article.domain.error import ValidationError
from article.domain.repository import PostRepository, UserRepository
from article.domain.value import PostStatus
from tests.conftest import VALID_CONTENT, VALID_TITLE, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def create_request(author_id: str, **overrides) -> CreatePostRequest:
    fields = {
        "author_id": author_id,
        "title": VALID_TITLE,
        "content": VALID_CONTENT,
        "category": "engineering",
        "status": "publish",
        "tags": ["go", "backend"],
    }
    fields.update(overrides)
    return CreatePostRequest(**fields)


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_returns_post_with_author_and_tags(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        use_case = await unit_env.get(CreatePostUseCase)

        # Act
        response = await use_case.execute(create_request(str(author.id)))

        # Assert
        assert response.author_id == str(author.id)
        assert response.author.full_name == author.full_name
        assert response.status == PostStatus.PUBLISH
        assert sorted(tag.name for tag in response.tags) == ["backend", "go"]
        assert response.featured_image_url is None
        assert response.deleted_at is None

    @pytest.mark.asyncio
    async def test_duplicate_tags_collapse(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        use_case = await unit_env.get(CreatePostUseCase)

        response = await use_case.execute(
            create_request(str(author.id), tags=["go", "Go", " go "])
        )

        assert [tag.name for tag in response.tags] == ["go"]

    @pytest.mark.asyncio
    async def test_image_url_is_kept_as_given(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        use_case = await unit_env.get(CreatePostUseCase)
        url = "https://res.cloudinary.com/demo/image/upload/cover.png"

        response = await use_case.execute(
            create_request(str(author.id), featured_image_url=url)
        )

        assert response.featured_image_url == url

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"title": "x" * 19},
            {"title": "x" * 201},
            {"content": "x" * 199},
            {"category": "ab"},
            {"category": "x" * 101},
            {"status": "published"},
            {"featured_image_url": "not a url"},
            {"tags": [""]},
        ],
    )
    async def test_field_rules_are_enforced(self, unit_env, overrides):
        """Each rule violation is a validation error and nothing is stored."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.save(make_user())
        use_case = await unit_env.get(CreatePostUseCase)

        # Act & Assert
        with pytest.raises(ValidationError, match="validation failed"):
            await use_case.execute(create_request(str(author.id), **overrides))

        assert await post_repo.count() == 0

    @pytest.mark.asyncio
    async def test_boundary_lengths_are_accepted(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        use_case = await unit_env.get(CreatePostUseCase)

        response = await use_case.execute(
            create_request(
                str(author.id),
                title="x" * 20,
                content="x" * 200,
                category="abc",
                tags=[],
            )
        )

        assert response.tags == []
