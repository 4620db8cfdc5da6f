"""Test harness for unit and integration tests.

Everything runs in-process: mocks use in-memory repositories and the
unmocked persistence component uses SQLite through aiosqlite.
"""

import pytest_asyncio

from article.persistence.database import SchemaMigrator
from article.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a fresh test container with specified unmocking
    - Creates the schema (a no-op for in-memory persistence)
    - Yields a request-scoped container for service access

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_find_post(integration_env):
            repo = await integration_env.get(PostRepository)
            assert await repo.find_by_id(PostId(uuid4())) is None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        migrator = await container.get(SchemaMigrator)
        await migrator.migrate()

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
