"""Mock providers for testing."""

from .container import build_test_container
from .media import MockMediaProvider
from .persistence import MockPersistenceProvider

__all__ = [
    "MockMediaProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
