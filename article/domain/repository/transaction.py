"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Groups repository writes into one atomic unit.

    Writes made inside ``atomic()`` either all become visible or, if the
    block raises, are all rolled back. Units may nest; an inner unit that
    fails rolls back alone when the caller handles its error.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic unit of work.

        Usage:
            async with transactions.atomic():
                await tag_repository.save(tag)
                await post_repository.replace_tags(post.id, [tag.id])
        """
        pass
