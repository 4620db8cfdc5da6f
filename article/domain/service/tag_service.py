"""Tag domain service."""

from dataclasses import dataclass, field
from uuid import uuid4

import logfire

from article.domain.error import ConflictError, DomainError
from article.domain.model.tag import Tag
from article.domain.repository import TagRepository, TransactionManager
from article.domain.value import TagId, TagName

from .base import Service


@dataclass
class TagResolution:
    """Outcome of resolving a batch of tag names.

    ``tags`` keeps the order of first occurrence; ``failed`` lists names
    that could not be resolved and were skipped.
    """

    tags: list[Tag] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(
        self, tag_repository: TagRepository, transactions: TransactionManager
    ) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
            transactions: Transaction manager for savepoints around creation
        """
        self.tag_repository = tag_repository
        self.transactions = transactions

    async def resolve_or_create(self, names: list[TagName]) -> TagResolution:
        """Map tag names to tag entities, creating missing ones.

        Duplicate names collapse to one tag. Each name resolves in its own
        savepoint; a name that fails is rolled back, logged and skipped
        while the others still resolve. Repositories report storage
        failures as domain errors, so lookups are covered too.

        Args:
            names: Normalized tag names

        Returns:
            Resolved tags and the names that failed
        """
        unique: list[TagName] = list(dict.fromkeys(names))

        with logfire.span(
            "tag_service.resolve_or_create", tags=[name.root for name in unique]
        ):
            resolution = TagResolution()

            for name in unique:
                try:
                    async with self.transactions.atomic():
                        tag = await self.get_or_create(name)
                except DomainError as e:
                    logfire.error(
                        "Tag resolution failed", tag_name=name.root, error=e.message
                    )
                    resolution.failed.append(name.root)
                    continue
                resolution.tags.append(tag)

            if resolution.failed:
                logfire.warn(
                    "Some tags were skipped",
                    failed=resolution.failed,
                    resolved=len(resolution.tags),
                )
            return resolution

    async def get_or_create(self, name: TagName) -> Tag:
        """Find a tag by name or create it.

        Creation runs in its own savepoint. Losing a creation race to another
        writer rolls the savepoint back and returns the winner's tag.

        Args:
            name: Normalized tag name

        Returns:
            Existing or newly created tag

        Raises:
            ConflictError: If the tag can be neither created nor found
            InternalError: If storage fails during lookup
        """
        tag = await self.tag_repository.find_by_name(name)
        if tag:
            return tag

        try:
            async with self.transactions.atomic():
                tag = await self.tag_repository.save(Tag(id=TagId(uuid4()), name=name))
            logfire.info("Tag created", tag_name=name.root, tag_id=str(tag.id))
            return tag
        except ConflictError:
            logfire.info("Tag created concurrently, re-reading", tag_name=name.root)

        tag = await self.tag_repository.find_by_name(name)
        if tag is None:
            raise ConflictError(f"could not resolve tag {name.root!r}")
        return tag
