"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from article.domain.error import ConflictError
from article.domain.model.post import Post
from article.domain.repository.post import PostRepository
from article.domain.value import PostId, PostStatus, TagId, UserId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _joined(self, post: Post) -> Post:
        author = self.store.users.get(post.author_id)
        tags = [self.store.tags[tag_id] for tag_id in self.store.post_tags.get(post.id, [])]
        return post.model_copy(
            update={
                "author": author.summary() if author else None,
                "tags": sorted(tags, key=lambda tag: tag.name.root),
            }
        )

    def _matching(
        self,
        status: Optional[PostStatus],
        author_id: Optional[UserId],
        include_deleted: bool,
    ) -> list[Post]:
        posts = list(self.store.posts.values())
        if status is not None:
            posts = [p for p in posts if p.status == status]
        if author_id is not None:
            posts = [p for p in posts if p.author_id == author_id]
        if not include_deleted:
            posts = [p for p in posts if p.deleted_at is None]
        return posts

    async def find_by_id(
        self, post_id: PostId, include_deleted: bool = False
    ) -> Optional[Post]:
        post = self.store.posts.get(post_id)
        if post is None or (post.is_deleted and not include_deleted):
            return None
        return self._joined(post)

    async def find_all(
        self,
        status: Optional[PostStatus] = None,
        author_id: Optional[UserId] = None,
        include_deleted: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        posts = self._matching(status, author_id, include_deleted)
        posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return [self._joined(p) for p in posts[offset : offset + limit]]

    async def count(
        self,
        status: Optional[PostStatus] = None,
        author_id: Optional[UserId] = None,
        include_deleted: bool = False,
    ) -> int:
        return len(self._matching(status, author_id, include_deleted))

    async def save(self, post: Post) -> None:
        if post.author_id not in self.store.users:
            raise ConflictError("post violates a constraint", detail="unknown author")
        self.store.posts[post.id] = post.model_copy(update={"author": None, "tags": []})

    async def replace_tags(self, post_id: PostId, tag_ids: list[TagId]) -> None:
        if post_id not in self.store.posts:
            raise ConflictError(
                "tag association violates a constraint", detail="unknown post"
            )
        missing = [tag_id for tag_id in tag_ids if tag_id not in self.store.tags]
        if missing:
            raise ConflictError(
                "tag association violates a constraint", detail="unknown tag"
            )
        self.store.post_tags[post_id] = list(dict.fromkeys(tag_ids))

    async def soft_delete(self, post_id: PostId, deleted_at: datetime) -> None:
        post = self.store.posts.get(post_id)
        if post is not None:
            self.store.posts[post_id] = post.model_copy(update={"deleted_at": deleted_at})
