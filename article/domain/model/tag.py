"""Tag entity for labelling posts."""

from datetime import datetime, timezone

from pydantic import Field

from article.domain.model.common import DomainModel
from article.domain.value import TagId, TagName


class Tag(DomainModel):
    """Named label shared by every post that references the name.

    Tags are created lazily the first time a post uses a new name and are
    never deleted.
    """

    id: TagId
    name: TagName  # Unique, normalized to lower case
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
