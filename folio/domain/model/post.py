"""Blog post projection.

Posts are read-only views of pages in the post database. They are rebuilt
from the store on every query and never cached or persisted.
"""

from datetime import datetime

from pydantic import Field

from folio.domain.model.block import Block
from folio.domain.model.common import DomainModel
from folio.domain.value import PageId


class Post(DomainModel):
    """Blog post listing entry."""

    id: PageId
    created_at: datetime
    last_edited_at: datetime
    cover_image: str | None = None
    tags: list[str] = Field(default_factory=list)
    title: str
    description: str
    slug: str


class PostDetail(Post):
    """Post with its normalized content tree attached."""

    content: list[Block] = Field(default_factory=list)
