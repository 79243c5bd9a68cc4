"""List tags use case."""

import logfire
from pydantic import BaseModel

from folio.domain.service import PostService


class ListTagsRequest(BaseModel):
    """List tags request."""

    pass


class ListTagsResponse(BaseModel):
    """List tags response."""

    tags: list[str]


class ListTagsUseCase:
    """Use case for listing every tag configured on the post database."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list tags use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Tag names in schema order
        """
        with logfire.span("list_tags.execute"):
            tags = await self.post_service.get_all_tags()
            logfire.info("Tags listed", count=len(tags))
            return ListTagsResponse(tags=tags)
