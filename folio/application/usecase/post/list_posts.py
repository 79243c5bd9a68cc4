"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from folio.domain.model import Post
from folio.domain.service import PostService
from folio.domain.value import PostCriteria, SortOrder


class ListPostsRequest(BaseModel):
    """List posts request.

    ``page`` only takes effect together with ``limit``. Without ``limit``
    every matching post is returned.
    """

    sort_order: SortOrder = SortOrder.DESC
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1, le=100)
    tags: list[str] = []
    search: str | None = None


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[Post]


class ListPostsUseCase:
    """Use case for listing posts with offset pagination or in full."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with filters and pagination

        Returns:
            Posts matching criteria
        """
        with logfire.span(
            "list_posts.execute",
            sort_order=request.sort_order.value,
            page=request.page,
            limit=request.limit,
            tags=request.tags,
        ):
            criteria = PostCriteria(
                sort_order=request.sort_order,
                page=request.page,
                limit=request.limit,
                tags=request.tags,
                search=request.search,
            )
            posts = await self.post_service.list_posts(criteria)
            return ListPostsResponse(posts=posts)
