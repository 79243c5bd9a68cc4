"""Query posts use case (cursor pagination)."""

import logfire
from pydantic import BaseModel, Field

from folio.domain.model import Post
from folio.domain.service import PostService
from folio.domain.value import PostCriteria, SortOrder


class QueryPostsRequest(BaseModel):
    """Query posts request."""

    sort_order: SortOrder = SortOrder.DESC
    limit: int | None = Field(default=None, ge=1, le=100)  # None: configured page size
    tags: list[str] = []
    search: str | None = None
    cursor: str | None = None  # next_cursor of the previous response


class QueryPostsResponse(BaseModel):
    """Query posts response."""

    posts: list[Post]
    next_cursor: str | None


class QueryPostsUseCase:
    """Use case for fetching one page of posts at a time."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize query posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: QueryPostsRequest) -> QueryPostsResponse:
        """Execute query posts flow.

        Args:
            request: Filters, sort order and cursor

        Returns:
            One page of posts and the cursor of the next page
        """
        with logfire.span(
            "query_posts.execute",
            tags=request.tags,
            search=request.search,
            limit=request.limit,
        ):
            criteria = PostCriteria(
                sort_order=request.sort_order,
                limit=request.limit,
                tags=request.tags,
                search=request.search,
                cursor=request.cursor,
            )
            page = await self.post_service.query_page(criteria)
            return QueryPostsResponse(posts=page.items, next_cursor=page.next_cursor)
