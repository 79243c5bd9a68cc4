"""Blog post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from folio.application.usecase.post import (
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    QueryPostsRequest,
    QueryPostsResponse,
    QueryPostsUseCase,
)
from folio.domain.error import NotFoundError
from folio.domain.value import SortOrder
from folio.interface.api.routes.query import split_csv

router = APIRouter(prefix="/blog", tags=["blog"], route_class=DishkaRoute)


@router.post(
    "/query-posts",
    response_model=QueryPostsResponse,
    summary="Fetch one page of posts",
    description="Cursor-paginated post listing filtered by tags or a search term.",
)
async def query_posts(
    request: QueryPostsRequest,
    use_case: FromDishka[QueryPostsUseCase],
) -> QueryPostsResponse:
    """Fetch one page of posts.

    Pass the returned ``next_cursor`` back as ``cursor`` to get the next page.

    Example:
        POST /blog/query-posts {"tags": ["python"], "limit": 6}
    """
    with logfire.span("api.query_posts", tags=request.tags, limit=request.limit):
        return await use_case.execute(request)


@router.get(
    "/posts",
    response_model=ListPostsResponse,
    summary="List posts",
    description="Offset-paginated listing when page and limit are given, full listing otherwise.",
)
async def list_posts(
    use_case: FromDishka[ListPostsUseCase],
    sort_order: SortOrder = SortOrder.DESC,
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    tags: str | None = None,
    search: str | None = None,
) -> ListPostsResponse:
    """List posts.

    Args:
        use_case: List posts use case (injected)
        sort_order: 'asc' or 'desc' by creation time
        page: 1-based page number (requires limit)
        limit: Page size
        tags: Comma separated tag names, all of which must be present
        search: Text matched against title and description

    Example:
        GET /blog/posts?page=2&limit=10&tags=python,web
    """
    with logfire.span("api.list_posts", page=page, limit=limit, tags=tags):
        request = ListPostsRequest(
            sort_order=sort_order,
            page=page,
            limit=limit,
            tags=split_csv(tags),
            search=search,
        )
        return await use_case.execute(request)


@router.get("/posts/{slug}", response_model=GetPostResponse)
async def get_post(
    slug: str,
    use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a post and its content by slug.

    Raises:
        HTTPException: 404 if no published post has the slug
    """
    with logfire.span("api.get_post", slug=slug):
        try:
            return await use_case.execute(GetPostRequest(slug=slug))
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
