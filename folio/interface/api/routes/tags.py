"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from folio.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)

router = APIRouter(
    prefix="/blog/tags",
    tags=["blog"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List all available tags",
    description="Every tag configured on the post database, whether used or not.",
)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """List all available tags.

    Example:
        GET /blog/tags
    """
    with logfire.span("api.list_tags"):
        return await use_case.execute(ListTagsRequest())
