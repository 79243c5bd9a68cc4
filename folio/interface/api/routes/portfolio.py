"""Portfolio routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from folio.application.usecase.portfolio import (
    GetPortfolioMetadataRequest,
    GetPortfolioMetadataResponse,
    GetPortfolioMetadataUseCase,
    GetPortfolioRequest,
    GetPortfolioResponse,
    GetPortfolioUseCase,
    ListPortfoliosRequest,
    ListPortfoliosResponse,
    ListPortfoliosUseCase,
)
from folio.domain.error import NotFoundError
from folio.interface.api.routes.query import split_csv

router = APIRouter(prefix="/portfolio", tags=["portfolio"], route_class=DishkaRoute)


@router.get(
    "",
    response_model=ListPortfoliosResponse,
    summary="List portfolio entries",
    description="Entries matching any given category and any given technology.",
)
async def list_portfolios(
    use_case: FromDishka[ListPortfoliosUseCase],
    categories: str | None = None,
    technologies: str | None = None,
    limit: int | None = Query(default=None, ge=1, le=100),
) -> ListPortfoliosResponse:
    """List portfolio entries.

    Example:
        GET /portfolio?categories=web,mobile&technologies=python
    """
    with logfire.span(
        "api.list_portfolios", categories=categories, technologies=technologies
    ):
        request = ListPortfoliosRequest(
            categories=split_csv(categories),
            technologies=split_csv(technologies),
            limit=limit,
        )
        return await use_case.execute(request)


@router.get("/metadata", response_model=GetPortfolioMetadataResponse)
async def get_portfolio_metadata(
    use_case: FromDishka[GetPortfolioMetadataUseCase],
) -> GetPortfolioMetadataResponse:
    """List the categories and technologies available as filters."""
    with logfire.span("api.get_portfolio_metadata"):
        return await use_case.execute(GetPortfolioMetadataRequest())


@router.get("/{portfolio_id}", response_model=GetPortfolioResponse)
async def get_portfolio(
    portfolio_id: str,
    use_case: FromDishka[GetPortfolioUseCase],
) -> GetPortfolioResponse:
    """Get a portfolio entry and its content.

    Raises:
        HTTPException: 404 if the entry is missing or not published
    """
    with logfire.span("api.get_portfolio", portfolio_id=portfolio_id):
        try:
            return await use_case.execute(GetPortfolioRequest(portfolio_id=portfolio_id))
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
