"""List portfolios use case."""

import logfire
from pydantic import BaseModel, Field

from folio.domain.model import Portfolio
from folio.domain.service import PortfolioService
from folio.domain.value import PortfolioCriteria


class ListPortfoliosRequest(BaseModel):
    """List portfolios request."""

    categories: list[str] = []
    technologies: list[str] = []
    limit: int | None = Field(default=None, ge=1, le=100)


class ListPortfoliosResponse(BaseModel):
    """List portfolios response."""

    portfolios: list[Portfolio]


class ListPortfoliosUseCase:
    """Use case for listing portfolio entries by category and technology."""

    def __init__(self, portfolio_service: PortfolioService) -> None:
        """Initialize list portfolios use case.

        Args:
            portfolio_service: Portfolio domain service
        """
        self.portfolio_service = portfolio_service

    async def execute(self, request: ListPortfoliosRequest) -> ListPortfoliosResponse:
        """Execute list portfolios flow."""
        with logfire.span(
            "list_portfolios.execute",
            categories=request.categories,
            technologies=request.technologies,
            limit=request.limit,
        ):
            portfolios = await self.portfolio_service.list_portfolios(
                PortfolioCriteria(
                    categories=request.categories,
                    technologies=request.technologies,
                    limit=request.limit,
                )
            )
            return ListPortfoliosResponse(portfolios=portfolios)
