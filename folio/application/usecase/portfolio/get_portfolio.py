"""Get portfolio use case."""

import logfire
from pydantic import BaseModel, Field

from folio.domain.model import PortfolioDetail
from folio.domain.service import PortfolioService
from folio.domain.value import PageId


class GetPortfolioRequest(BaseModel):
    """Get portfolio request."""

    portfolio_id: str = Field(min_length=1)


class GetPortfolioResponse(BaseModel):
    """Get portfolio response."""

    portfolio: PortfolioDetail


class GetPortfolioUseCase:
    """Use case for retrieving a portfolio entry and its content."""

    def __init__(self, portfolio_service: PortfolioService) -> None:
        """Initialize get portfolio use case.

        Args:
            portfolio_service: Portfolio domain service
        """
        self.portfolio_service = portfolio_service

    async def execute(self, request: GetPortfolioRequest) -> GetPortfolioResponse:
        """Execute get portfolio flow.

        Raises:
            NotFoundError: If the entry is missing or not published
        """
        with logfire.span("get_portfolio.execute", portfolio_id=request.portfolio_id):
            portfolio = await self.portfolio_service.get_portfolio(
                PageId(request.portfolio_id)
            )
            return GetPortfolioResponse(portfolio=portfolio)
