"""Get portfolio metadata use case."""

import asyncio

import logfire
from pydantic import BaseModel

from folio.domain.service import PortfolioService


class GetPortfolioMetadataRequest(BaseModel):
    """Get portfolio metadata request."""

    pass


class GetPortfolioMetadataResponse(BaseModel):
    """Filter vocabularies for the portfolio page."""

    categories: list[str]
    technologies: list[str]


class GetPortfolioMetadataUseCase:
    """Use case for listing the categories and technologies to filter by."""

    def __init__(self, portfolio_service: PortfolioService) -> None:
        """Initialize get portfolio metadata use case.

        Args:
            portfolio_service: Portfolio domain service
        """
        self.portfolio_service = portfolio_service

    async def execute(
        self, request: GetPortfolioMetadataRequest
    ) -> GetPortfolioMetadataResponse:
        """Execute get portfolio metadata flow.

        Both vocabularies are fetched concurrently.
        """
        with logfire.span("get_portfolio_metadata.execute"):
            categories, technologies = await asyncio.gather(
                self.portfolio_service.get_all_categories(),
                self.portfolio_service.get_all_technologies(),
            )
            logfire.info(
                "Portfolio metadata fetched",
                category_count=len(categories),
                technology_count=len(technologies),
            )
            return GetPortfolioMetadataResponse(
                categories=categories, technologies=technologies
            )
