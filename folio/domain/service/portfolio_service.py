"""Portfolio domain service."""

from typing import Optional

import logfire

from folio.config import NotionSettings, PortfolioSchemaSettings
from folio.domain.error import NotFoundError
from folio.domain.model import Portfolio, PortfolioDetail
from folio.domain.repository import ContentStore, Record
from folio.domain.value import (
    DatabaseId,
    Filter,
    FilterCondition,
    FilterKind,
    Page,
    PageId,
    PortfolioCriteria,
    PropertyFilter,
    Sort,
    SortDirection,
    all_of,
    any_of,
)

from .base import Service
from .content_service import ContentService
from .pagination import fetch_all
from .record_mapper import RecordMapper

# Newest projects first
PORTFOLIO_SORTS = [Sort(timestamp="created_time", direction=SortDirection.DESCENDING)]


class PortfolioService(Service):
    """Domain service for querying portfolio entries."""

    def __init__(
        self,
        content_store: ContentStore,
        content_service: ContentService,
        record_mapper: RecordMapper,
        notion_settings: NotionSettings,
        portfolio_schema: PortfolioSchemaSettings,
    ) -> None:
        """Initialize portfolio service.

        Args:
            content_store: Store holding the portfolio database
            content_service: Service assembling page content
            record_mapper: Maps page records to portfolio entries
            notion_settings: Database id
            portfolio_schema: Property names of the portfolio database
        """
        self.content_store = content_store
        self.content_service = content_service
        self.record_mapper = record_mapper
        self.notion_settings = notion_settings
        self.portfolio_schema = portfolio_schema

    @property
    def database_id(self) -> DatabaseId:
        return DatabaseId(self.notion_settings.portfolio_database_id)

    def build_filter(self, criteria: PortfolioCriteria) -> Filter:
        """Build the store filter for the given criteria.

        Any of the categories and any of the technologies must match. Empty
        groups are left out.
        """
        published = PropertyFilter(
            property=self.portfolio_schema.published_property,
            kind=FilterKind.CHECKBOX,
            condition=FilterCondition.EQUALS,
            value=True,
        )
        groups = [
            self._any_option(self.portfolio_schema.categories_property, criteria.categories),
            self._any_option(
                self.portfolio_schema.technologies_property, criteria.technologies
            ),
        ]
        groups = [group for group in groups if group is not None]
        if not groups:
            return published
        return all_of(published, all_of(*groups))

    @staticmethod
    def _any_option(property_name: str, values: list[str]) -> Optional[Filter]:
        if not values:
            return None
        return any_of(
            *(
                PropertyFilter(
                    property=property_name,
                    kind=FilterKind.MULTI_SELECT,
                    condition=FilterCondition.CONTAINS,
                    value=value,
                )
                for value in values
            )
        )

    async def list_portfolios(self, criteria: PortfolioCriteria) -> list[Portfolio]:
        """List published portfolio entries, newest first.

        With ``limit`` a single page of that size is returned, otherwise every
        matching entry.
        """
        with logfire.span(
            "portfolio_service.list_portfolios",
            categories=criteria.categories,
            technologies=criteria.technologies,
            limit=criteria.limit,
        ):
            filter = self.build_filter(criteria)

            async def fetch(cursor: Optional[str]) -> Page[Portfolio]:
                result = await self.content_store.query_database(
                    self.database_id,
                    filter=filter,
                    sorts=PORTFOLIO_SORTS,
                    page_size=criteria.limit,
                    start_cursor=cursor,
                )
                return Page[Portfolio](
                    items=[self.record_mapper.page_to_portfolio(r) for r in result.items],
                    next_cursor=result.next_cursor,
                )

            if criteria.limit is not None:
                portfolios = (await fetch(None)).items
            else:
                portfolios = await fetch_all(fetch)

            logfire.info("Portfolios listed", count=len(portfolios))
            return portfolios

    async def get_portfolio(self, portfolio_id: PageId) -> PortfolioDetail:
        """Get a published portfolio entry with its content attached.

        Raises:
            NotFoundError: If the page does not exist, belongs to another
                database or is not published
        """
        with logfire.span("portfolio_service.get_portfolio", portfolio_id=portfolio_id):
            page = await self.content_store.retrieve_page(portfolio_id)

            if page is None or not self._is_visible(page):
                logfire.warn("Portfolio not found", portfolio_id=portfolio_id)
                raise NotFoundError("Portfolio", portfolio_id)

            portfolio = self.record_mapper.page_to_portfolio(page)
            content = await self.content_service.get_page_content(portfolio.id)
            logfire.info("Portfolio found", portfolio_id=portfolio_id)
            return PortfolioDetail(**portfolio.model_dump(), content=content)

    async def get_all_categories(self) -> list[str]:
        """List every category configured on the portfolio database."""
        with logfire.span("portfolio_service.get_all_categories"):
            database = await self.content_store.retrieve_database(self.database_id)
            return RecordMapper.schema_options(
                database, self.portfolio_schema.categories_property
            )

    async def get_all_technologies(self) -> list[str]:
        """List every technology configured on the portfolio database."""
        with logfire.span("portfolio_service.get_all_technologies"):
            database = await self.content_store.retrieve_database(self.database_id)
            return RecordMapper.schema_options(
                database, self.portfolio_schema.technologies_property
            )

    def _is_visible(self, page: Record) -> bool:
        parent = page.get("parent") or {}
        if parent.get("type") != "database_id":
            return False
        # Notion ids are compared without dashes; config may use either form
        if _bare_id(parent.get("database_id") or "") != _bare_id(self.database_id):
            return False
        return self.record_mapper.is_published(
            page, self.portfolio_schema.published_property
        )


def _bare_id(value: str) -> str:
    return value.replace("-", "").lower()
