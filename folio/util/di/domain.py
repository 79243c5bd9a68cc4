"""Domain layer DI providers."""

from dishka import Scope, provide

from folio.config import (
    ImageSettings,
    NotionSettings,
    PortfolioSchemaSettings,
    PostSchemaSettings,
)
from folio.domain.repository import ContentStore
from folio.domain.service import (
    BlockService,
    ContentService,
    ImageProbe,
    PortfolioService,
    PostService,
    RecordMapper,
)
from folio.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped; they hold no state of their own and
    share the APP-scoped store and image probe.
    """

    scope = Scope.REQUEST

    @provide
    def get_record_mapper(
        self, post_schema: PostSchemaSettings, portfolio_schema: PortfolioSchemaSettings
    ) -> RecordMapper:
        """Provide record mapper."""
        return RecordMapper(post_schema=post_schema, portfolio_schema=portfolio_schema)

    @provide
    def get_block_service(
        self, image_probe: ImageProbe, image_settings: ImageSettings
    ) -> BlockService:
        """Provide block normalization service."""
        return BlockService(image_probe=image_probe, image_settings=image_settings)

    @provide
    def get_content_service(
        self, content_store: ContentStore, block_service: BlockService
    ) -> ContentService:
        """Provide page content service."""
        return ContentService(content_store=content_store, block_service=block_service)

    @provide
    def get_post_service(
        self,
        content_store: ContentStore,
        content_service: ContentService,
        record_mapper: RecordMapper,
        notion_settings: NotionSettings,
        post_schema: PostSchemaSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            content_store=content_store,
            content_service=content_service,
            record_mapper=record_mapper,
            notion_settings=notion_settings,
            post_schema=post_schema,
        )

    @provide
    def get_portfolio_service(
        self,
        content_store: ContentStore,
        content_service: ContentService,
        record_mapper: RecordMapper,
        notion_settings: NotionSettings,
        portfolio_schema: PortfolioSchemaSettings,
    ) -> PortfolioService:
        """Provide portfolio domain service."""
        return PortfolioService(
            content_store=content_store,
            content_service=content_service,
            record_mapper=record_mapper,
            notion_settings=notion_settings,
            portfolio_schema=portfolio_schema,
        )
