"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from folio.config import (
    ImageSettings,
    NotionSettings,
    PortfolioSchemaSettings,
    PostSchemaSettings,
    Settings,
)
from folio.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_notion_settings(self, settings: Settings) -> NotionSettings:
        """Provide Notion settings."""
        return settings.notion

    @provide
    def provide_post_schema(self, settings: Settings) -> PostSchemaSettings:
        """Provide post database property names."""
        return settings.posts

    @provide
    def provide_portfolio_schema(self, settings: Settings) -> PortfolioSchemaSettings:
        """Provide portfolio database property names."""
        return settings.portfolio

    @provide
    def provide_image_settings(self, settings: Settings) -> ImageSettings:
        """Provide image enrichment settings."""
        return settings.images
