"""Notion infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide

from folio.adapter.notion import NotionContentStore
from folio.config import NotionSettings
from folio.domain.repository import ContentStore
from folio.util.di.base import ProviderBase
from folio.util.error import ConfigurationError


class NotionProvider(ProviderBase):
    """Notion component base."""

    __mock_component__ = "notion"


class ProdNotionProvider(NotionProvider):
    """Production Notion provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_content_store(
        self, notion_settings: NotionSettings
    ) -> AsyncIterator[ContentStore]:
        """Provide the Notion content store, closed on application shutdown.

        Raises:
            ConfigurationError: If the token or a database id is not configured
        """
        missing = [
            name
            for name in ("api_token", "post_database_id", "portfolio_database_id")
            if not getattr(notion_settings, name)
        ]
        if missing:
            raise ConfigurationError(
                f"Notion settings not configured: {', '.join(missing)} "
                f"(set NOTION__{missing[0].upper()})"
            )

        store = NotionContentStore(
            api_token=notion_settings.api_token,
            base_url=notion_settings.api_base_url,
            api_version=notion_settings.api_version,
            timeout=notion_settings.timeout,
        )
        logfire.info("Notion content store created", base_url=notion_settings.api_base_url)
        yield store
        await store.aclose()
