"""Mapping of raw store pages to domain objects.

Property names come from configuration because they are whatever the site
owner typed as column names in Notion. A missing property, or a property of
the wrong type, is a schema drift and fails loudly with MalformedRecordError
instead of silently yielding empty fields.
"""

from datetime import datetime
from typing import Any

from folio.config import PortfolioSchemaSettings, PostSchemaSettings
from folio.domain.error import MalformedRecordError
from folio.domain.model import Portfolio, Post
from folio.domain.repository import Record
from folio.domain.value import PageId


class RecordMapper:
    """Maps page records and database schemas onto domain values."""

    def __init__(
        self,
        post_schema: PostSchemaSettings,
        portfolio_schema: PortfolioSchemaSettings,
    ) -> None:
        """Initialize record mapper.

        Args:
            post_schema: Property names of the post database
            portfolio_schema: Property names of the portfolio database
        """
        self.post_schema = post_schema
        self.portfolio_schema = portfolio_schema

    def page_to_post(self, page: Record) -> Post:
        """Map a post database page to a Post."""
        page_id = _record_id(page)
        schema = self.post_schema
        return Post(
            id=PageId(page_id),
            created_at=_timestamp(page, "created_time"),
            last_edited_at=_timestamp(page, "last_edited_time"),
            cover_image=_cover_url(page),
            tags=_multi_select(page, schema.tags_property),
            title=_text(page, schema.title_property, "title"),
            description=_text(page, schema.description_property, "rich_text"),
            slug=_text(page, schema.slug_property, "rich_text"),
        )

    def page_to_portfolio(self, page: Record) -> Portfolio:
        """Map a portfolio database page to a Portfolio."""
        page_id = _record_id(page)
        schema = self.portfolio_schema
        return Portfolio(
            id=PageId(page_id),
            title=_text(page, schema.title_property, "title"),
            cover_image=_cover_url(page),
            categories=_multi_select(page, schema.categories_property),
            technologies=_multi_select(page, schema.technologies_property),
            demo_url=_url(page, schema.demo_url_property),
            github_url=_url(page, schema.github_url_property),
        )

    def is_published(self, page: Record, published_property: str) -> bool:
        """Read a checkbox property.

        Raises:
            MalformedRecordError: If the property is missing or not a checkbox
        """
        prop = _property(page, published_property, "checkbox")
        return bool(prop["checkbox"])

    @staticmethod
    def schema_options(database: Record, property_name: str) -> list[str]:
        """List the option names of a multi-select column in a database schema.

        Raises:
            MalformedRecordError: If the column is missing or not multi-select
        """
        database_id = str(database.get("id", "<unknown>"))
        prop = database.get("properties", {}).get(property_name)
        if not isinstance(prop, dict) or prop.get("type") != "multi_select":
            raise MalformedRecordError(database_id, property_name, "multi_select")
        options = (prop.get("multi_select") or {}).get("options", [])
        return [option["name"] for option in options]


def _record_id(page: Record) -> str:
    page_id = page.get("id")
    if not isinstance(page_id, str):
        raise MalformedRecordError("<unknown>", "id", "string")
    return page_id


def _property(page: Record, name: str, kind: str) -> dict[str, Any]:
    prop = page.get("properties", {}).get(name)
    if not isinstance(prop, dict) or prop.get("type") != kind or kind not in prop:
        raise MalformedRecordError(page["id"], name, kind)
    return prop


def _timestamp(page: Record, field: str) -> datetime:
    value = page.get(field)
    if not isinstance(value, str):
        raise MalformedRecordError(page["id"], field, "timestamp")
    return datetime.fromisoformat(value)


def _text(page: Record, name: str, kind: str) -> str:
    """Concatenate the plain text of every segment ("" when empty)."""
    segments = _property(page, name, kind)[kind] or []
    return "".join(segment.get("plain_text", "") for segment in segments)


def _multi_select(page: Record, name: str) -> list[str]:
    options = _property(page, name, "multi_select")["multi_select"] or []
    return [option["name"] for option in options]


def _url(page: Record, name: str) -> str:
    return _property(page, name, "url")["url"] or ""


def _cover_url(page: Record) -> str | None:
    cover = page.get("cover")
    if not isinstance(cover, dict):
        return None
    if cover.get("type") == "external":
        return (cover.get("external") or {}).get("url")
    if cover.get("type") == "file":
        return (cover.get("file") or {}).get("url")
    return None
