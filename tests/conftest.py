"""Test configuration and record builders.

Builders produce raw Notion-shaped records so tests exercise the same
mapping code as production.
"""

import os
from typing import Any

import logfire

# Settings are read from the environment by the DI container
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("NOTION__API_TOKEN", "secret_test")
os.environ.setdefault("NOTION__POST_DATABASE_ID", "posts-db")
os.environ.setdefault("NOTION__PORTFOLIO_DATABASE_ID", "portfolio-db")

logfire.configure(send_to_logfire=False, console=False)

POST_DB = os.environ["NOTION__POST_DATABASE_ID"]
PORTFOLIO_DB = os.environ["NOTION__PORTFOLIO_DATABASE_ID"]


def rich_text(text: str) -> list[dict[str, Any]]:
    """Rich text array with a single segment ([] for empty text)."""
    if not text:
        return []
    return [{"type": "text", "text": {"content": text}, "plain_text": text}]


def multi_select(names: list[str]) -> dict[str, Any]:
    return {
        "type": "multi_select",
        "multi_select": [{"id": f"opt-{name}", "name": name} for name in names],
    }


def make_post_page(
    page_id: str,
    title: str,
    slug: str,
    tags: list[str] | None = None,
    description: str = "",
    created: str = "2024-01-01T00:00:00.000Z",
    published: bool = True,
    cover_url: str | None = None,
) -> dict[str, Any]:
    """Build a page of the post database using the default property names."""
    return {
        "object": "page",
        "id": page_id,
        "created_time": created,
        "last_edited_time": created,
        "parent": {"type": "database_id", "database_id": POST_DB},
        "cover": (
            {"type": "external", "external": {"url": cover_url}} if cover_url else None
        ),
        "properties": {
            "Published": {"type": "checkbox", "checkbox": published},
            "Name": {"type": "title", "title": rich_text(title)},
            "Description": {"type": "rich_text", "rich_text": rich_text(description)},
            "Tags": multi_select(tags or []),
            "Slug": {"type": "rich_text", "rich_text": rich_text(slug)},
            "Created": {"type": "created_time", "created_time": created},
        },
    }


def make_portfolio_page(
    page_id: str,
    title: str,
    categories: list[str] | None = None,
    technologies: list[str] | None = None,
    published: bool = True,
    demo_url: str | None = None,
    github_url: str | None = None,
    created: str = "2024-01-01T00:00:00.000Z",
    database_id: str = PORTFOLIO_DB,
) -> dict[str, Any]:
    """Build a page of the portfolio database using the default property names."""
    return {
        "object": "page",
        "id": page_id,
        "created_time": created,
        "last_edited_time": created,
        "parent": {"type": "database_id", "database_id": database_id},
        "cover": {"type": "file", "file": {"url": f"https://files.example.com/{page_id}.png"}},
        "properties": {
            "Published": {"type": "checkbox", "checkbox": published},
            "Name": {"type": "title", "title": rich_text(title)},
            "Categories": multi_select(categories or []),
            "Technologies": multi_select(technologies or []),
            "Project URL": {"type": "url", "url": demo_url},
            "Github URL": {"type": "url", "url": github_url},
        },
    }


def make_schema(**options: list[str]) -> dict[str, Any]:
    """Database property schema with the given multi-select columns.

    Example:
        make_schema(Tags=["python", "web"])
    """
    return {
        name: {
            "id": name.lower(),
            "name": name,
            "type": "multi_select",
            "multi_select": {"options": [{"name": value} for value in values]},
        }
        for name, values in options.items()
    }


def make_block(
    block_id: str, block_type: str, text: str = "", has_children: bool = False
) -> dict[str, Any]:
    """Build a text-like block (paragraph, heading, list item, ...)."""
    return {
        "object": "block",
        "id": block_id,
        "type": block_type,
        "has_children": has_children,
        block_type: {"rich_text": rich_text(text)},
    }


def make_image_block(
    block_id: str, url: str | None, source: str = "external"
) -> dict[str, Any]:
    """Build an image block hosted externally or by Notion."""
    image: dict[str, Any] = {"type": source, "caption": []}
    if url is not None:
        image[source] = (
            {"url": url}
            if source == "external"
            else {"url": url, "expiry_time": "2030-01-01T00:00:00.000Z"}
        )
    return {
        "object": "block",
        "id": block_id,
        "type": "image",
        "has_children": False,
        "image": image,
    }
