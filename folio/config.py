"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NotionSettings(BaseModel):
    """Notion API configuration."""

    # Integration token (can be set via NOTION__API_TOKEN env var)
    api_token: str = ""
    api_base_url: str = "https://api.notion.com/v1"
    api_version: str = "2022-06-28"

    # Timeout in seconds for every store request
    timeout: float = 30.0

    # Databases holding blog posts and portfolio entries
    post_database_id: str = ""
    portfolio_database_id: str = ""

    # Page size used by the cursor endpoint when the caller sends no limit
    page_size: int = Field(default=12, ge=1, le=100)


class PostSchemaSettings(BaseModel):
    """Property names of the blog post database.

    These are the human-readable column names configured in Notion, so they
    change whenever the database is edited. Override via POSTS__* env vars.
    """

    published_property: str = "Published"
    title_property: str = "Name"
    description_property: str = "Description"
    tags_property: str = "Tags"
    slug_property: str = "Slug"
    created_property: str = "Created"


class PortfolioSchemaSettings(BaseModel):
    """Property names of the portfolio database."""

    published_property: str = "Published"
    title_property: str = "Name"
    categories_property: str = "Categories"
    technologies_property: str = "Technologies"
    demo_url_property: str = "Project URL"
    github_url_property: str = "Github URL"


class ImageSettings(BaseModel):
    """Image block enrichment configuration."""

    # Time budget for downloading a single image
    fetch_timeout: float = 5.0

    # Size reported when an image cannot be downloaded or decoded
    default_width: int = 800
    default_height: int = 500

    # Placeholders are only attached to images larger than this on both axes
    # (tracking pixels and icons produce useless previews)
    placeholder_min_dimension: int = 40

    # Longest edge of the blurred preview, in pixels
    placeholder_size: int = 16


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        NOTION__API_TOKEN=secret_...
        NOTION__POST_DATABASE_ID=...
        NOTION__PORTFOLIO_DATABASE_ID=...
        POSTS__TAGS_PROPERTY=Tags
        IMAGES__FETCH_TIMEOUT=5
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows NOTION__API_TOKEN syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = 8000

    # Origins allowed to call the API from a browser
    frontend_origins: list[str] = ["http://localhost:3000"]

    # Nested settings
    notion: NotionSettings = NotionSettings()
    posts: PostSchemaSettings = PostSchemaSettings()
    portfolio: PortfolioSchemaSettings = PortfolioSchemaSettings()
    images: ImageSettings = ImageSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
