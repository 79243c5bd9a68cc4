"""Blog post domain service."""

from typing import Optional

import logfire

from folio.config import NotionSettings, PostSchemaSettings
from folio.domain.error import NotFoundError
from folio.domain.model import Post, PostDetail
from folio.domain.repository import ContentStore
from folio.domain.value import (
    DatabaseId,
    Filter,
    FilterCondition,
    FilterKind,
    Page,
    PostCriteria,
    PropertyFilter,
    Sort,
    SortOrder,
    all_of,
    any_of,
)

from .base import Service
from .content_service import ContentService
from .pagination import fetch_all, fetch_nth_page
from .record_mapper import RecordMapper


class PostService(Service):
    """Domain service for querying blog posts.

    Only published posts are ever returned. Posts are always sorted by the
    configured creation-time property.
    """

    def __init__(
        self,
        content_store: ContentStore,
        content_service: ContentService,
        record_mapper: RecordMapper,
        notion_settings: NotionSettings,
        post_schema: PostSchemaSettings,
    ) -> None:
        """Initialize post service.

        Args:
            content_store: Store holding the post database
            content_service: Service assembling page content
            record_mapper: Maps page records to posts
            notion_settings: Database id and default page size
            post_schema: Property names of the post database
        """
        self.content_store = content_store
        self.content_service = content_service
        self.record_mapper = record_mapper
        self.notion_settings = notion_settings
        self.post_schema = post_schema

    @property
    def database_id(self) -> DatabaseId:
        return DatabaseId(self.notion_settings.post_database_id)

    def published_filter(self) -> PropertyFilter:
        """Baseline clause applied to every post query."""
        return PropertyFilter(
            property=self.post_schema.published_property,
            kind=FilterKind.CHECKBOX,
            condition=FilterCondition.EQUALS,
            value=True,
        )

    def build_filter(self, criteria: PostCriteria) -> Filter:
        """Build the store filter for the given criteria.

        Tags take precedence over search: with tags, every tag must be
        present; otherwise a non-blank search matches title or description.
        """
        custom: Optional[Filter] = None

        if criteria.tags:
            custom = all_of(
                *(
                    PropertyFilter(
                        property=self.post_schema.tags_property,
                        kind=FilterKind.MULTI_SELECT,
                        condition=FilterCondition.CONTAINS,
                        value=tag,
                    )
                    for tag in criteria.tags
                )
            )
        elif criteria.search and criteria.search.strip():
            search = criteria.search.strip()
            custom = any_of(
                PropertyFilter(
                    property=self.post_schema.title_property,
                    kind=FilterKind.TITLE,
                    condition=FilterCondition.CONTAINS,
                    value=search,
                ),
                PropertyFilter(
                    property=self.post_schema.description_property,
                    kind=FilterKind.RICH_TEXT,
                    condition=FilterCondition.CONTAINS,
                    value=search,
                ),
            )

        published = self.published_filter()
        return published if custom is None else all_of(published, custom)

    async def query_page(self, criteria: PostCriteria) -> Page[Post]:
        """Fetch exactly one page of posts (cursor pagination).

        Args:
            criteria: Filter, sort order, page size and resume cursor

        Returns:
            Posts plus the cursor of the next page
        """
        limit = criteria.limit or self.notion_settings.page_size
        with logfire.span(
            "post_service.query_page",
            tags=criteria.tags,
            search=criteria.search,
            limit=limit,
            has_cursor=criteria.cursor is not None,
        ):
            page = await self._query(
                self.build_filter(criteria), criteria.sort_order, limit, criteria.cursor
            )
            logfire.info(
                "Posts page fetched",
                count=len(page.items),
                has_more=page.next_cursor is not None,
            )
            return page

    async def list_posts(self, criteria: PostCriteria) -> list[Post]:
        """List posts using offset, first-page or full-listing mode.

        - ``page`` and ``limit``: the page-th page of ``limit`` posts (empty
          once the store runs out)
        - ``limit`` only: the first page (or the page at ``cursor``)
        - neither: every matching post, sorted by creation time
        """
        with logfire.span(
            "post_service.list_posts",
            page=criteria.page,
            limit=criteria.limit,
            sort_order=criteria.sort_order.value,
        ):
            filter = self.build_filter(criteria)

            async def fetch(cursor: Optional[str]) -> Page[Post]:
                return await self._query(filter, criteria.sort_order, criteria.limit, cursor)

            if criteria.limit is not None and criteria.page is not None:
                posts = await fetch_nth_page(fetch, criteria.page)
            elif criteria.limit is not None:
                posts = (await fetch(criteria.cursor)).items
            else:
                posts = await fetch_all(fetch)
                posts.sort(
                    key=lambda post: post.created_at,
                    reverse=criteria.sort_order == SortOrder.DESC,
                )

            logfire.info("Posts listed", count=len(posts))
            return posts

    async def get_post(self, slug: str) -> PostDetail:
        """Get a published post by slug with its content attached.

        Raises:
            NotFoundError: If no published post has this slug
        """
        with logfire.span("post_service.get_post", slug=slug):
            filter = all_of(
                self.published_filter(),
                PropertyFilter(
                    property=self.post_schema.slug_property,
                    kind=FilterKind.RICH_TEXT,
                    condition=FilterCondition.EQUALS,
                    value=slug,
                ),
            )
            page = await self._query(filter, SortOrder.DESC, 1, None)

            if not page.items:
                logfire.warn("Post not found by slug", slug=slug)
                raise NotFoundError("Post", slug)

            post = page.items[0]
            content = await self.content_service.get_page_content(post.id)
            logfire.info("Post found by slug", slug=slug, post_id=post.id)
            return PostDetail(**post.model_dump(), content=content)

    async def get_all_tags(self) -> list[str]:
        """List every tag configured on the post database, in schema order."""
        with logfire.span("post_service.get_all_tags"):
            database = await self.content_store.retrieve_database(self.database_id)
            tags = RecordMapper.schema_options(database, self.post_schema.tags_property)
            logfire.info("Tags listed", count=len(tags))
            return tags

    async def _query(
        self,
        filter: Filter,
        sort_order: SortOrder,
        page_size: Optional[int],
        cursor: Optional[str],
    ) -> Page[Post]:
        result = await self.content_store.query_database(
            self.database_id,
            filter=filter,
            sorts=[
                Sort(
                    property=self.post_schema.created_property,
                    direction=sort_order.direction,
                )
            ],
            page_size=page_size,
            start_cursor=cursor,
        )
        posts = [self.record_mapper.page_to_post(record) for record in result.items]
        return Page[Post](items=posts, next_cursor=result.next_cursor)
