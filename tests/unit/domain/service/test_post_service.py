"""Unit tests for PostService."""

import pytest

from folio.adapter.notion import InMemoryContentStore
from folio.domain.error import MalformedRecordError, NotFoundError
from folio.domain.service import PostService
from folio.domain.value import CompoundFilter, PostCriteria, PropertyFilter, SortOrder
from tests.conftest import POST_DB, make_block, make_post_page, make_schema
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _seed_posts(store: InMemoryContentStore, count: int) -> None:
    """Add published posts created on consecutive days."""
    for day in range(1, count + 1):
        store.add_page(
            POST_DB,
            make_post_page(
                f"post-{day:02d}",
                title=f"Post {day}",
                slug=f"post-{day}",
                created=f"2024-01-{day:02d}T00:00:00.000Z",
            ),
        )


class TestBuildFilter:
    """Tests for PostService.build_filter."""

    @pytest.mark.asyncio
    async def test_baseline_only(self, unit_env):
        """No tags or search should give only the published clause."""
        service = await unit_env.get(PostService)

        result = service.build_filter(PostCriteria())

        assert result.to_payload() == {
            "property": "Published",
            "checkbox": {"equals": True},
        }

    @pytest.mark.asyncio
    async def test_tags_take_precedence_over_search(self, unit_env):
        """With tags and search, only the tag clause should be applied."""
        service = await unit_env.get(PostService)

        result = service.build_filter(PostCriteria(tags=["python"], search="fastapi"))

        assert result.to_payload() == {
            "and": [
                {"property": "Published", "checkbox": {"equals": True}},
                {"and": [{"property": "Tags", "multi_select": {"contains": "python"}}]},
            ]
        }

    @pytest.mark.asyncio
    async def test_search_matches_title_or_description(self, unit_env):
        """Search should be or-ed across title and description."""
        service = await unit_env.get(PostService)

        result = service.build_filter(PostCriteria(search="  async  "))

        assert isinstance(result, CompoundFilter)
        search = result.filters[1]
        assert search.operator == "or"
        assert [(f.property, f.kind.value, f.value) for f in search.filters] == [
            ("Name", "title", "async"),
            ("Description", "rich_text", "async"),
        ]

    @pytest.mark.asyncio
    async def test_blank_search_ignored(self, unit_env):
        """Whitespace-only search should leave the baseline filter alone."""
        service = await unit_env.get(PostService)

        assert isinstance(service.build_filter(PostCriteria(search="   ")), PropertyFilter)


class TestQueryPage:
    """Tests for cursor pagination."""

    @pytest.mark.asyncio
    async def test_tag_and_semantics(self, unit_env):
        """tags=[A, B] should match only posts carrying both."""
        store = await unit_env.get(InMemoryContentStore)
        store.add_page(POST_DB, make_post_page("1", "Both", "both", tags=["A", "B"]))
        store.add_page(POST_DB, make_post_page("2", "Only A", "only-a", tags=["A"]))
        store.add_page(POST_DB, make_post_page("3", "Only B", "only-b", tags=["B"]))
        service = await unit_env.get(PostService)

        page = await service.query_page(PostCriteria(tags=["A", "B"]))

        assert [post.slug for post in page.items] == ["both"]

    @pytest.mark.asyncio
    async def test_unpublished_posts_excluded(self, unit_env):
        """Drafts should never be returned."""
        store = await unit_env.get(InMemoryContentStore)
        store.add_page(POST_DB, make_post_page("1", "Live", "live"))
        store.add_page(POST_DB, make_post_page("2", "Draft", "draft", published=False))
        service = await unit_env.get(PostService)

        page = await service.query_page(PostCriteria())

        assert [post.slug for post in page.items] == ["live"]

    @pytest.mark.asyncio
    async def test_default_page_size_and_cursor(self, unit_env):
        """The cursor endpoint should default to 12 posts per page."""
        store = await unit_env.get(InMemoryContentStore)
        _seed_posts(store, 15)
        service = await unit_env.get(PostService)

        first = await service.query_page(PostCriteria())
        second = await service.query_page(PostCriteria(cursor=first.next_cursor))

        assert len(first.items) == 12
        assert first.items[0].slug == "post-15"  # newest first
        assert first.next_cursor is not None
        assert len(second.items) == 3
        assert second.next_cursor is None


class TestListPosts:
    """Tests for offset, first-page and full-listing modes."""

    @pytest.mark.asyncio
    async def test_offset_mode_matches_cursor_advances(self, unit_env):
        """page=N should equal the page reached after N-1 cursor advances."""
        store = await unit_env.get(InMemoryContentStore)
        _seed_posts(store, 10)
        service = await unit_env.get(PostService)

        cursor = None
        for _ in range(2):
            cursor = (await service.query_page(PostCriteria(limit=3, cursor=cursor))).next_cursor
        expected = await service.query_page(PostCriteria(limit=3, cursor=cursor))

        posts = await service.list_posts(PostCriteria(page=3, limit=3))

        assert posts == expected.items

    @pytest.mark.asyncio
    async def test_offset_beyond_end_is_empty(self, unit_env):
        """A page past the last one should give an empty list."""
        store = await unit_env.get(InMemoryContentStore)
        _seed_posts(store, 4)
        service = await unit_env.get(PostService)

        assert await service.list_posts(PostCriteria(page=5, limit=2)) == []

    @pytest.mark.asyncio
    async def test_limit_only_returns_first_page(self, unit_env):
        """limit without page should give just the first page."""
        store = await unit_env.get(InMemoryContentStore)
        _seed_posts(store, 5)
        service = await unit_env.get(PostService)

        posts = await service.list_posts(PostCriteria(limit=2, sort_order=SortOrder.ASC))

        assert [post.slug for post in posts] == ["post-1", "post-2"]

    @pytest.mark.asyncio
    async def test_full_listing_ordered_across_pages(self, unit_env):
        """Without limit every post should come back strictly ordered."""
        store = await unit_env.get(InMemoryContentStore)
        _seed_posts(store, 25)
        store.page_size = 10
        service = await unit_env.get(PostService)

        posts = await service.list_posts(PostCriteria(sort_order=SortOrder.DESC))

        assert len(posts) == 25
        assert store.calls.count(("query_database", POST_DB)) == 3
        created = [post.created_at for post in posts]
        assert all(a > b for a, b in zip(created, created[1:]))


class TestGetPost:
    """Tests for PostService.get_post."""

    @pytest.mark.asyncio
    async def test_get_post_with_content(self, unit_env):
        """A published post should be returned with grouped content."""
        store = await unit_env.get(InMemoryContentStore)
        store.add_page(POST_DB, make_post_page("p1", "Hello", "hello", tags=["intro"]))
        store.set_children(
            "p1",
            [
                make_block("b1", "paragraph", "Hi"),
                make_block("b2", "numbered_list_item", "first"),
            ],
        )
        service = await unit_env.get(PostService)

        post = await service.get_post("hello")

        assert post.id == "p1"
        assert post.title == "Hello"
        assert post.tags == ["intro"]
        assert [block.type.value for block in post.content] == ["paragraph", "numbered_list"]

    @pytest.mark.asyncio
    async def test_missing_post_raises_without_fetching_blocks(self, unit_env):
        """An unknown slug should raise NotFoundError and touch no blocks."""
        store = await unit_env.get(InMemoryContentStore)
        _seed_posts(store, 2)
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.get_post("nonexistent")

        assert not any(method == "list_block_children" for method, _ in store.calls)

    @pytest.mark.asyncio
    async def test_unpublished_post_not_found(self, unit_env):
        """Drafts should not be reachable by slug."""
        store = await unit_env.get(InMemoryContentStore)
        store.add_page(POST_DB, make_post_page("d", "Draft", "draft", published=False))
        service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await service.get_post("draft")


class TestTagsAndMapping:
    """Tests for tag enumeration and record mapping failures."""

    @pytest.mark.asyncio
    async def test_all_tags_from_schema(self, unit_env):
        """Tags should come from the schema, including unused ones."""
        store = await unit_env.get(InMemoryContentStore)
        store.add_database(POST_DB, make_schema(Tags=["python", "rust", "unused"]))
        service = await unit_env.get(PostService)

        assert await service.get_all_tags() == ["python", "rust", "unused"]

    @pytest.mark.asyncio
    async def test_missing_tag_property_is_malformed(self, unit_env):
        """A schema without the tag column should fail loudly."""
        store = await unit_env.get(InMemoryContentStore)
        store.add_database(POST_DB, make_schema(Labels=["python"]))
        service = await unit_env.get(PostService)

        with pytest.raises(MalformedRecordError) as exc_info:
            await service.get_all_tags()

        assert exc_info.value.property_name == "Tags"

    @pytest.mark.asyncio
    async def test_malformed_record_fails_page(self, unit_env):
        """A record with a mistyped property should fail the whole page."""
        store = await unit_env.get(InMemoryContentStore)
        good = make_post_page("good", "Good", "good")
        bad = make_post_page("bad", "Bad", "bad")
        bad["properties"]["Description"] = {"type": "number", "number": 3}
        store.add_page(POST_DB, good)
        store.add_page(POST_DB, bad)
        service = await unit_env.get(PostService)

        with pytest.raises(MalformedRecordError) as exc_info:
            await service.query_page(PostCriteria())

        assert exc_info.value.record_id == "bad"
        assert exc_info.value.property_name == "Description"
