"""Unit tests for the in-memory content store."""

import pytest

from folio.adapter.notion import InMemoryContentStore
from folio.domain.value import (
    FilterCondition,
    FilterKind,
    PropertyFilter,
    Sort,
    SortDirection,
    any_of,
)
from tests.conftest import POST_DB, make_post_page


def _title(condition: FilterCondition, value: str) -> PropertyFilter:
    return PropertyFilter(property="Name", kind=FilterKind.TITLE, condition=condition, value=value)


@pytest.fixture
def store() -> InMemoryContentStore:
    store = InMemoryContentStore(page_size=2)
    store.add_page(POST_DB, make_post_page("a", "Async Python", "a", created="2024-01-03T00:00:00.000Z"))
    store.add_page(POST_DB, make_post_page("b", "Rust tips", "b", created="2024-01-01T00:00:00.000Z"))
    store.add_page(POST_DB, make_post_page("c", "Python typing", "c", created="2024-01-02T00:00:00.000Z"))
    return store


class TestInMemoryContentStore:
    """Tests for InMemoryContentStore query semantics."""

    @pytest.mark.asyncio
    async def test_text_contains_is_case_insensitive(self, store):
        page = await store.query_database(
            POST_DB, filter=_title(FilterCondition.CONTAINS, "python")
        )

        assert [r["id"] for r in page.items] == ["a", "c"]

    @pytest.mark.asyncio
    async def test_or_filter(self, store):
        page = await store.query_database(
            POST_DB,
            filter=any_of(
                _title(FilterCondition.EQUALS, "Rust tips"),
                _title(FilterCondition.EQUALS, "Async Python"),
            ),
        )

        assert {r["id"] for r in page.items} == {"a", "b"}

    @pytest.mark.asyncio
    async def test_sort_and_cursor(self, store):
        """Sorted results should be sliced by page size with a resume cursor."""
        sorts = [Sort(property="Created", direction=SortDirection.ASCENDING)]

        first = await store.query_database(POST_DB, sorts=sorts)
        second = await store.query_database(
            POST_DB, sorts=sorts, start_cursor=first.next_cursor
        )

        assert [r["id"] for r in first.items] == ["b", "c"]
        assert [r["id"] for r in second.items] == ["a"]
        assert second.next_cursor is None
