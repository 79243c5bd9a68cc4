"""Unit tests for QueryPostsUseCase."""

import pytest

from folio.adapter.notion import InMemoryContentStore
from folio.application.usecase.post import QueryPostsRequest, QueryPostsUseCase
from tests.conftest import POST_DB, make_post_page
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestQueryPostsUseCase:
    """Tests for QueryPostsUseCase."""

    @pytest.mark.asyncio
    async def test_pages_through_posts(self, unit_env):
        """Following next_cursor should visit every matching post once."""
        # Arrange
        store = await unit_env.get(InMemoryContentStore)
        for day in range(1, 6):
            store.add_page(
                POST_DB,
                make_post_page(
                    f"p{day}",
                    f"Post {day}",
                    f"post-{day}",
                    tags=["python"] if day % 2 else ["rust"],
                    created=f"2024-03-{day:02d}T00:00:00.000Z",
                ),
            )
        use_case = await unit_env.get(QueryPostsUseCase)

        # Act
        first = await use_case.execute(QueryPostsRequest(tags=["python"], limit=2))
        second = await use_case.execute(
            QueryPostsRequest(tags=["python"], limit=2, cursor=first.next_cursor)
        )

        # Assert
        assert [post.slug for post in first.posts] == ["post-5", "post-3"]
        assert [post.slug for post in second.posts] == ["post-1"]
        assert second.next_cursor is None

    @pytest.mark.asyncio
    async def test_search(self, unit_env):
        """Search should match the description too."""
        store = await unit_env.get(InMemoryContentStore)
        store.add_page(
            POST_DB, make_post_page("p1", "Notes", "notes", description="About asyncio")
        )
        store.add_page(POST_DB, make_post_page("p2", "Other", "other"))
        use_case = await unit_env.get(QueryPostsUseCase)

        response = await use_case.execute(QueryPostsRequest(search="AsyncIO"))

        assert [post.slug for post in response.posts] == ["notes"]
