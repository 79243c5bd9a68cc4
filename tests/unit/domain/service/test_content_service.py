"""Unit tests for ContentService."""

import pytest

from folio.adapter.error import StoreUnavailableError
from folio.adapter.notion import InMemoryContentStore
from folio.config import ImageSettings
from folio.adapter.image import MockImageProbe
from folio.domain.model import ImageBlock, ListBlock, UnsupportedBlock
from folio.domain.service import BlockService, ContentService
from folio.domain.value import BlockType, Page
from tests.conftest import make_block, make_image_block


def _service(store: InMemoryContentStore) -> ContentService:
    block_service = BlockService(image_probe=MockImageProbe(), image_settings=ImageSettings())
    return ContentService(content_store=store, block_service=block_service)


class FailingStore(InMemoryContentStore):
    """Store whose children listing is unavailable."""

    async def list_block_children(self, block_id, start_cursor=None) -> Page:
        raise StoreUnavailableError("Notion GET /blocks failed: 503", status_code=503)


class TestContentService:
    """Tests for ContentService."""

    @pytest.mark.asyncio
    async def test_children_pagination_follows_cursors(self):
        """Every page of children should be fetched, in order."""
        store = InMemoryContentStore(page_size=2)
        store.set_children(
            "page",
            [make_block(f"b{i}", "paragraph", f"text {i}") for i in range(5)],
        )

        blocks = await _service(store).fetch_children("page")

        assert [block.id for block in blocks] == ["b0", "b1", "b2", "b3", "b4"]
        assert store.calls.count(("list_block_children", "page")) == 3

    @pytest.mark.asyncio
    async def test_fetch_tree_attaches_nested_children(self):
        """Blocks with children should get their subtree attached recursively."""
        store = InMemoryContentStore()
        store.set_children("page", [make_block("toggle", "toggle", has_children=True)])
        store.set_children("toggle", [make_block("inner", "column_list", has_children=True)])
        store.set_children("inner", [make_block("leaf", "paragraph", "deep")])

        [toggle] = await _service(store).fetch_tree("page")

        assert toggle.children[0].id == "inner"
        assert toggle.children[0].children[0].id == "leaf"

    @pytest.mark.asyncio
    async def test_child_pages_and_unsupported_not_recursed(self):
        """child_page and unsupported blocks should never have children fetched."""
        store = InMemoryContentStore()
        store.set_children(
            "page",
            [
                make_block("child", "child_page", has_children=True),
                make_block("odd", "unsupported", has_children=True),
            ],
        )
        store.set_children("child", [make_block("secret", "paragraph")])

        blocks = await _service(store).fetch_tree("page")

        assert all(block.children == [] for block in blocks)
        assert isinstance(blocks[1], UnsupportedBlock)
        assert ("list_block_children", "child") not in store.calls
        assert ("list_block_children", "odd") not in store.calls

    @pytest.mark.asyncio
    async def test_page_content_normalized_and_grouped(self):
        """Page content should be enriched and grouped at the top level."""
        store = InMemoryContentStore()
        store.set_children(
            "page",
            [
                make_block("p", "paragraph", "intro"),
                make_block("li1", "bulleted_list_item", "one"),
                make_block("li2", "bulleted_list_item", "two", has_children=True),
                make_image_block("img", "https://img.example.com/a.png"),
            ],
        )
        store.set_children(
            "li2",
            [
                make_block("sub1", "bulleted_list_item", "nested"),
                make_image_block("nested-img", "https://img.example.com/b.png"),
            ],
        )

        content = await _service(store).get_page_content("page")

        assert [block.type for block in content] == [
            BlockType.PARAGRAPH,
            BlockType.BULLETED_LIST,
            BlockType.IMAGE,
        ]
        assert isinstance(content[1], ListBlock)
        li2 = content[1].children[1]
        # Nested sequences are not grouped but are normalized
        assert li2.children[0].type == BlockType.BULLETED_LIST_ITEM
        assert isinstance(li2.children[1], ImageBlock)
        assert li2.children[1].image.size is not None
        assert content[2].image.size is not None

    @pytest.mark.asyncio
    async def test_malformed_image_gets_default_size(self):
        """A broken image object should not fail the page content."""
        store = InMemoryContentStore()
        broken = make_image_block("img", None)
        broken["image"] = {"type": "external", "external": {"url": None}}
        store.set_children("page", [make_block("p", "paragraph", "before"), broken])

        content = await _service(store).get_page_content("page")

        assert [block.id for block in content] == ["p", "img"]
        assert isinstance(content[1], ImageBlock)
        assert (content[1].image.size.width, content[1].image.size.height) == (800, 500)
        assert content[1].image.placeholder is None

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self):
        """Store failures while listing children should not be swallowed."""
        with pytest.raises(StoreUnavailableError):
            await _service(FailingStore()).get_page_content("page")
