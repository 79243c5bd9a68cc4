"""Page content domain service."""

import asyncio

import logfire

from folio.domain.model import Block, block_from_record
from folio.domain.repository import ContentStore
from folio.domain.value import BlockId, PageId

from .base import Service
from .block_service import BlockService
from .list_grouper import group_list_items
from .pagination import fetch_all


class ContentService(Service):
    """Domain service assembling the block tree of a page."""

    def __init__(self, content_store: ContentStore, block_service: BlockService) -> None:
        """Initialize content service.

        Args:
            content_store: Store to read blocks from
            block_service: Block normalizer
        """
        self.content_store = content_store
        self.block_service = block_service

    async def get_page_content(self, page_id: PageId) -> list[Block]:
        """Fetch, normalize and group the content of a page.

        Args:
            page_id: Page to read

        Returns:
            Top-level blocks with list items grouped and descendants attached

        Raises:
            StoreUnavailableError: If listing any block's children fails
        """
        with logfire.span("content_service.get_page_content", page_id=page_id):
            tree = await self.fetch_tree(page_id)
            normalized = await self.block_service.normalize_tree(tree)
            content = group_list_items(normalized)
            logfire.info(
                "Page content assembled", page_id=page_id, block_count=len(content)
            )
            return content

    async def fetch_tree(self, block_id: BlockId | PageId) -> list[Block]:
        """Fetch the children of a block and, recursively, their subtrees.

        Sibling subtrees are fetched concurrently; each node's own children
        are paged through sequentially.
        """
        blocks = await self.fetch_children(block_id)
        return list(await asyncio.gather(*(self._attach_children(b) for b in blocks)))

    async def fetch_children(self, block_id: BlockId | PageId) -> list[Block]:
        """Fetch every immediate child of a block, following cursors."""
        records = await fetch_all(
            lambda cursor: self.content_store.list_block_children(block_id, cursor)
        )
        return [block_from_record(record) for record in records]

    async def _attach_children(self, block: Block) -> Block:
        # child_page and unsupported blocks are leaves whatever has_children says
        if not (block.has_children and block.can_have_children):
            return block
        children = await self.fetch_tree(block.id)
        return block.model_copy(update={"children": children})
