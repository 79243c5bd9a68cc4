"""Domain model entities."""

from folio.domain.model.block import (
    Block,
    BlockBase,
    ContentBlock,
    ImageBlock,
    ImagePayload,
    ImageSize,
    ListBlock,
    UnsupportedBlock,
    block_from_record,
)
from folio.domain.model.portfolio import Portfolio, PortfolioDetail
from folio.domain.model.post import Post, PostDetail

__all__ = [
    "Block",
    "BlockBase",
    "ContentBlock",
    "ImageBlock",
    "ImagePayload",
    "ImageSize",
    "ListBlock",
    "UnsupportedBlock",
    "block_from_record",
    "Post",
    "PostDetail",
    "Portfolio",
    "PortfolioDetail",
]
