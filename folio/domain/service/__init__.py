"""Domain services."""

from .base import Service
from .block_service import BlockService
from .content_service import ContentService
from .image_probe import ImageMetadata, ImageProbe
from .list_grouper import group_list_items
from .portfolio_service import PortfolioService
from .post_service import PostService
from .record_mapper import RecordMapper

__all__ = [
    "BlockService",
    "ContentService",
    "ImageMetadata",
    "ImageProbe",
    "PortfolioService",
    "PostService",
    "RecordMapper",
    "Service",
    "group_list_items",
]
