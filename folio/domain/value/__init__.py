"""Domain value objects."""

from folio.domain.value.identifiers import BlockId, DatabaseId, PageId
from folio.domain.value.query import (
    CompoundFilter,
    Filter,
    FilterCondition,
    FilterKind,
    Page,
    PortfolioCriteria,
    PostCriteria,
    PropertyFilter,
    Sort,
    all_of,
    any_of,
)
from folio.domain.value.types import BlockType, SortDirection, SortOrder

__all__ = [
    # Identifiers
    "PageId",
    "BlockId",
    "DatabaseId",
    # Types
    "BlockType",
    "SortDirection",
    "SortOrder",
    # Query
    "CompoundFilter",
    "Filter",
    "FilterCondition",
    "FilterKind",
    "Page",
    "PortfolioCriteria",
    "PostCriteria",
    "PropertyFilter",
    "Sort",
    "all_of",
    "any_of",
]
