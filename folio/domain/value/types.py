"""Enumerations shared across the domain."""

from enum import Enum


class SortOrder(str, Enum):
    """Caller-facing sort order for listings."""

    ASC = "asc"
    DESC = "desc"

    @property
    def direction(self) -> "SortDirection":
        """Store-native direction for this order."""
        if self is SortOrder.ASC:
            return SortDirection.ASCENDING
        return SortDirection.DESCENDING


class SortDirection(str, Enum):
    """Store-native sort direction."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class BlockType(str, Enum):
    """Every block type the content store emits, plus the synthetic list containers.

    See https://developers.notion.com/reference/block
    """

    PARAGRAPH = "paragraph"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    QUOTE = "quote"
    TO_DO = "to_do"
    TOGGLE = "toggle"
    TEMPLATE = "template"
    SYNCED_BLOCK = "synced_block"
    CHILD_PAGE = "child_page"
    CHILD_DATABASE = "child_database"
    EQUATION = "equation"
    CODE = "code"
    CALLOUT = "callout"
    DIVIDER = "divider"
    BREADCRUMB = "breadcrumb"
    TABLE_OF_CONTENTS = "table_of_contents"
    COLUMN_LIST = "column_list"
    COLUMN = "column"
    LINK_TO_PAGE = "link_to_page"
    TABLE = "table"
    TABLE_ROW = "table_row"
    EMBED = "embed"
    BOOKMARK = "bookmark"
    IMAGE = "image"
    VIDEO = "video"
    PDF = "pdf"
    FILE = "file"
    AUDIO = "audio"
    LINK_PREVIEW = "link_preview"
    UNSUPPORTED = "unsupported"

    # Synthetic containers, never returned by the store
    BULLETED_LIST = "bulleted_list"
    NUMBERED_LIST = "numbered_list"
