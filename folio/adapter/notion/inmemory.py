"""In-memory content store for testing."""

from typing import Any, Optional

from folio.domain.repository import ContentStore, Record
from folio.domain.value import (
    BlockId,
    CompoundFilter,
    DatabaseId,
    Filter,
    FilterCondition,
    FilterKind,
    Page,
    PageId,
    PropertyFilter,
    Sort,
    SortDirection,
)

# Notion's default (and maximum) page size
DEFAULT_PAGE_SIZE = 100


class InMemoryContentStore(ContentStore):
    """In-memory implementation of ContentStore for testing.

    Evaluates filters, sorts and cursors the same way the Notion API does for
    the subset of the query language this project uses. Cursors are stringified
    offsets. Every call is recorded in ``calls`` as ``(method, id)``.
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._databases: dict[str, Record] = {}
        self._pages: dict[str, Record] = {}
        self._database_pages: dict[str, list[str]] = {}
        self._children: dict[str, list[Record]] = {}
        self.page_size = page_size
        self.calls: list[tuple[str, str]] = []

    # Seeding

    def add_database(
        self, database_id: str, properties: Optional[dict[str, Any]] = None
    ) -> None:
        """Register a database with its property schema."""
        self._databases[database_id] = {
            "object": "database",
            "id": database_id,
            "properties": properties or {},
        }
        self._database_pages.setdefault(database_id, [])

    def add_page(self, database_id: str, page: Record) -> None:
        """Add a page record to a database."""
        if database_id not in self._databases:
            self.add_database(database_id)
        self._pages[page["id"]] = page
        self._database_pages[database_id].append(page["id"])

    def set_children(self, block_id: str, blocks: list[Record]) -> None:
        """Set the ordered children of a page or block."""
        self._children[block_id] = list(blocks)

    # ContentStore

    async def query_database(
        self,
        database_id: DatabaseId,
        filter: Optional[Filter] = None,
        sorts: Optional[list[Sort]] = None,
        page_size: Optional[int] = None,
        start_cursor: Optional[str] = None,
    ) -> Page[Record]:
        """Filter, sort and slice the pages of a database."""
        self.calls.append(("query_database", database_id))
        records = [self._pages[pid] for pid in self._database_pages.get(database_id, [])]

        if filter is not None:
            records = [r for r in records if _matches(r, filter)]

        # Apply sorts last-to-first so the first sort is the primary key
        for sort in reversed(sorts or []):
            records.sort(
                key=lambda r, s=sort: _sort_key(r, s),
                reverse=sort.direction == SortDirection.DESCENDING,
            )

        return _slice(records, start_cursor, page_size or self.page_size)

    async def retrieve_page(self, page_id: PageId) -> Optional[Record]:
        """Find a page by ID."""
        self.calls.append(("retrieve_page", page_id))
        return self._pages.get(page_id)

    async def retrieve_database(self, database_id: DatabaseId) -> Record:
        """Return the database record (KeyError if never added)."""
        self.calls.append(("retrieve_database", database_id))
        return self._databases[database_id]

    async def list_block_children(
        self, block_id: BlockId | PageId, start_cursor: Optional[str] = None
    ) -> Page[Record]:
        """Slice the children of a block."""
        self.calls.append(("list_block_children", block_id))
        return _slice(
            self._children.get(block_id, []), start_cursor, self.page_size
        )


def _slice(records: list[Record], start_cursor: Optional[str], size: int) -> Page[Record]:
    start = int(start_cursor) if start_cursor else 0
    end = start + size
    next_cursor = str(end) if end < len(records) else None
    return Page[Record](items=records[start:end], next_cursor=next_cursor)


def _plain_text(segments: list[dict[str, Any]]) -> str:
    return "".join(segment.get("plain_text", "") for segment in segments)


def _matches(record: Record, filter: Filter) -> bool:
    if isinstance(filter, CompoundFilter):
        results = (_matches(record, f) for f in filter.filters)
        return all(results) if filter.operator == "and" else any(results)
    return _matches_property(record, filter)


def _matches_property(record: Record, clause: PropertyFilter) -> bool:
    prop = record.get("properties", {}).get(clause.property)
    if prop is None:
        return False

    if clause.kind == FilterKind.CHECKBOX:
        return prop.get("checkbox") is clause.value

    if clause.kind == FilterKind.MULTI_SELECT:
        names = [option.get("name") for option in prop.get("multi_select", [])]
        return clause.value in names

    if clause.kind in (FilterKind.TITLE, FilterKind.RICH_TEXT):
        text = _plain_text(prop.get(clause.kind.value, []))
    else:
        text = prop.get("url") or ""

    if clause.condition == FilterCondition.EQUALS:
        return text == clause.value
    # Notion text "contains" is case-insensitive
    return str(clause.value).lower() in text.lower()


def _sort_key(record: Record, sort: Sort) -> Any:
    if sort.timestamp is not None:
        return record.get(sort.timestamp) or ""

    prop = record.get("properties", {}).get(sort.property, {})
    prop_type = prop.get("type")
    if prop_type == "date":
        return (prop.get("date") or {}).get("start") or ""
    if prop_type in ("title", "rich_text"):
        return _plain_text(prop.get(prop_type, []))
    return prop.get(prop_type) or ""
