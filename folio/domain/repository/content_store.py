"""Content store interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from folio.domain.value import BlockId, DatabaseId, Filter, Page, PageId, Sort

# Raw store object (page, database or block) as decoded JSON
Record = dict[str, Any]


class ContentStore(ABC):
    """Read-only access to the external content store.

    Returns raw store records; mapping them to domain objects is the job of
    the domain services. Implementations live in the adapter layer.
    """

    @abstractmethod
    async def query_database(
        self,
        database_id: DatabaseId,
        filter: Optional[Filter] = None,
        sorts: Optional[list[Sort]] = None,
        page_size: Optional[int] = None,
        start_cursor: Optional[str] = None,
    ) -> Page[Record]:
        """Query one page of records from a database.

        Args:
            database_id: Database to query
            filter: Filter expression (None for all records)
            sorts: Sorts, applied in order
            page_size: Maximum number of records (store default if None)
            start_cursor: Cursor returned by the previous page

        Returns:
            Records plus the cursor of the next page (None when exhausted)
        """
        pass

    @abstractmethod
    async def retrieve_page(self, page_id: PageId) -> Optional[Record]:
        """Retrieve a single page by ID.

        Args:
            page_id: Page identifier

        Returns:
            The page record if found, None otherwise
        """
        pass

    @abstractmethod
    async def retrieve_database(self, database_id: DatabaseId) -> Record:
        """Retrieve a database object, including its property schema.

        Args:
            database_id: Database identifier

        Returns:
            Database record
        """
        pass

    @abstractmethod
    async def list_block_children(
        self, block_id: BlockId | PageId, start_cursor: Optional[str] = None
    ) -> Page[Record]:
        """List one page of the immediate children of a block or page.

        Args:
            block_id: Parent block or page
            start_cursor: Cursor returned by the previous page

        Returns:
            Child block records plus the cursor of the next page
        """
        pass
