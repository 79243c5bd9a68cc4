"""Notion REST API content store.

Implements ContentStore on top of the public Notion API
(https://developers.notion.com/reference) using a single shared httpx client.
"""

from typing import Any, Optional

import httpx
import logfire

from folio.adapter.error import StoreUnavailableError
from folio.domain.repository import ContentStore, Record
from folio.domain.value import BlockId, DatabaseId, Filter, Page, PageId, Sort

# Maximum page size accepted by the block children endpoint
CHILDREN_PAGE_SIZE = 100


class NotionContentStore(ContentStore):
    """ContentStore backed by the Notion API."""

    def __init__(
        self,
        api_token: str,
        base_url: str = "https://api.notion.com/v1",
        api_version: str = "2022-06-28",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Notion content store.

        Args:
            api_token: Integration token
            base_url: API base URL
            api_version: Value of the Notion-Version header
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {api_token}",
                "Notion-Version": api_version,
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def query_database(
        self,
        database_id: DatabaseId,
        filter: Optional[Filter] = None,
        sorts: Optional[list[Sort]] = None,
        page_size: Optional[int] = None,
        start_cursor: Optional[str] = None,
    ) -> Page[Record]:
        """Query one page of records from a database."""
        body: dict[str, Any] = {}
        if filter is not None:
            body["filter"] = filter.to_payload()
        if sorts:
            body["sorts"] = [sort.to_payload() for sort in sorts]
        if page_size is not None:
            body["page_size"] = page_size
        if start_cursor:
            body["start_cursor"] = start_cursor

        with logfire.span(
            "notion.query_database",
            database_id=database_id,
            page_size=page_size,
            has_cursor=start_cursor is not None,
        ):
            data = await self._request(
                "POST", f"/databases/{database_id}/query", json=body
            )
            return self._to_page(data)

    async def retrieve_page(self, page_id: PageId) -> Optional[Record]:
        """Retrieve a single page, returning None when Notion reports 404."""
        with logfire.span("notion.retrieve_page", page_id=page_id):
            try:
                return await self._request("GET", f"/pages/{page_id}")
            except StoreUnavailableError as e:
                if e.status_code == 404:
                    return None
                raise

    async def retrieve_database(self, database_id: DatabaseId) -> Record:
        """Retrieve a database and its property schema."""
        with logfire.span("notion.retrieve_database", database_id=database_id):
            return await self._request("GET", f"/databases/{database_id}")

    async def list_block_children(
        self, block_id: BlockId | PageId, start_cursor: Optional[str] = None
    ) -> Page[Record]:
        """List one page of a block's children."""
        params: dict[str, Any] = {"page_size": CHILDREN_PAGE_SIZE}
        if start_cursor:
            params["start_cursor"] = start_cursor

        with logfire.span(
            "notion.list_block_children",
            block_id=block_id,
            has_cursor=start_cursor is not None,
        ):
            data = await self._request(
                "GET", f"/blocks/{block_id}/children", params=params
            )
            return self._to_page(data)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Record:
        """Send a request and decode the JSON body.

        Raises:
            StoreUnavailableError: On transport errors and non-200 responses
        """
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logfire.error("Notion request failed", method=method, path=path, error=str(e))
            raise StoreUnavailableError(f"Notion request failed: {e}") from e

        if response.status_code != 200:
            code = self._error_code(response)
            log = logfire.warn if response.status_code == 404 else logfire.error
            log(
                "Notion returned an error",
                method=method,
                path=path,
                status_code=response.status_code,
                code=code,
            )
            raise StoreUnavailableError(
                f"Notion {method} {path} failed: {response.status_code} {code or ''}".strip(),
                status_code=response.status_code,
                code=code,
            )

        return response.json()

    @staticmethod
    def _error_code(response: httpx.Response) -> str | None:
        """Extract Notion's error code (e.g. 'object_not_found') if present."""
        try:
            body = response.json()
        except ValueError:
            return None
        return body.get("code") if isinstance(body, dict) else None

    @staticmethod
    def _to_page(data: Record) -> Page[Record]:
        next_cursor = data.get("next_cursor") if data.get("has_more") else None
        return Page[Record](items=data.get("results", []), next_cursor=next_cursor)
