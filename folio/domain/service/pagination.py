"""Cursor pagination helpers.

Both helpers take a ``fetch(cursor)`` callable returning one ``Page`` so the
same traversal works for database queries and block children.
"""

from typing import Awaitable, Callable, Optional, TypeVar

from folio.domain.value import Page

T = TypeVar("T")


async def fetch_nth_page(
    fetch: Callable[[Optional[str]], Awaitable[Page[T]]], page: int
) -> list[T]:
    """Return the items of the page-th page (1-based).

    Advances the cursor ``page - 1`` times from the start. Returns an empty
    list when the store runs out of pages first.
    """
    cursor: Optional[str] = None
    for _ in range(page - 1):
        result = await fetch(cursor)
        if result.next_cursor is None:
            return []
        cursor = result.next_cursor
    return (await fetch(cursor)).items


async def fetch_all(
    fetch: Callable[[Optional[str]], Awaitable[Page[T]]],
) -> list[T]:
    """Follow cursors until exhausted and concatenate every page."""
    items: list[T] = []
    cursor: Optional[str] = None
    while True:
        result = await fetch(cursor)
        items.extend(result.items)
        if result.next_cursor is None:
            return items
        cursor = result.next_cursor
