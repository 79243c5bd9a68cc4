"""Repository interfaces."""

from folio.domain.repository.content_store import ContentStore, Record

__all__ = [
    "ContentStore",
    "Record",
]
