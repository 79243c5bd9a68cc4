"""Notion content store adapter."""

from .client import NotionContentStore
from .inmemory import InMemoryContentStore

__all__ = ["NotionContentStore", "InMemoryContentStore"]
