"""Strongly typed identifiers for content store objects.

The store assigns every page, block and database a UUID string; NewType
keeps the three from being mixed up in signatures.
"""

from typing import NewType

PageId = NewType("PageId", str)
BlockId = NewType("BlockId", str)
DatabaseId = NewType("DatabaseId", str)
