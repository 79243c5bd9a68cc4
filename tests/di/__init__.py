"""Mock providers for testing."""

from .image import MockImageProvider
from .notion import MockNotionProvider
from .container import build_test_container

__all__ = [
    "MockImageProvider",
    "MockNotionProvider",
    "build_test_container",
]
