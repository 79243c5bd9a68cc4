"""Infrastructure providers."""

# Import bases
from .image import ImageProvider
from .notion import NotionProvider

# Import implementations (needed for __subclasses__())
from .image import ProdImageProvider  # noqa: F401
from .notion import ProdNotionProvider  # noqa: F401

__all__ = [
    "ImageProvider",
    "NotionProvider",
    "ProdImageProvider",
    "ProdNotionProvider",
]
