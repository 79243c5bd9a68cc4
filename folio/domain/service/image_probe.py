"""Image probe interface."""

from abc import ABC, abstractmethod

from folio.domain.model.common import DomainModel


class ImageMetadata(DomainModel):
    """What a probe learned about an image."""

    width: int
    height: int
    placeholder: str  # data URL of a tiny blurred preview


class ImageProbe(ABC):
    """Downloads an image and derives its size and blur placeholder."""

    @abstractmethod
    async def probe(self, url: str) -> ImageMetadata:
        """Probe an image.

        Args:
            url: Image URL

        Returns:
            Intrinsic size and placeholder

        Raises:
            TransientFetchError: If the image cannot be downloaded or decoded
                within the time budget
        """
        pass
