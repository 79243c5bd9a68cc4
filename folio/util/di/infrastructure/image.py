"""Image probe infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from folio.adapter.image import HttpImageProbe
from folio.config import ImageSettings
from folio.domain.service import ImageProbe
from folio.util.di.base import ProviderBase


class ImageProvider(ProviderBase):
    """Image probe component base."""

    __mock_component__ = "image"


class ProdImageProvider(ImageProvider):
    """Production image provider downloading over HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_image_probe(
        self, image_settings: ImageSettings
    ) -> AsyncIterator[ImageProbe]:
        """Provide HTTP image probe, closed on application shutdown."""
        probe = HttpImageProbe(
            timeout=image_settings.fetch_timeout,
            placeholder_size=image_settings.placeholder_size,
        )
        yield probe
        await probe.aclose()
