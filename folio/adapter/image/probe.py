"""Image probe implementations.

Downloads an image, reads its intrinsic size with Pillow and renders a tiny
blurred WEBP preview that the front end shows while the real image loads.
"""

import asyncio
import base64
from io import BytesIO

import httpx
import logfire
from PIL import Image, ImageFilter

from folio.domain.error import TransientFetchError
from folio.domain.service.image_probe import ImageMetadata, ImageProbe


def describe_image(payload: bytes, placeholder_size: int = 16) -> ImageMetadata:
    """Read size and build a placeholder from raw image bytes.

    Args:
        payload: Encoded image bytes
        placeholder_size: Longest edge of the preview in pixels

    Returns:
        Image metadata

    Raises:
        OSError: If Pillow cannot decode the payload
    """
    with Image.open(BytesIO(payload)) as image:
        width, height = image.size

        preview = image.convert("RGB")
        preview.thumbnail((placeholder_size, placeholder_size))
        preview = preview.filter(ImageFilter.GaussianBlur(radius=1))

        buffer = BytesIO()
        preview.save(buffer, format="WEBP", quality=20)

    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return ImageMetadata(
        width=int(width),
        height=int(height),
        placeholder=f"data:image/webp;base64,{encoded}",
    )


class HttpImageProbe(ImageProbe):
    """Probe that downloads images over HTTP."""

    def __init__(
        self,
        timeout: float = 5.0,
        placeholder_size: int = 16,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize HTTP image probe.

        Args:
            timeout: Time budget in seconds for download and decode
            placeholder_size: Longest edge of the preview in pixels
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.timeout = timeout
        self.placeholder_size = placeholder_size
        self._client = httpx.AsyncClient(follow_redirects=True, transport=transport)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def probe(self, url: str) -> ImageMetadata:
        """Download and describe an image within the time budget."""
        with logfire.span("image_probe.probe", url=url):
            try:
                return await asyncio.wait_for(self._probe(url), timeout=self.timeout)
            except asyncio.TimeoutError as e:
                raise TransientFetchError(
                    f"Timed out after {self.timeout}s fetching {url}"
                ) from e

    async def _probe(self, url: str) -> ImageMetadata:
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TransientFetchError(f"Failed to download {url}: {e}") from e

        try:
            return await asyncio.to_thread(
                describe_image, response.content, self.placeholder_size
            )
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise TransientFetchError(f"Failed to decode {url}: {e}") from e


class MockImageProbe(ImageProbe):
    """Mock image probe for testing.

    Returns canned metadata without network access. Per-URL results can be
    configured; an exception instance configured for a URL is raised instead.
    """

    DEFAULT = ImageMetadata(
        width=1200,
        height=800,
        placeholder="data:image/webp;base64,UklGRhYAAABXRUJQVlA4TAoAAAAvAAAAAAfQ//73",
    )

    def __init__(
        self, results: dict[str, ImageMetadata | Exception] | None = None
    ) -> None:
        self.results = dict(results or {})
        self.probed: list[str] = []

    async def probe(self, url: str) -> ImageMetadata:
        """Return the configured result for a URL."""
        self.probed.append(url)
        result = self.results.get(url, self.DEFAULT)
        if isinstance(result, Exception):
            raise result
        return result
