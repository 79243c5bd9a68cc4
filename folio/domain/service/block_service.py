"""Block normalization domain service."""

import asyncio

import logfire

from folio.config import ImageSettings
from folio.domain.error import TransientFetchError
from folio.domain.model import Block, ImageBlock, ImageSize, UnsupportedBlock
from folio.domain.service.image_probe import ImageMetadata, ImageProbe

from .base import Service


class BlockService(Service):
    """Domain service enriching blocks for display.

    Every block is returned as-is except images, which get their intrinsic
    size and (for images large enough to benefit) a blur placeholder.
    """

    def __init__(self, image_probe: ImageProbe, image_settings: ImageSettings) -> None:
        """Initialize block service.

        Args:
            image_probe: Probe used to size images
            image_settings: Fallback size and placeholder thresholds
        """
        self.image_probe = image_probe
        self.image_settings = image_settings

    async def normalize_tree(self, blocks: list[Block]) -> list[Block]:
        """Normalize blocks and all their descendants, siblings concurrently."""
        return list(await asyncio.gather(*(self._normalize_subtree(b) for b in blocks)))

    async def _normalize_subtree(self, block: Block) -> Block:
        normalized = await self.normalize(block)
        if not normalized.children:
            return normalized
        children = await self.normalize_tree(normalized.children)
        return normalized.model_copy(update={"children": children})

    async def normalize(self, block: Block) -> Block:
        """Normalize a single block (children untouched).

        Never raises: image failures fall back to the default size.
        """
        if isinstance(block, ImageBlock):
            return await self._normalize_image(block)

        if isinstance(block, UnsupportedBlock):
            logfire.debug(
                "Unsupported block passed through",
                block_id=block.id,
                original_type=block.original_type,
            )
        return block

    async def _normalize_image(self, block: ImageBlock) -> ImageBlock:
        with logfire.span("block_service.normalize_image", block_id=block.id):
            metadata = await self._probe(block)

            if metadata is None:
                size = ImageSize(
                    width=self.image_settings.default_width,
                    height=self.image_settings.default_height,
                )
                placeholder = None
            else:
                size = ImageSize(width=metadata.width, height=metadata.height)
                threshold = self.image_settings.placeholder_min_dimension
                large_enough = metadata.width > threshold and metadata.height > threshold
                placeholder = metadata.placeholder if large_enough else None

            image = block.image.model_copy(
                update={"size": size, "placeholder": placeholder}
            )
            return block.model_copy(update={"image": image})

    async def _probe(self, block: ImageBlock) -> ImageMetadata | None:
        url = block.image.resolve_url()
        if not url:
            logfire.warn("Image block has no URL, using default size", block_id=block.id)
            return None

        try:
            return await self.image_probe.probe(url)
        except TransientFetchError as e:
            logfire.warn(
                "Image probe failed, using default size",
                block_id=block.id,
                url=url,
                error=str(e),
            )
            return None
