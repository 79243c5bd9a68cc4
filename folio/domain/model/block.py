"""Content blocks.

A page's body is a tree of blocks. ``Block`` is a closed tagged union: the
variant, and therefore the payload shape, is decided by the ``type`` tag.

- ``ContentBlock``: every store type that is passed through untouched
- ``ImageBlock``: images, enriched with size and blur placeholder
- ``ListBlock``: synthetic bulleted/numbered list containers
- ``UnsupportedBlock``: the store's ``unsupported`` type and unknown tags
"""

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag, ValidationError

from folio.domain.error import MalformedRecordError
from folio.domain.model.common import DomainModel
from folio.domain.value import BlockId, BlockType

# List item type -> synthetic container type
LIST_CONTAINER_TYPES: dict[BlockType, BlockType] = {
    BlockType.BULLETED_LIST_ITEM: BlockType.BULLETED_LIST,
    BlockType.NUMBERED_LIST_ITEM: BlockType.NUMBERED_LIST,
}

# Types whose children are never fetched, whatever has_children says
NON_RECURSIVE_TYPES: frozenset[BlockType] = frozenset(
    {BlockType.UNSUPPORTED, BlockType.CHILD_PAGE}
)


class BlockBase(DomainModel):
    """Fields shared by every block variant."""

    id: BlockId
    type: BlockType
    has_children: bool = False
    children: list["Block"] = Field(default_factory=list)

    @property
    def can_have_children(self) -> bool:
        return self.type not in NON_RECURSIVE_TYPES


class ContentBlock(BlockBase):
    """Block rendered straight from the store's type-specific object."""

    payload: dict[str, Any] = Field(default_factory=dict)


class ImageSize(DomainModel):
    """Intrinsic image dimensions in pixels."""

    width: int
    height: int


class ExternalFile(DomainModel):
    """File hosted outside the store."""

    url: str


class HostedFile(DomainModel):
    """File hosted by the store behind a short-lived signed URL."""

    url: str
    expiry_time: datetime | None = None


class ImagePayload(DomainModel):
    """Image object as returned by the store plus enrichment fields."""

    type: str | None = None  # "external" or "file"
    external: ExternalFile | None = None
    file: HostedFile | None = None
    caption: list[dict[str, Any]] = Field(default_factory=list)

    # Set by the block normalizer
    size: ImageSize | None = None
    placeholder: str | None = None

    def resolve_url(self) -> str | None:
        """Return the URL the image bytes can be downloaded from."""
        if self.type == "external":
            return self.external.url if self.external else None
        return self.file.url if self.file else None


class ImageBlock(BlockBase):
    """Image block."""

    type: Literal[BlockType.IMAGE] = BlockType.IMAGE
    image: ImagePayload


class ListBlock(BlockBase):
    """Container for a run of consecutive list items of one kind."""

    type: Literal[BlockType.BULLETED_LIST, BlockType.NUMBERED_LIST]


class UnsupportedBlock(BlockBase):
    """Block the pipeline does not know how to render."""

    type: Literal[BlockType.UNSUPPORTED] = BlockType.UNSUPPORTED
    original_type: str
    payload: dict[str, Any] = Field(default_factory=dict)


_VARIANT_TAGS: dict[BlockType, str] = {
    BlockType.IMAGE: "image",
    BlockType.BULLETED_LIST: "list",
    BlockType.NUMBERED_LIST: "list",
    BlockType.UNSUPPORTED: "unsupported",
}


def _block_tag(value: Any) -> str:
    """Pick the union variant for a dict or an already-built block."""
    raw = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    try:
        block_type = BlockType(raw)
    except ValueError:
        return "unsupported"
    return _VARIANT_TAGS.get(block_type, "content")


Block = Annotated[
    Union[
        Annotated[ContentBlock, Tag("content")],
        Annotated[ImageBlock, Tag("image")],
        Annotated[ListBlock, Tag("list")],
        Annotated[UnsupportedBlock, Tag("unsupported")],
    ],
    Discriminator(_block_tag),
]

for _model in (BlockBase, ContentBlock, ImageBlock, ListBlock, UnsupportedBlock):
    _model.model_rebuild()


def block_from_record(record: dict[str, Any]) -> Block:
    """Build a block (without children) from a raw store block object.

    Raises:
        MalformedRecordError: If the record has no id
    """
    block_id = record.get("id")
    if not isinstance(block_id, str):
        raise MalformedRecordError("<unknown>", "id", "string")

    raw_type = record.get("type")
    has_children = bool(record.get("has_children", False))

    try:
        block_type = BlockType(raw_type)
    except ValueError:
        block_type = None

    if block_type is BlockType.IMAGE:
        return ImageBlock(
            id=BlockId(block_id),
            has_children=has_children,
            image=_image_payload(record.get("image")),
        )

    if block_type is None or block_type in (
        BlockType.UNSUPPORTED,
        BlockType.BULLETED_LIST,
        BlockType.NUMBERED_LIST,
    ):
        payload = record.get(raw_type) if isinstance(raw_type, str) else None
        return UnsupportedBlock(
            id=BlockId(block_id),
            has_children=has_children,
            original_type=str(raw_type),
            payload=payload if isinstance(payload, dict) else {},
        )

    payload = record.get(block_type.value)
    return ContentBlock(
        id=BlockId(block_id),
        type=block_type,
        has_children=has_children,
        payload=payload if isinstance(payload, dict) else {},
    )


def _image_payload(raw: Any) -> ImagePayload:
    """Parse an image object; an unparseable one yields an image without a URL."""
    try:
        return ImagePayload.model_validate(raw or {})
    except ValidationError:
        return ImagePayload()
