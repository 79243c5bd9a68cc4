"""Grouping of consecutive list items into list containers.

The store returns list items as flat siblings. Renderers need them wrapped
in a container (``<ul>``/``<ol>``), so runs of consecutive items of the same
kind are folded into a synthetic ``bulleted_list``/``numbered_list`` block.
"""

from functools import reduce

from folio.domain.model import Block, ListBlock
from folio.domain.model.block import LIST_CONTAINER_TYPES
from folio.domain.value import BlockId


def _append(output: list[Block], block: Block) -> list[Block]:
    container_type = LIST_CONTAINER_TYPES.get(block.type)
    if container_type is None:
        output.append(block)
        return output

    previous = output[-1] if output else None
    if isinstance(previous, ListBlock) and previous.type == container_type:
        output[-1] = previous.model_copy(
            update={"children": [*previous.children, block]}
        )
    else:
        output.append(
            ListBlock(
                id=BlockId(f"{block.id}:{container_type.value}"),
                type=container_type,
                has_children=True,
                children=[block],
            )
        )
    return output


def group_list_items(blocks: list[Block]) -> list[Block]:
    """Wrap runs of consecutive same-kind list items in list containers.

    Non-list blocks pass through unchanged and interrupt a run. Only the
    given sequence is grouped; children are left as they are. The input list
    is not modified.

    Example:
        [P, LI1, LI2, H, LI3] -> [P, List[LI1, LI2], H, List[LI3]]
    """
    return reduce(_append, blocks, [])
