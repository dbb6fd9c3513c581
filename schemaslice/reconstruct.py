# schemaslice/reconstruct.py
from typing import List, Sequence

from .models.blocks import Block, BlockKind


def _wants_separator(next_block: Block) -> bool:
    # Comments hug whatever follows the previous block; empty text adds nothing.
    return next_block.kind != BlockKind.COMMENT and next_block.text.strip() != ""


def reconstruct_schema(blocks: Sequence[Block]) -> str:
    """
    Join blocks back into schema text.

    One blank line goes between consecutive blocks, except before a comment
    block or a block whose text is blank. Nothing is appended after the last
    block.
    """
    parts: List[str] = []
    for i, block in enumerate(blocks):
        parts.append(block.text)
        if i < len(blocks) - 1 and _wants_separator(blocks[i + 1]):
            parts.append("")
    return "\n".join(parts)
