from .blocks import BLOCK_KEYWORDS, Block, BlockKind

__all__ = ["Block", "BlockKind", "BLOCK_KEYWORDS"]
