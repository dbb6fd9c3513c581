from dataclasses import dataclass


class BlockKind:
    """String constants for the kinds of top-level schema blocks."""

    GENERATOR = "generator"
    DATASOURCE = "datasource"
    MODEL = "model"
    ENUM = "enum"
    COMMENT = "comment"
    OTHER = "other"


# Keywords that introduce a brace-delimited block, tried in this order.
BLOCK_KEYWORDS = (
    BlockKind.GENERATOR,
    BlockKind.DATASOURCE,
    BlockKind.MODEL,
    BlockKind.ENUM,
)


@dataclass(frozen=True)
class Block:
    """A top-level region of the schema text, spanning whole lines."""

    kind: str
    text: str
    start_line: int  # zero-based, inclusive
    end_line: int    # zero-based, inclusive
    name: str = ""

    @property
    def is_declaration(self) -> bool:
        return self.kind in BLOCK_KEYWORDS
