from .base import SchemaSliceError


class SchemaParseError(SchemaSliceError):
    """The schema text could not be split into top-level blocks."""


class UnbalancedBlockError(SchemaParseError):
    """A block declaration opened a brace that is never closed."""

    def __init__(self, kind: str, name: str, start_line: int):
        self.kind = kind
        self.name = name
        self.start_line = start_line
        # start_line is zero-based; messages are for humans
        super().__init__(
            f"unmatched braces in {kind} '{name}' starting at line {start_line + 1}"
        )
