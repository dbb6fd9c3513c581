from .core import filter_by_generator, list_generators
from .filter import filter_blocks
from .reconstruct import reconstruct_schema
from .scan import scan_blocks
from .models import BLOCK_KEYWORDS, Block, BlockKind
from .errors import (
    GeneratorNotFoundError,
    SchemaLoadError,
    SchemaParseError,
    SchemaSliceError,
    UnbalancedBlockError,
)
from .system import filter_schema_file, load_schema, write_tempfile

__all__ = [
    "filter_by_generator",
    "list_generators",
    "scan_blocks",
    "filter_blocks",
    "reconstruct_schema",
    "Block",
    "BlockKind",
    "BLOCK_KEYWORDS",
    "load_schema",
    "filter_schema_file",
    "write_tempfile",
    "SchemaSliceError",
    "SchemaParseError",
    "UnbalancedBlockError",
    "GeneratorNotFoundError",
    "SchemaLoadError",
]
