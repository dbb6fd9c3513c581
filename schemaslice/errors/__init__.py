from .base import SchemaSliceError
from .generator import GeneratorNotFoundError
from .load import SchemaLoadError
from .parse import SchemaParseError, UnbalancedBlockError

__all__ = [
    "SchemaSliceError",
    "SchemaParseError",
    "UnbalancedBlockError",
    "GeneratorNotFoundError",
    "SchemaLoadError",
]
