from typing import Iterable

from .base import SchemaSliceError


class GeneratorNotFoundError(SchemaSliceError, LookupError):
    """No generator block in the schema carries the requested name."""

    def __init__(self, generator_name: str, available: Iterable[str] = ()):
        self.generator_name = generator_name
        self.available = tuple(available)
        super().__init__(f"generator '{generator_name}' not found in schema")
