from .base import SchemaSliceError


class SchemaLoadError(SchemaSliceError):
    """A schema file or folder could not be read."""
