class SchemaSliceError(Exception):
    """Base class for every error raised by schemaslice."""
