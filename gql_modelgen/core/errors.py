"""Exceptions raised while loading schemas and generating models."""


class ModelGenError(Exception):
    """Base class for gql-modelgen errors."""


class SchemaLoadError(ModelGenError):
    """Raised when a schema source cannot be read or parsed."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot load schema from {source}: {reason}")


class SchemaShapeError(ModelGenError):
    """Raised when a schema type violates the shape the generator relies on.

    The offending type name is kept on the exception so callers can report it.
    """

    def __init__(self, type_name: str, reason: str):
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"{type_name}: {reason}")
