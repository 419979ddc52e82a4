"""
Exceptions raised while generating Go-annotated JSON schemas.
"""


class SchemaGenerationError(Exception):
    """Base error for schema generation failures."""


class SchemaConfigError(SchemaGenerationError):
    """Raised when a Payload config cannot be turned into a field tree."""


class SchemaWriteError(SchemaGenerationError):
    """Raised when the final document cannot be serialized."""
