"""Payload Go Schema

Annotates Payload CMS field trees with Go type information and rewrites
the generated JSON schema so a Go struct generator can consume it.
"""

__version__ = "1.0.1"

from .errors import SchemaConfigError, SchemaGenerationError, SchemaWriteError
from .pipeline import (
    AtomicWriter,
    FieldParser,
    OutputConfig,
    OutputMode,
    SchemaGenerator,
    SchemaOptions,
    SchemaPassPipeline,
)

__all__ = [
    "SchemaGenerator",
    "SchemaOptions",
    "SchemaPassPipeline",
    "FieldParser",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "SchemaGenerationError",
    "SchemaConfigError",
    "SchemaWriteError",
]
