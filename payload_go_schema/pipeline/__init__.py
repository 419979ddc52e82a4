"""
Pipeline - Payload field tree to Go-annotated JSON schema.

1. Phase 1 (Annotator): Walk the field tree, attaching Go type annotations
   and payload metadata as schema transformers
2. Phase 2 (Builder): Lower the annotated config to a base JSON schema
   (normally done by the CMS runtime)
3. Phase 3 (Passes): Rewrite the document in five ordered passes
4. Phase 4 (Writer): Write pretty-printed JSON atomically
"""

from __future__ import annotations

from .annotator import FieldTreeWalker, GoTypeAnnotation, PayloadMeta, annotate_type, strip_annotations
from .builder import SchemaBuilder
from .config import OutputConfig, OutputMode, SchemaOptions, resolve_output_path
from .fields import FieldParser, PayloadConfig, add_go_json_schema, field_has_name
from .generator import SchemaGenerator
from .passes import SchemaPassPipeline, for_each_definition_property
from .writer import AtomicWriter

__all__ = [
    "AtomicWriter",
    "FieldParser",
    "FieldTreeWalker",
    "GoTypeAnnotation",
    "OutputConfig",
    "OutputMode",
    "PayloadConfig",
    "PayloadMeta",
    "SchemaBuilder",
    "SchemaGenerator",
    "SchemaOptions",
    "SchemaPassPipeline",
    "add_go_json_schema",
    "annotate_type",
    "field_has_name",
    "for_each_definition_property",
    "resolve_output_path",
    "strip_annotations",
]
