"""
Annotator module.

Contains the field-kind to Go type mapping and the field tree walker.
"""

from __future__ import annotations

from .annotations import (
    ANNOTATION_KEYS,
    GO_SCHEMA_KEY,
    PAYLOAD_META_KEY,
    GoTypeAnnotation,
    PayloadMeta,
    strip_annotations,
)
from .type_annotator import annotate_type
from .walker import FieldTreeWalker

__all__ = [
    "ANNOTATION_KEYS",
    "GO_SCHEMA_KEY",
    "PAYLOAD_META_KEY",
    "FieldTreeWalker",
    "GoTypeAnnotation",
    "PayloadMeta",
    "annotate_type",
    "strip_annotations",
]
