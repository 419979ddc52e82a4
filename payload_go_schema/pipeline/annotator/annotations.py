"""
Schema transformer closures attached to field nodes.

Both classes are frozen dataclasses so that annotations produced by two
walks over the same tree compare equal. Calling an instance with the
JSON schema generated for a field returns the transformed schema.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Key read by the Go code generator for opaque type overrides
GO_SCHEMA_KEY = "goJSONSchema"

# Sidecar key carrying PayloadMeta through the document
PAYLOAD_META_KEY = "payload"

ANNOTATION_KEYS = (GO_SCHEMA_KEY, PAYLOAD_META_KEY)


@dataclass(frozen=True)
class GoTypeAnnotation:
    """An opaque Go type override for a single field."""

    target_type: str = ""
    imports: tuple[str, ...] = ()
    nillable: bool = False

    # Primitive JSON type kept alongside the override for tools that ignore it
    schema_type: str | None = None

    # Set on annotations owned by the field walker, which replaces them on re-runs
    managed: bool = False

    def to_go_schema(self) -> dict[str, Any]:
        return {
            "imports": sorted(self.imports),
            "nillable": self.nillable,
            "type": self.target_type,
        }

    def __call__(self, schema: dict[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.schema_type:
            result["type"] = self.schema_type
        result[GO_SCHEMA_KEY] = self.to_go_schema()
        # Keep metadata attached by earlier transformers
        if PAYLOAD_META_KEY in schema:
            result[PAYLOAD_META_KEY] = schema[PAYLOAD_META_KEY]
        return result


@dataclass(frozen=True)
class PayloadMeta:
    """Field metadata carried into the document so later passes need not re-derive it."""

    name: str = ""
    type: str = ""
    label: str | None = None
    has_many: bool | None = None
    relation_to: str | tuple[str, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        meta: dict[str, Any] = {"name": self.name, "type": self.type}
        if self.label is not None:
            meta["label"] = self.label
        if self.has_many is not None:
            meta["hasMany"] = self.has_many
        if self.relation_to is not None:
            meta["relationTo"] = list(self.relation_to) if isinstance(self.relation_to, tuple) else self.relation_to
        return meta

    def __call__(self, schema: dict[str, Any]) -> dict[str, Any]:
        return {**schema, PAYLOAD_META_KEY: self.to_dict()}


def strip_annotations(schema: dict[str, Any]) -> dict[str, Any]:
    """Return a property schema without its annotation sidecar keys."""
    return {k: v for k, v in schema.items() if k not in ANNOTATION_KEYS}
