"""
Pass 5: one-off patches for fields the adapter types handle themselves.
"""

from __future__ import annotations

from typing import Any

from ..annotator.annotations import PAYLOAD_META_KEY
from .base import SchemaPass
from .property_walker import for_each_definition_property


class FormRelationshipPass(SchemaPass):
    """Drops the $ref from relationship properties named "form".

    Nothing is put in its place. The property keeps its sidecar keys,
    so a Form annotation from the walker still reaches the generator.
    """

    name = "form-relationship"

    def apply(self, json_schema: dict[str, Any]) -> dict[str, Any]:
        for_each_definition_property(json_schema, self._visit)
        return json_schema

    def _visit(self, key: str, prop: dict[str, Any]) -> None:
        meta = prop.get(PAYLOAD_META_KEY)
        if not isinstance(meta, dict):
            return
        if meta.get("type") == "relationship" and meta.get("name") == "form":
            prop.pop("$ref", None)
