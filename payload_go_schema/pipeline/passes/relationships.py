"""
Pass 3: collapse relationship unions into single references.

The runtime emits relationships as a oneOf of the bare ID and the
related document. A Go generator can only lower that union to an
untyped value, so the union is replaced by a reference to the related
definition.
"""

from __future__ import annotations

from typing import Any

from ..annotator.annotations import ANNOTATION_KEYS, PAYLOAD_META_KEY
from .base import SchemaPass
from .property_walker import for_each_definition_property


def definition_ref(slug: str) -> str:
    return f"#/definitions/{slug}"


class RelationshipPass(SchemaPass):
    """Rewrites properties tagged as relationships to plain $refs.

    Group, row, collapsible and array wrappers are descended into; a
    relationship property is a leaf. Polymorphic relationships (several
    target collections) are left as they are.
    """

    name = "relationships"

    def apply(self, json_schema: dict[str, Any]) -> dict[str, Any]:
        for_each_definition_property(json_schema, self._visit)
        return json_schema

    def _visit(self, key: str, prop: dict[str, Any]) -> None:
        meta = prop.get(PAYLOAD_META_KEY)
        if isinstance(meta, dict) and meta.get("type") == "relationship":
            self._rewrite(prop, meta)
            return

        for nested in _nested_properties(prop):
            for nested_key, nested_prop in list(nested.items()):
                if isinstance(nested_prop, dict):
                    self._visit(nested_key, nested_prop)

    def _rewrite(self, prop: dict[str, Any], meta: dict[str, Any]) -> None:
        relation_to = meta.get("relationTo")
        if not isinstance(relation_to, str) or not relation_to:
            return

        ref = {"$ref": definition_ref(relation_to)}
        if meta.get("hasMany"):
            shape: dict[str, Any] = {"type": "array", "items": ref}
        else:
            shape = ref

        kept = {k: prop[k] for k in ANNOTATION_KEYS if k in prop}
        prop.clear()
        prop.update(shape)
        prop.update(kept)


def _nested_properties(prop: dict[str, Any]) -> list[dict[str, Any]]:
    """Property maps nested directly (groups) or via array items."""
    nested = []
    if isinstance(prop.get("properties"), dict):
        nested.append(prop["properties"])
    items = prop.get("items")
    if isinstance(items, dict) and isinstance(items.get("properties"), dict):
        nested.append(items["properties"])
    return nested
