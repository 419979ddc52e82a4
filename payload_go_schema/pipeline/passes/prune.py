"""
Pass 1: remove parts of the schema the Go side never generates.
"""

from __future__ import annotations

from typing import Any

from ..config import SchemaOptions
from .base import SchemaPass

# Internal bookkeeping and collections the adapter package already provides
ALWAYS_PRUNED = ("payload-locked-documents", "redirects")

MEDIA_SLUG = "media"

# Root properties that hold one entry per collection/global slug
ENTITY_CONTAINERS = ("collections", "globals")


class PruneSchemaPass(SchemaPass):
    """Deletes auth, internal collections and (optionally) media."""

    name = "prune"

    def __init__(self, options: SchemaOptions):
        self.options = options

    def apply(self, json_schema: dict[str, Any]) -> dict[str, Any]:
        _delete_key(json_schema, "auth")
        _delete_definition(json_schema, "auth")

        slugs = list(ALWAYS_PRUNED)
        if self.options.use_opaque_media_type:
            slugs.append(MEDIA_SLUG)
        for slug in slugs:
            _delete_definition(json_schema, slug)
            _delete_entity(json_schema, slug)

        return json_schema


def _delete_key(schema: dict[str, Any], key: str) -> None:
    """Remove a property and its entry in the required list."""
    properties = schema.get("properties")
    if isinstance(properties, dict):
        properties.pop(key, None)
    required = schema.get("required")
    if isinstance(required, list) and key in required:
        schema["required"] = [r for r in required if r != key]


def _delete_definition(json_schema: dict[str, Any], slug: str) -> None:
    definitions = json_schema.get("definitions")
    if isinstance(definitions, dict):
        definitions.pop(slug, None)


def _delete_entity(json_schema: dict[str, Any], slug: str) -> None:
    """Remove a collection/global entry from the root property containers."""
    _delete_key(json_schema, slug)
    properties = json_schema.get("properties")
    if not isinstance(properties, dict):
        return
    for container in ENTITY_CONTAINERS:
        if isinstance(properties.get(container), dict):
            _delete_key(properties[container], slug)
