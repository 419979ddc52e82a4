"""
Pass 4: decode block discriminators as plain strings.
"""

from __future__ import annotations

from typing import Any

from .base import SchemaPass
from .property_walker import for_each_definition_property

DISCRIMINATOR_KEY = "blockType"


class DiscriminatorPass(SchemaPass):
    """Forces every blockType property to an unconstrained string."""

    name = "discriminators"

    def apply(self, json_schema: dict[str, Any]) -> dict[str, Any]:
        for_each_definition_property(json_schema, self._visit)
        return json_schema

    def _visit(self, key: str, prop: dict[str, Any]) -> None:
        if key != DISCRIMINATOR_KEY:
            return
        prop["type"] = "string"
        prop.pop("const", None)
