"""
Schema rewrite passes.

The passes run in a fixed order on one document:

1. Prune: drop auth, internal and adapter-provided collections
2. Opaque definitions: stub out settings, forms and form submissions
3. Relationships: collapse relationship unions into $refs
4. Discriminators: decode blockType as a plain string
5. Form relationship: drop the $ref from "form" relationships

Pass 3 depends on the "payload" metadata attached while walking the
field tree, and pass 5 on pass 3's output.
"""

from __future__ import annotations

import copy
from typing import Any

from ..config import SchemaOptions
from .base import SchemaPass
from .discriminators import DiscriminatorPass
from .opaque_definitions import OpaqueDefinitionsPass
from .property_walker import for_each_definition_property
from .prune import PruneSchemaPass
from .relationships import RelationshipPass
from .special_cases import FormRelationshipPass


def build_passes(options: SchemaOptions) -> list[SchemaPass]:
    """Create the passes in execution order."""
    return [
        PruneSchemaPass(options),
        OpaqueDefinitionsPass(options),
        RelationshipPass(),
        DiscriminatorPass(),
        FormRelationshipPass(),
    ]


class SchemaPassPipeline:
    """Runs the rewrite passes in order over a single document."""

    def __init__(self, options: SchemaOptions):
        self.options = options
        self.passes = build_passes(options)

    def run(self, json_schema: dict[str, Any]) -> dict[str, Any]:
        """
        Rewrite a document produced by the schema runtime.

        The input is copied once, so the caller's document is left as is.

        Args:
            json_schema: The base document

        Returns:
            The rewritten document
        """
        result = copy.deepcopy(json_schema)
        for schema_pass in self.passes:
            result = schema_pass.apply(result)
        return result


__all__ = [
    "DiscriminatorPass",
    "FormRelationshipPass",
    "OpaqueDefinitionsPass",
    "PruneSchemaPass",
    "RelationshipPass",
    "SchemaPass",
    "SchemaPassPipeline",
    "build_passes",
    "for_each_definition_property",
]
