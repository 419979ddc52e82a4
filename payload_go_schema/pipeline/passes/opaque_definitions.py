"""
Pass 2: swap definitions backed by the adapter package for opaque stubs.
"""

from __future__ import annotations

from typing import Any

from ..annotator.annotations import GO_SCHEMA_KEY
from ..config import SchemaOptions
from .base import SchemaPass

# Definition key -> adapter type name
OPAQUE_DEFINITIONS = {
    "settings": "Settings",
    "forms": "Form",
    "form-submissions": "FormSubmission",
}


class OpaqueDefinitionsPass(SchemaPass):
    """Replaces known definitions with empty stubs pointing at adapter types.

    Definitions are only replaced, never created.
    """

    name = "opaque-definitions"

    def __init__(self, options: SchemaOptions):
        self.options = options

    def apply(self, json_schema: dict[str, Any]) -> dict[str, Any]:
        definitions = json_schema.get("definitions")
        if not isinstance(definitions, dict):
            return json_schema

        for key, type_name in OPAQUE_DEFINITIONS.items():
            if key in definitions:
                definitions[key] = self._stub(type_name)
        return json_schema

    def _stub(self, type_name: str) -> dict[str, Any]:
        return {
            "type": "object",
            "additionalProperties": False,
            GO_SCHEMA_KEY: {
                "imports": [self.options.adapter_import],
                "nillable": False,
                "type": self.options.opaque_type(type_name),
            },
        }
