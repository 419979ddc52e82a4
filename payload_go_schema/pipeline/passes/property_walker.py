"""
Shared traversal over the direct properties of every definition.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def for_each_definition_property(json_schema: dict[str, Any], fn: Callable[[str, dict[str, Any]], None]) -> None:
    """
    Call fn(key, property) for each direct property of each definition.

    Definitions without a properties mapping, and non-dict entries, are
    skipped. Nested properties are not visited.
    """
    definitions = json_schema.get("definitions")
    if not isinstance(definitions, dict):
        return

    for definition in definitions.values():
        if not isinstance(definition, dict):
            continue
        properties = definition.get("properties")
        if not isinstance(properties, dict):
            continue
        # Copy so fn may replace entries while iterating
        for key, prop in list(properties.items()):
            if isinstance(prop, dict):
                fn(key, prop)
