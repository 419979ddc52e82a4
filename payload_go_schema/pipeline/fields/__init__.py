"""
Field model module.

Contains the field-tree node types and the config parser.
"""

from __future__ import annotations

from .nodes import (
    ArrayField,
    Block,
    BlocksField,
    CollapsibleField,
    CollectionConfig,
    ContainerField,
    FieldNode,
    GlobalConfig,
    GroupField,
    PayloadConfig,
    RelationshipField,
    RowField,
    Tab,
    TabsField,
    UIField,
    UploadField,
    add_go_json_schema,
    field_has_name,
)
from .parser import FieldParser

__all__ = [
    "ArrayField",
    "Block",
    "BlocksField",
    "CollapsibleField",
    "CollectionConfig",
    "ContainerField",
    "FieldNode",
    "FieldParser",
    "GlobalConfig",
    "GroupField",
    "PayloadConfig",
    "RelationshipField",
    "RowField",
    "Tab",
    "TabsField",
    "UIField",
    "UploadField",
    "add_go_json_schema",
    "field_has_name",
]
