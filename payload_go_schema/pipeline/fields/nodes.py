"""
Field node definitions for a Payload config.

These nodes mirror the field tree the CMS runtime builds for every
collection and global. Each node carries the list of schema transformer
closures ("typescriptSchema" in Payload) that the schema builder applies,
in registration order, to the JSON schema generated for the field.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

SchemaTransformer = Callable[[dict[str, Any]], dict[str, Any]]

# Node kinds that only affect admin layout and hold no data of their own
LAYOUT_TYPES = {"tabs", "row", "collapsible", "ui"}


@dataclass
class FieldNode:
    """Base class for all field nodes. Used directly for leaf kinds."""

    type: str = ""
    name: str | None = None
    label: str | None = None
    required: bool = False

    # Schema transformers applied by the builder after lowering this field
    typescript_schema: list[SchemaTransformer] = field(default_factory=list)

    # Unrecognised keys from the raw config (options, hasMany on selects, etc.)
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class RelationshipField(FieldNode):
    """A reference to documents of one or more other collections."""

    type: str = "relationship"
    relation_to: str | list[str] = ""
    has_many: bool = False

    @property
    def is_polymorphic(self) -> bool:
        return isinstance(self.relation_to, list)


@dataclass
class UploadField(RelationshipField):
    """A relationship to an upload-enabled collection."""

    type: str = "upload"


@dataclass
class ContainerField(FieldNode):
    """Any field that owns a nested field list (group, array, row, collapsible)."""

    fields: list[FieldNode] = field(default_factory=list)


@dataclass
class GroupField(ContainerField):
    type: str = "group"


@dataclass
class ArrayField(ContainerField):
    type: str = "array"


@dataclass
class RowField(ContainerField):
    type: str = "row"


@dataclass
class CollapsibleField(ContainerField):
    type: str = "collapsible"


@dataclass
class Block:
    """A named sub-schema inside a blocks field."""

    slug: str = ""
    fields: list[FieldNode] = field(default_factory=list)
    interface_name: str | None = None


@dataclass
class BlocksField(FieldNode):
    type: str = "blocks"
    blocks: list[Block] = field(default_factory=list)


@dataclass
class Tab:
    """A tab inside a tabs field. Named tabs nest their data, unnamed ones do not."""

    name: str | None = None
    label: str | None = None
    fields: list[FieldNode] = field(default_factory=list)


@dataclass
class TabsField(FieldNode):
    type: str = "tabs"
    tabs: list[Tab] = field(default_factory=list)


@dataclass
class UIField(FieldNode):
    """Admin-only field, never present in data."""

    type: str = "ui"


@dataclass
class EntityConfig:
    """Shared shape of collections and globals."""

    slug: str = ""
    fields: list[FieldNode] = field(default_factory=list)
    interface_name: str | None = None


@dataclass
class CollectionConfig(EntityConfig):
    auth: bool = False
    timestamps: bool = True


@dataclass
class GlobalConfig(EntityConfig):
    pass


@dataclass
class PayloadConfig:
    """Root of the field model: every collection and global."""

    collections: list[CollectionConfig] = field(default_factory=list)
    globals: list[GlobalConfig] = field(default_factory=list)

    # typescript.outputFile from the config
    output_file: str | None = None

    # Type of document IDs ("number" or "text")
    id_type: str = "number"


def field_has_name(node: FieldNode) -> bool:
    """Whether a node stores data under its own key."""
    return bool(node.name) and node.type not in LAYOUT_TYPES


def add_go_json_schema(node: FieldNode, target_type: str, imports: list[str] | None = None, nillable: bool = False) -> FieldNode:
    """
    Attach a custom Go type to a field.

    The annotation replaces whatever schema the builder generates for the
    field, so the code generator references target_type directly.

    Args:
        node: The field to annotate
        target_type: Fully qualified Go type, e.g. "payload.Media"
        imports: Go import paths the type needs
        nillable: Whether the generated field may be nil

    Returns:
        The same node, for chaining
    """
    # Imported here, the annotator package imports this module
    from ..annotator.annotations import GoTypeAnnotation

    node.typescript_schema.append(
        GoTypeAnnotation(
            target_type=target_type,
            imports=tuple(imports or ()),
            nillable=nillable,
        )
    )
    return node
