"""
Recursive walker that annotates a field tree in place.
"""

from __future__ import annotations

from ..config import SchemaOptions
from ..fields.nodes import (
    BlocksField,
    ContainerField,
    FieldNode,
    PayloadConfig,
    RelationshipField,
    TabsField,
    field_has_name,
)
from .annotations import GoTypeAnnotation, PayloadMeta
from .type_annotator import OPAQUE_GROUPS, annotate_type


class FieldTreeWalker:
    """Attaches Go type annotations and Payload metadata to field nodes.

    Annotations owned by the walker are replaced on every visit, so
    walking an already annotated tree again yields the same closures.
    Transformers registered by schema authors are left in place and keep
    running before the walker's own.
    """

    def __init__(self, options: SchemaOptions):
        self.options = options

    def map_config(self, config: PayloadConfig) -> PayloadConfig:
        """Annotate every collection's and global's top-level fields."""
        for entity in [*config.collections, *config.globals]:
            entity.fields = self.map_fields(entity.fields)
        return config

    def map_fields(self, fields: list[FieldNode]) -> list[FieldNode]:
        return [self.map(f) for f in fields]

    def map(self, node: FieldNode) -> FieldNode:
        """
        Annotate a single node and recurse into its children.

        Args:
            node: The field to annotate

        Returns:
            The same node, annotated
        """
        node.typescript_schema = [fn for fn in node.typescript_schema if not self._is_managed(fn)]

        annotation = annotate_type(node, self.options)
        if annotation is not None:
            node.typescript_schema.append(annotation)

        if isinstance(node, BlocksField):
            for block in node.blocks:
                block.fields = self.map_fields(block.fields)
        elif isinstance(node, TabsField):
            for tab in node.tabs:
                tab.fields = self.map_fields(tab.fields)
        elif isinstance(node, ContainerField):
            # The meta group is replaced by an opaque type, its children never reach the schema
            if not (node.type == "group" and node.name in OPAQUE_GROUPS):
                node.fields = self.map_fields(node.fields)

        if self.options.assign_relationship_metadata and field_has_name(node):
            node.typescript_schema.append(self._payload_meta(node))

        return node

    def _payload_meta(self, node: FieldNode) -> PayloadMeta:
        if isinstance(node, RelationshipField):
            relation_to = tuple(node.relation_to) if node.is_polymorphic else node.relation_to
            return PayloadMeta(
                name=node.name or "",
                type=node.type,
                label=node.label,
                has_many=node.has_many,
                relation_to=relation_to,
            )
        return PayloadMeta(name=node.name or "", type=node.type, label=node.label)

    @staticmethod
    def _is_managed(fn) -> bool:
        if isinstance(fn, PayloadMeta):
            return True
        return isinstance(fn, GoTypeAnnotation) and fn.managed
