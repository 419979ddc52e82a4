"""
Maps field kinds to opaque Go types provided by the adapter package.
"""

from __future__ import annotations

from ..config import SchemaOptions
from ..fields.nodes import FieldNode, RelationshipField, UploadField
from .annotations import GoTypeAnnotation

# Relationship targets backed by an adapter type instead of a generated struct
OPAQUE_RELATIONSHIPS = {"forms": "Form"}

# Groups replaced wholesale by an adapter type
OPAQUE_GROUPS = {"meta": "SettingsMeta"}


def annotate_type(node: FieldNode, options: SchemaOptions) -> GoTypeAnnotation | None:
    """
    Work out the opaque Go type for a field, if it has one.

    Args:
        node: The field to inspect
        options: Pipeline options

    Returns:
        The annotation to attach, or None when the field keeps its
        generated type
    """

    def opaque(name: str, nillable: bool = False, schema_type: str | None = None, many: bool = False) -> GoTypeAnnotation:
        target_type = options.opaque_type(name)
        return GoTypeAnnotation(
            target_type=f"[]{target_type}" if many else target_type,
            imports=(options.adapter_import,),
            nillable=nillable,
            schema_type=schema_type,
            managed=True,
        )

    if node.type == "blocks":
        return opaque("Blocks")

    if node.type == "json":
        return opaque("JSON")

    if node.type == "richText":
        return opaque("RichText", schema_type="string")

    if isinstance(node, UploadField):
        if not options.use_opaque_media_type:
            return None
        return opaque("Media", nillable=not node.required, many=node.has_many)

    if node.type == "point":
        return opaque("Point", nillable=not node.required)

    if isinstance(node, RelationshipField) and not node.is_polymorphic:
        if node.relation_to in OPAQUE_RELATIONSHIPS:
            return opaque(OPAQUE_RELATIONSHIPS[node.relation_to], nillable=not node.required, many=node.has_many)
        return None

    if node.type == "group" and node.name in OPAQUE_GROUPS:
        return opaque(OPAQUE_GROUPS[node.name], nillable=True)

    return None
