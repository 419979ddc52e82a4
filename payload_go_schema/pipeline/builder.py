"""
Reference schema builder.

Lowers an annotated Payload config into the base JSON schema document
the CMS runtime produces (draft-04 style, with "definitions" and
"$ref"). After a field is lowered, its typescript_schema transformers
run in registration order, which is how the Go annotations and payload
metadata reach the document.

The runtime's own generator can be used instead; see SchemaGenerator.
"""

from __future__ import annotations

from typing import Any

from .fields.nodes import (
    ArrayField,
    Block,
    BlocksField,
    CollapsibleField,
    CollectionConfig,
    EntityConfig,
    FieldNode,
    GlobalConfig,
    GroupField,
    PayloadConfig,
    RelationshipField,
    RowField,
    TabsField,
    UIField,
)

# Leaf kinds lowered to a single primitive JSON type
PRIMITIVE_TYPES = {
    "text": "string",
    "textarea": "string",
    "email": "string",
    "code": "string",
    "date": "string",
    "radio": "string",
    "select": "string",
    "number": "number",
    "checkbox": "boolean",
}

ANY_JSON = ["object", "array", "string", "number", "boolean", "null"]


class SchemaBuilder:
    """Builds the base document for a whole config."""

    def __init__(self, id_type: str = "number"):
        self.id_type = id_type
        self.definitions: dict[str, Any] = {}

    def build(self, config: PayloadConfig) -> dict[str, Any]:
        """
        Generate the base JSON schema document.

        Args:
            config: The (annotated) Payload config

        Returns:
            The document with root properties and definitions
        """
        self.id_type = config.id_type
        self.definitions = {}

        auth_collections = [c.slug for c in config.collections if c.auth]
        if auth_collections:
            self.definitions["auth"] = self._auth_definition(auth_collections)

        for collection in config.collections:
            self.definitions[collection.slug] = self._entity_schema(collection)
        for global_config in config.globals:
            self.definitions[global_config.slug] = self._entity_schema(global_config)

        collection_slugs = [c.slug for c in config.collections]
        global_slugs = [g.slug for g in config.globals]
        return {
            "type": "object",
            "additionalProperties": False,
            "title": "Config",
            "properties": {
                "auth": {"$ref": "#/definitions/auth"},
                "collections": self._container(collection_slugs),
                "globals": self._container(global_slugs),
            },
            "required": ["auth", "collections", "globals"],
            "definitions": self.definitions,
        }

    def _container(self, slugs: list[str]) -> dict[str, Any]:
        return {
            "type": "object",
            "additionalProperties": False,
            "properties": {slug: {"$ref": f"#/definitions/{slug}"} for slug in slugs},
            "required": list(slugs),
        }

    def _auth_definition(self, slugs: list[str]) -> dict[str, Any]:
        return {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                slug: {
                    "type": "object",
                    "additionalProperties": False,
                    "properties": {"email": {"type": "string"}, "password": {"type": "string"}},
                    "required": ["email", "password"],
                }
                for slug in slugs
            },
            "required": list(slugs),
        }

    def _id_schema(self) -> dict[str, Any]:
        return {"type": "string" if self.id_type == "text" else "integer"}

    def _entity_schema(self, entity: EntityConfig) -> dict[str, Any]:
        properties: dict[str, Any] = {"id": self._id_schema()}
        required = ["id"]
        self._lower_fields(entity.fields, properties, required)

        if isinstance(entity, CollectionConfig):
            if entity.timestamps:
                properties["updatedAt"] = {"type": "string"}
                properties["createdAt"] = {"type": "string"}
                required.extend(["updatedAt", "createdAt"])
        elif isinstance(entity, GlobalConfig):
            properties["updatedAt"] = {"type": ["string", "null"]}
            properties["createdAt"] = {"type": ["string", "null"]}

        schema: dict[str, Any] = {
            "type": "object",
            "additionalProperties": False,
            "properties": properties,
            "required": required,
        }
        if entity.interface_name:
            schema["title"] = entity.interface_name
        return schema

    def _lower_fields(self, fields: list[FieldNode], properties: dict[str, Any], required: list[str]) -> None:
        """Lower a field list into a properties map, flattening layout fields."""
        for node in fields:
            # Unnamed groups are presentational and flatten like rows
            if isinstance(node, (RowField, CollapsibleField)) or (isinstance(node, GroupField) and not node.name):
                self._lower_fields(node.fields, properties, required)
                continue

            if isinstance(node, TabsField):
                for tab in node.tabs:
                    if tab.name:
                        properties[tab.name] = self._object(tab.fields)
                        required.append(tab.name)
                    else:
                        self._lower_fields(tab.fields, properties, required)
                continue

            if isinstance(node, UIField) or not node.name:
                continue

            schema = self._field_schema(node)
            for transform in node.typescript_schema:
                schema = transform(schema)
            properties[node.name] = schema
            if node.required:
                required.append(node.name)

    def _object(self, fields: list[FieldNode], nullable: bool = False) -> dict[str, Any]:
        properties: dict[str, Any] = {}
        required: list[str] = []
        self._lower_fields(fields, properties, required)
        schema: dict[str, Any] = {
            "type": ["object", "null"] if nullable else "object",
            "additionalProperties": False,
            "properties": properties,
        }
        if required:
            schema["required"] = required
        return schema

    def _field_schema(self, node: FieldNode) -> dict[str, Any]:
        """Lower a single named field, before its transformers run."""
        if isinstance(node, RelationshipField):
            return self._relationship_schema(node)

        if isinstance(node, GroupField):
            return self._object(node.fields)

        if isinstance(node, ArrayField):
            items = self._object(node.fields)
            items["properties"]["id"] = {"type": ["string", "null"]}
            return {"type": self._nullable("array", node), "items": items}

        if isinstance(node, BlocksField):
            return {
                "type": self._nullable("array", node),
                "items": {"oneOf": [self._block_schema(block) for block in node.blocks]},
            }

        if node.type == "richText":
            return {"type": self._nullable("object", node), "properties": {"root": {"type": "object"}}}

        if node.type == "json":
            return {"type": ANY_JSON}

        if node.type == "point":
            return {
                "type": self._nullable("array", node),
                "items": [{"type": "number"}, {"type": "number"}],
                "minItems": 2,
                "maxItems": 2,
            }

        if node.type in PRIMITIVE_TYPES:
            primitive = PRIMITIVE_TYPES[node.type]
            if node.extra.get("hasMany"):
                return {"type": self._nullable("array", node), "items": {"type": primitive}}
            schema: dict[str, Any] = {"type": self._nullable(primitive, node)}
            options = node.extra.get("options")
            if node.type in ("select", "radio") and options:
                schema["enum"] = [o["value"] if isinstance(o, dict) else o for o in options]
            return schema

        # Unknown kinds carry no type information
        return {}

    def _nullable(self, json_type: str, node: FieldNode) -> str | list[str]:
        return json_type if node.required else [json_type, "null"]

    def _relationship_schema(self, node: RelationshipField) -> dict[str, Any]:
        if node.is_polymorphic:
            variant: dict[str, Any] = {
                "oneOf": [
                    {
                        "type": "object",
                        "additionalProperties": False,
                        "properties": {
                            "relationTo": {"type": "string", "const": slug},
                            "value": {"oneOf": [self._id_schema(), {"$ref": f"#/definitions/{slug}"}]},
                        },
                        "required": ["relationTo", "value"],
                    }
                    for slug in node.relation_to
                ]
            }
        else:
            variant = {"oneOf": [self._id_schema(), {"$ref": f"#/definitions/{node.relation_to}"}]}

        if node.has_many:
            return {"type": self._nullable("array", node), "items": variant}
        if not node.required:
            variant["oneOf"] = [{"type": "null"}, *variant["oneOf"]]
        return variant

    def _block_schema(self, block: Block) -> dict[str, Any]:
        schema = self._object(block.fields)
        schema["properties"]["id"] = {"type": ["string", "null"]}
        schema["properties"]["blockName"] = {"type": ["string", "null"]}
        schema["properties"]["blockType"] = {"const": block.slug}
        schema["required"] = [*schema.get("required", []), "blockType"]

        if block.interface_name:
            self.definitions[block.interface_name] = schema
            return {"$ref": f"#/definitions/{block.interface_name}"}
        return schema
