"""
Parser that builds a field tree from a Payload config dictionary.

The CMS runtime normally hands over its sanitized config directly; the
parser accepts the same shape as plain JSON so configs can be exported
from the runtime and processed offline.
"""

from __future__ import annotations

from typing import Any

from ...errors import SchemaConfigError
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
)

# Keys consumed by the parser, everything else lands in FieldNode.extra
_KNOWN_KEYS = {"type", "name", "label", "required", "fields", "tabs", "blocks", "relationTo", "hasMany"}

_CONTAINERS: dict[str, type[ContainerField]] = {
    "group": GroupField,
    "array": ArrayField,
    "row": RowField,
    "collapsible": CollapsibleField,
}


class FieldParser:
    """Parses Payload field dictionaries into FieldNode trees."""

    def parse_config(self, config: dict[str, Any]) -> PayloadConfig:
        """
        Parse a whole Payload config.

        Args:
            config: Dictionary with "collections", "globals" and optionally
                "typescript": {"outputFile": ...}

        Returns:
            PayloadConfig with parsed field trees
        """
        typescript = config.get("typescript") or {}
        db = config.get("db") or {}
        return PayloadConfig(
            collections=[self._parse_collection(c) for c in config.get("collections") or []],
            globals=[self._parse_global(g) for g in config.get("globals") or []],
            output_file=typescript.get("outputFile"),
            id_type=db.get("defaultIDType", "number"),
        )

    def _parse_collection(self, collection: dict[str, Any]) -> CollectionConfig:
        slug = self._require_slug(collection, "collection")
        return CollectionConfig(
            slug=slug,
            fields=self.parse_fields(collection.get("fields") or [], f"collections.{slug}"),
            interface_name=(collection.get("typescript") or {}).get("interface"),
            auth=bool(collection.get("auth")),
            timestamps=collection.get("timestamps", True),
        )

    def _parse_global(self, global_config: dict[str, Any]) -> GlobalConfig:
        slug = self._require_slug(global_config, "global")
        return GlobalConfig(
            slug=slug,
            fields=self.parse_fields(global_config.get("fields") or [], f"globals.{slug}"),
            interface_name=(global_config.get("typescript") or {}).get("interface"),
        )

    def _require_slug(self, entity: dict[str, Any], kind: str) -> str:
        slug = entity.get("slug")
        if not slug:
            raise SchemaConfigError(f"Every {kind} needs a slug, got: {sorted(entity)}")
        return slug

    def parse_fields(self, fields: list[dict[str, Any]], path: str = "") -> list[FieldNode]:
        """Parse a list of field dictionaries."""
        return [self.parse_field(f, f"{path}[{i}]") for i, f in enumerate(fields)]

    def parse_field(self, raw: dict[str, Any], path: str = "") -> FieldNode:
        """
        Parse a single field dictionary.

        Unknown field types are kept as plain FieldNode leaves so that new
        field kinds pass through the pipeline untouched.

        Args:
            raw: The field dictionary
            path: Location in the config (for error messages)

        Returns:
            The matching FieldNode subclass

        Raises:
            SchemaConfigError: If the field has no type
        """
        if not isinstance(raw, dict):
            raise SchemaConfigError(f"Field at {path} must be an object, got {type(raw).__name__}")

        field_type = raw.get("type")
        if not field_type:
            raise SchemaConfigError(f"Field at {path} has no type")

        common = {
            "name": raw.get("name"),
            "label": self._label(raw.get("label")),
            "required": bool(raw.get("required", False)),
            "extra": {k: v for k, v in raw.items() if k not in _KNOWN_KEYS},
        }
        child_path = f"{path}.{raw.get('name') or field_type}"

        if field_type in _CONTAINERS:
            return _CONTAINERS[field_type](fields=self.parse_fields(raw.get("fields") or [], child_path), **common)

        if field_type == "tabs":
            tabs = [
                Tab(
                    name=tab.get("name"),
                    label=self._label(tab.get("label")),
                    fields=self.parse_fields(tab.get("fields") or [], f"{child_path}.tabs[{i}]"),
                )
                for i, tab in enumerate(raw.get("tabs") or [])
            ]
            return TabsField(tabs=tabs, **common)

        if field_type == "blocks":
            blocks = [
                Block(
                    slug=block.get("slug", ""),
                    fields=self.parse_fields(block.get("fields") or [], f"{child_path}.{block.get('slug')}"),
                    interface_name=block.get("interfaceName"),
                )
                for block in raw.get("blocks") or []
            ]
            return BlocksField(blocks=blocks, **common)

        if field_type in ("relationship", "upload"):
            node_class = RelationshipField if field_type == "relationship" else UploadField
            relation_to = raw.get("relationTo", "")
            return node_class(
                relation_to=list(relation_to) if isinstance(relation_to, (list, tuple)) else relation_to,
                has_many=bool(raw.get("hasMany", False)),
                **common,
            )

        if field_type == "ui":
            return UIField(**common)

        if "hasMany" in raw:
            common["extra"]["hasMany"] = raw["hasMany"]
        return FieldNode(type=field_type, **common)

    def _label(self, label: Any) -> str | None:
        """Labels may be localized dicts, keep the first translation."""
        if isinstance(label, dict):
            return next(iter(label.values()), None)
        if isinstance(label, str):
            return label
        return None
