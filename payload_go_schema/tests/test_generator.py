"""
End-to-end tests: parse a config, annotate it, build the base schema and
run the rewrite passes.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

from payload_go_schema.pipeline import (
    FieldParser,
    SchemaGenerator,
    SchemaOptions,
    SchemaPassPipeline,
    strip_annotations,
)
from payload_go_schema.pipeline.config import DEFAULT_ADAPTER_IMPORT

CONFIG_PATH = Path(__file__).parent / "test_data" / "blog_config.json"


def go_schema(type_name, nillable=False):
    return {"imports": [DEFAULT_ADAPTER_IMPORT], "nillable": nillable, "type": type_name}


def load_config():
    with open(CONFIG_PATH) as f:
        return FieldParser().parse_config(json.load(f))


@pytest.fixture
def options():
    return SchemaOptions(use_opaque_media_type=True, assign_relationship_metadata=True)


@pytest.fixture
def schema(options):
    return SchemaGenerator(load_config(), options).generate()


@pytest.fixture
def posts(schema):
    return schema["definitions"]["posts"]["properties"]


def test_single_relationship(posts):
    assert strip_annotations(posts["author"]) == {"$ref": "#/definitions/users"}
    assert posts["author"]["payload"] == {
        "name": "author",
        "type": "relationship",
        "hasMany": False,
        "relationTo": "users",
    }


def test_has_many_relationship(posts):
    assert strip_annotations(posts["tags"]) == {"type": "array", "items": {"$ref": "#/definitions/tags"}}


def test_nested_relationships(posts):
    details = posts["details"]["properties"]
    assert strip_annotations(details["editor"]) == {"$ref": "#/definitions/users"}
    assert strip_annotations(details["reviewers"]) == {"type": "array", "items": {"$ref": "#/definitions/users"}}
    assert strip_annotations(details["sources"]["items"]["properties"]["post"]) == {"$ref": "#/definitions/posts"}


def test_global_relationships(schema):
    links = schema["definitions"]["navigation"]["properties"]["links"]
    assert strip_annotations(links["items"]["properties"]["page"]) == {"$ref": "#/definitions/posts"}


def test_block_definition(schema):
    block = schema["definitions"]["CallToActionBlock"]["properties"]
    assert block["blockType"] == {"type": "string"}
    assert strip_annotations(block["link"]) == {"$ref": "#/definitions/posts"}


def test_opaque_fields(posts):
    assert posts["layout"]["goJSONSchema"] == go_schema("payload.Blocks")
    assert posts["content"] == {
        "type": "string",
        "goJSONSchema": go_schema("payload.RichText"),
        "payload": {"name": "content", "type": "richText"},
    }
    assert posts["structuredData"]["goJSONSchema"] == go_schema("payload.JSON")
    assert posts["location"]["goJSONSchema"] == go_schema("payload.Point", nillable=True)
    assert posts["heroImage"]["goJSONSchema"] == go_schema("payload.Media")
    assert posts["gallery"]["goJSONSchema"] == go_schema("[]payload.Media", nillable=True)
    assert posts["meta"]["goJSONSchema"] == go_schema("payload.SettingsMeta", nillable=True)


def test_form_relationship_carve_out(posts):
    """The form relationship keeps its Form annotation and loses the $ref"""
    form = posts["form"]
    assert "$ref" not in form
    assert "oneOf" not in form
    assert strip_annotations(form) == {}
    assert form["goJSONSchema"] == go_schema("payload.Form", nillable=True)


def test_polymorphic_relationship_untouched(posts):
    assert len(posts["related"]["oneOf"]) == 3


def test_unknown_kind_passes_through(posts):
    assert posts["rating"] == {"payload": {"name": "rating", "type": "stars"}}


def test_pruned(schema):
    definitions = schema["definitions"]
    collections = schema["properties"]["collections"]
    assert "auth" not in schema["properties"]
    assert "auth" not in schema["required"]
    for slug in ("auth", "media", "redirects", "payload-locked-documents"):
        assert slug not in definitions
        assert slug not in collections["properties"]
        assert slug not in collections["required"]


def test_media_kept_without_opaque_media():
    schema = SchemaGenerator(load_config(), SchemaOptions(assign_relationship_metadata=True)).generate()
    assert "media" in schema["definitions"]
    hero = schema["definitions"]["posts"]["properties"]["heroImage"]
    assert "goJSONSchema" not in hero
    assert len(hero["oneOf"]) == 2


def test_opaque_definitions(schema):
    definitions = schema["definitions"]
    assert definitions["settings"] == {
        "type": "object",
        "additionalProperties": False,
        "goJSONSchema": go_schema("payload.Settings"),
    }
    assert definitions["forms"]["goJSONSchema"] == go_schema("payload.Form")
    assert "form-submissions" not in definitions


def test_relationships_untouched_without_metadata():
    """Without payload metadata there is nothing to resolve relationships from"""
    schema = SchemaGenerator(load_config(), SchemaOptions()).generate()
    author = schema["definitions"]["posts"]["properties"]["author"]
    assert author == {"oneOf": [{"type": "integer"}, {"$ref": "#/definitions/users"}]}


def test_pipeline_twice_is_no_op(schema, options):
    again = SchemaPassPipeline(options).run(copy.deepcopy(schema))
    assert again == schema


def test_generator_twice_is_stable(options):
    config = load_config()
    generator = SchemaGenerator(config, options)
    assert generator.generate() == generator.generate()


def test_custom_schema_builder(options):
    """A runtime-produced document can replace the reference builder"""
    received = []

    def runtime(config):
        received.append(config)
        return {
            "properties": {"auth": {}},
            "definitions": {"blockish": {"properties": {"blockType": {"const": "x"}}}},
        }

    config = load_config()
    schema = SchemaGenerator(config, options, build_schema=runtime).generate()

    assert received == [config]
    assert schema == {"properties": {}, "definitions": {"blockish": {"properties": {"blockType": {"type": "string"}}}}}


def test_block_within_array_within_group():
    """Blocks nested in an array inside a group resolve through their block definitions"""
    raw = {
        "collections": [
            {"slug": "users", "fields": []},
            {
                "slug": "pages",
                "fields": [
                    {
                        "name": "section",
                        "type": "group",
                        "fields": [
                            {
                                "name": "rows",
                                "type": "array",
                                "fields": [
                                    {
                                        "name": "content",
                                        "type": "blocks",
                                        "blocks": [
                                            {
                                                "slug": "profile",
                                                "interfaceName": "ProfileBlock",
                                                "fields": [{"name": "person", "type": "relationship", "relationTo": "users"}],
                                            },
                                            {
                                                "slug": "inline",
                                                "fields": [{"name": "person", "type": "relationship", "relationTo": "users"}],
                                            },
                                        ],
                                    }
                                ],
                            }
                        ],
                    }
                ],
            },
        ]
    }
    options = SchemaOptions(assign_relationship_metadata=True)
    schema = SchemaGenerator(FieldParser().parse_config(raw), options).generate()

    rows = schema["definitions"]["pages"]["properties"]["section"]["properties"]["rows"]
    content = rows["items"]["properties"]["content"]
    assert content["goJSONSchema"]["type"] == "payload.Blocks"

    # Named blocks are definitions, so their relationships are resolved
    profile = schema["definitions"]["ProfileBlock"]["properties"]
    assert strip_annotations(profile["person"]) == {"$ref": "#/definitions/users"}
    assert profile["blockType"] == {"type": "string"}


def test_has_many_form_relationship():
    """A has-many relationship to forms is annotated as a slice of Form"""
    raw = {
        "collections": [
            {"slug": "forms", "fields": []},
            {"slug": "pages", "fields": [{"name": "forms", "type": "relationship", "relationTo": "forms", "hasMany": True}]},
        ]
    }
    options = SchemaOptions(assign_relationship_metadata=True)
    schema = SchemaGenerator(FieldParser().parse_config(raw), options).generate()

    forms = schema["definitions"]["pages"]["properties"]["forms"]
    assert strip_annotations(forms) == {"type": "array", "items": {"$ref": "#/definitions/forms"}}
    assert forms["goJSONSchema"] == go_schema("[]payload.Form", nillable=True)
