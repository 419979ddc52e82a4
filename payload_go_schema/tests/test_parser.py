import json
from pathlib import Path

import pytest

from payload_go_schema.errors import SchemaConfigError
from payload_go_schema.pipeline.fields import (
    ArrayField,
    BlocksField,
    FieldNode,
    FieldParser,
    GroupField,
    RelationshipField,
    RowField,
    TabsField,
    UIField,
    UploadField,
    field_has_name,
)


@pytest.fixture
def blog_config():
    with open(Path(__file__).parent / "test_data" / "blog_config.json") as f:
        return FieldParser().parse_config(json.load(f))


def test_parse_config(blog_config):
    assert [c.slug for c in blog_config.collections] == [
        "users",
        "media",
        "tags",
        "forms",
        "redirects",
        "payload-locked-documents",
        "posts",
    ]
    assert [g.slug for g in blog_config.globals] == ["settings", "navigation"]
    assert blog_config.output_file == "src/types/payload.ts"
    assert blog_config.collections[0].auth is True
    assert blog_config.collections[-1].interface_name == "Post"


def test_parse_field_kinds(blog_config):
    posts = {f.name: f for f in blog_config.collections[-1].fields if f.name}
    assert isinstance(posts["author"], RelationshipField)
    assert posts["author"].relation_to == "users"
    assert posts["author"].required is True
    assert posts["tags"].has_many is True
    assert isinstance(posts["heroImage"], UploadField)
    assert isinstance(posts["details"], GroupField)
    assert isinstance(posts["details"].fields[1], RowField)
    assert isinstance(posts["details"].fields[2], ArrayField)
    assert posts["related"].relation_to == ["posts", "tags"]
    assert posts["related"].is_polymorphic
    assert isinstance(posts["divider"], UIField)


def test_parse_tabs_and_blocks(blog_config):
    tabs = next(f for f in blog_config.collections[-1].fields if isinstance(f, TabsField))
    assert [t.name for t in tabs.tabs] == [None, "seo"]

    layout = tabs.tabs[0].fields[0]
    assert isinstance(layout, BlocksField)
    assert [b.slug for b in layout.blocks] == ["callToAction", "quote"]
    assert layout.blocks[0].interface_name == "CallToActionBlock"
    assert layout.blocks[1].interface_name is None


def test_unknown_kind_is_plain_node():
    node = FieldParser().parse_field({"name": "rating", "type": "stars", "max": 5})
    assert type(node) is FieldNode
    assert node.type == "stars"
    assert node.extra == {"max": 5}


def test_select_has_many_kept_in_extra():
    node = FieldParser().parse_field({"name": "colours", "type": "select", "hasMany": True, "options": ["red"]})
    assert node.extra == {"options": ["red"], "hasMany": True}


def test_localized_label():
    node = FieldParser().parse_field({"name": "title", "type": "text", "label": {"en": "Title", "fr": "Titre"}})
    assert node.label == "Title"


def test_field_without_type():
    with pytest.raises(SchemaConfigError, match="has no type"):
        FieldParser().parse_field({"name": "title"}, "collections.posts[0]")


def test_field_not_an_object():
    with pytest.raises(SchemaConfigError, match="must be an object"):
        FieldParser().parse_fields(["title"])


def test_collection_without_slug():
    with pytest.raises(SchemaConfigError, match="slug"):
        FieldParser().parse_config({"collections": [{"fields": []}]})


def test_field_has_name():
    assert field_has_name(FieldNode(type="text", name="title"))
    assert not field_has_name(RowField(fields=[]))
    assert not field_has_name(UIField(name="divider"))
    assert not field_has_name(FieldNode(type="text"))
