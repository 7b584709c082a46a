import pytest

from schematch import Schema, SchemaError, Validator, caches
from schematch.utils import EMPTY


def test_sentinels():
    schema = Schema()
    assert schema.type == ()
    assert schema.minimum is schema.maximum is schema.multiple_of is EMPTY
    assert schema.exclusive_minimum is schema.exclusive_maximum is False
    assert schema.min_length == 0 and schema.max_length is EMPTY
    assert schema.pattern == ""
    assert schema.items is EMPTY
    assert schema.additional_items is True
    assert schema.min_items == 0 and schema.max_items is EMPTY
    assert schema.unique_items is False
    assert schema.required == ()
    assert schema.properties == {} and schema.pattern_properties == {}
    assert schema.min_properties == 0 and schema.max_properties is EMPTY
    assert schema.title == ""


def test_accessors():
    schema = Schema(
        {
            "title": "point",
            "type": ["array", "null"],
            "items": [{"type": "number"}, {"type": "number"}],
            "additionalItems": False,
            "maxItems": 3,
            "uniqueItems": True,
        }
    )
    assert schema.title == "point"
    assert schema.type == ("array", "null")
    assert schema.items == (Schema({"type": "number"}),) * 2
    assert schema.additional_items is False
    assert schema.max_items == 3
    assert schema.unique_items is True


def test_single_items_schema():
    schema = Schema({"items": {"type": "string"}})
    assert schema.items == Schema({"type": "string"})


def test_additional_items_schema():
    schema = Schema({"items": [{}], "additionalItems": {"type": "string"}})
    assert schema.additional_items == Schema({"type": "string"})


def test_object_accessors():
    schema = Schema(
        {
            "required": ["a"],
            "properties": {"a": {"type": "integer"}},
            "patternProperties": {"^b": {"type": "string"}},
            "minProperties": 1,
        }
    )
    assert schema.required == ("a",)
    assert schema.properties == {"a": Schema({"type": "integer"})}
    assert list(schema.pattern_properties) == ["^b"]
    assert schema.min_properties == 1


def test_frozen_and_hashable():
    a = Schema({"properties": {"a": {"type": ["string"]}}})
    b = Schema({"properties": {"a": {"type": ["string"]}}})
    assert a == b and hash(a) == hash(b)
    assert a != Schema({})
    assert {a: 1}[b] == 1
    assert a.to_dict() == {"properties": {"a": {"type": ["string"]}}}
    assert Schema(a) == a
    assert "properties" in a and a["properties"]["a"]["type"] == ("string",)
    assert len(a) == 1 and list(a) == ["properties"]


def test_nested_schema_instances():
    inner = Schema({"type": "string"})
    assert Schema({"items": inner}).items == inner


def test_not_an_object():
    with pytest.raises(SchemaError):
        Schema([])
    with pytest.raises(SchemaError):
        Schema("string")


@pytest.mark.parametrize(
    "schema",
    [
        {"type": "whatever"},
        {"minLength": -1},
        {"maxItems": 1.5},
        {"exclusiveMaximum": True},
        {"required": []},
        {"items": 1},
        {"multipleOf": 0},
        {"properties": {"a": 1}},
    ],
)
def test_meta_schema(schema):
    with pytest.raises(SchemaError):
        Schema(schema)


def test_meta_schema_path():
    with pytest.raises(SchemaError) as info:
        Schema({"properties": {"a": {"minLength": -1}}})
    assert info.value.path == ("properties", "a", "minLength")
    assert info.value.keyword == "minLength"
    assert str(info.value).endswith("@/properties/a/minLength")


def test_unchecked(monkeypatch):
    Schema({"minLength": -1}, check=False)
    from schematch import utils

    monkeypatch.setattr(utils, "CHECK_SCHEMA", False)
    Schema({"minLength": -1})


def test_malformed_unchecked_schema():
    with pytest.raises(SchemaError):
        Schema({"items": 1}, check=False).items
    with pytest.raises(SchemaError):
        Schema({"additionalItems": 1}, check=False).additional_items
    with pytest.raises(SchemaError):
        Schema({"properties": {"a": 1}}, check=False).properties


def test_unsupported():
    schema = Schema({"additionalProperties": False, "enum": [1], "type": "integer"})
    assert schema.unsupported() == ("additionalProperties", "enum")


def test_default_validator():
    caches.clear()
    schema = Schema({"type": "string"})
    validator = schema.default_validator()
    assert isinstance(validator, Validator)
    assert validator is schema.default_validator()
    assert validator is Schema({"type": "string"}).default_validator()
    assert validator.schema == schema
