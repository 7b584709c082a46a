import pytest

from schematch import (
    MaxProperties,
    MinProperties,
    PatternProperty,
    Property,
    Required,
    SchemaError,
    Validator,
)

integers = Validator({"type": "integer"})
others = (None, True, 1, 1.5, "abc", [["a"]])


def test_max_properties():
    assert MaxProperties(1)({"a": 1})
    assert not MaxProperties(1)({"a": 1, "b": 2})
    assert "maxProperties 1" in MaxProperties(1)({"a": 1, "b": 2}).message


def test_min_properties():
    assert MinProperties(1)({"a": 1})
    assert not MinProperties(1)({})
    assert "minProperties 1" in MinProperties(1)({}).message


def test_required():
    assert Required("a")({"a": None})
    outcome = Required("b")({"a": 1})
    assert not outcome
    assert outcome.message == "property: 'b' is missing"


def test_property():
    assert Property(integers, "a")({"a": 1})
    assert not Property(integers, "a")({"a": "1"})
    assert "property: 'a'" in Property(integers, "a")({"a": "1"}).message


def test_absent_property_passes():
    assert Property(integers, "a")({})
    assert Property(integers, "a")({"b": "not an integer"})


def test_pattern_property():
    matcher = PatternProperty(integers, "a+")
    assert matcher({"a": 1, "aa": 2, "b": "x"})
    # the regex matches the whole key
    assert matcher({"ab": "x"})
    outcome = matcher({"a": 1, "aa": "x"})
    assert not outcome
    assert "'aa'" in outcome.message


def test_invalid_pattern_property():
    with pytest.raises(SchemaError) as info:
        PatternProperty(integers, "(")
    assert info.value.keyword == "patternProperties"


@pytest.mark.parametrize("object", others)
def test_objects_ignore_other_types(object):
    for matcher in (
        MaxProperties(0),
        MinProperties(10),
        Required("a"),
        Property(integers, "a"),
        PatternProperty(integers, ".*"),
    ):
        assert matcher(object)


def test_ravel_paths():
    assert list(Property(integers, "a").ravel({"a": "x"})) == [
        (
            ("properties", "a", "type"),
            ("a",),
            "expected type was 'integer' but found 'string'",
        )
    ]
    assert list(PatternProperty(integers, "a+").ravel({"aa": "x"})) == [
        (
            ("patternProperties", "a+", "type"),
            ("aa",),
            "expected type was 'integer' but found 'string'",
        )
    ]
