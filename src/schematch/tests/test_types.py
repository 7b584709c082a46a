import pytest

from schematch import PASS, ElementValid, Matcher, Outcome, SchemaError, Type, Validator


def test_outcome():
    assert PASS and PASS.ok and PASS.message == ""
    failure = Outcome(False, "why")
    assert not failure
    assert failure.message == "why"


@pytest.mark.parametrize(
    "type, object",
    [
        ("null", None),
        ("boolean", False),
        ("integer", 1),
        ("number", 1),
        ("number", 1.5),
        ("string", "abc"),
        ("array", []),
        ("object", {}),
    ],
)
def test_type(type, object):
    assert Type(type)(object)
    assert Type([type])(object)


@pytest.mark.parametrize(
    "type, object",
    [
        ("null", False),
        ("boolean", 0),
        ("integer", 1.0),
        ("integer", True),
        ("number", True),
        ("number", "1"),
        ("string", None),
        ("array", {}),
        ("object", []),
    ],
)
def test_not_type(type, object):
    assert not Type(type)(object)


def test_any_of_types():
    matcher = Type(["string", "null"])
    assert matcher("a") and matcher(None)
    outcome = matcher(1)
    assert not outcome
    assert outcome.message == (
        "expected type was any of ['string', 'null'] but found 'integer'"
    )


def test_unknown_type():
    with pytest.raises(SchemaError):
        Type("any")


def test_element_valid_ignores_the_candidate():
    positive = Validator({"minimum": 0})
    assert ElementValid(positive, 1)("anything")
    assert ElementValid(positive, 1)(-1)
    outcome = ElementValid(positive, -1)(1)
    assert not outcome
    assert "element: -1" in outcome.message


def test_matcher_base_passes():
    assert Matcher()(None)
    assert list(Matcher().ravel(None)) == []
    assert Matcher().key() == "matcher"


def test_ravel():
    assert list(Type("string").ravel(1)) == [
        (("type",), (), "expected type was 'string' but found 'integer'")
    ]
    assert list(Type("string").ravel("a")) == []
