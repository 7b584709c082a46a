import pytest

from schematch import SchemaError, ValidationError, ValidationReport, exceptions


def test_get_pointer():
    assert exceptions.get_pointer(()) == ""
    assert exceptions.get_pointer((), "/") == "/"
    assert exceptions.get_pointer(("items", 0, "type")) == "/items/0/type"
    assert exceptions.get_pointer(("a/b", "c~d")) == "/a~1b/c~0d"


def test_schema_error():
    error = SchemaError("bad", keyword="minLength", path=("properties", "a"))
    assert isinstance(error, ValueError)
    assert str(error) == "bad @/properties/a"
    assert str(SchemaError("bad")) == "bad"
    assert SchemaError("bad").path == ()


def test_report():
    report = ValidationReport()
    assert report and report.ok
    assert report.report() == ""
    report.append((("maxLength",), ("a",), "too long"))
    report.append((("properties", "bb", "type"), (), "wrong type"))
    assert not report
    assert len(list(report)) == 2
    assert report.messages() == ["too long", "wrong type"]
    assert list(report.ravel()) == [
        ("/maxLength", "/a", "too long"),
        ("/properties/bb/type", "/", "wrong type"),
    ]
    assert report.report().splitlines() == [
        "❗/maxLength          @/a: too long",
        "❗/properties/bb/type @/ : wrong type",
    ]
    assert str(report) == report.report()
    assert repr(report) == "<ValidationReport failures=2>"


def test_validation_error():
    report = ValidationReport([(("type",), (), "expected type was 'string'")])
    with pytest.raises(ValueError) as info:
        raise ValidationError(report)
    assert info.value.report is report
    assert str(info.value) == "\n❗/type @/: expected type was 'string'"


def test_assertions_are_exported():
    with pytest.raises(AssertionError) as info:
        exceptions.assertLessEqual(2, 1, "2 is more than 1")
    assert str(info.value) == "2 is more than 1"
    with pytest.raises(AssertionError):
        exceptions.fail("failed")
