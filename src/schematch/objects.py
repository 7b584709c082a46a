from . import exceptions, json, utils
from .strings import get_regex
from .types import Matcher

__all__ = (
    "MaxProperties",
    "MinProperties",
    "Required",
    "Property",
    "PatternProperty",
)

validates = utils.validates("object")


class MaxProperties(Matcher):
    def __init__(self, value):
        self.value = value

    @validates
    def validator(self, object):
        exceptions.assertLessEqual(
            len(object),
            self.value,
            f"{len(object)} properties in json object more than maxProperties {self.value}",
        )


class MinProperties(Matcher):
    def __init__(self, value):
        self.value = value

    @validates
    def validator(self, object):
        exceptions.assertGreaterEqual(
            len(object),
            self.value,
            f"{len(object)} properties in json object less than minProperties {self.value}",
        )


class Required(Matcher):
    """a named property is present"""

    def __init__(self, name):
        self.name = name

    @validates
    def validator(self, object):
        exceptions.assertIn(self.name, object, f"property: {self.name!r} is missing")


class Property(Matcher):
    """a present property validates against its validator.

    an absent property passes, presence belongs to ``Required``.
    """

    keyword = "properties"

    def __init__(self, delegate, name):
        self.delegate = delegate
        self.name = name

    def path(self):
        return (self.key(), self.name)

    @validates
    def validator(self, object):
        if self.name not in object:
            return
        outcome = self.delegate.validate(object[self.name])
        if not outcome:
            exceptions.fail(
                f"property: {self.name!r} is not valid: {outcome.message}"
            )

    def ravel(self, object):
        if json.is_object(object) and self.name in object:
            for schema, path, message in self.delegate.ravel(object[self.name]):
                yield self.path() + schema, (self.name,) + path, message


class PatternProperty(Matcher):
    """every property whose name fully matches the regex validates"""

    keyword = "patternProperties"

    def __init__(self, delegate, pattern):
        self.delegate = delegate
        self.pattern = get_regex(pattern, self.keyword)

    def path(self):
        return (self.key(), self.pattern.pattern)

    def get_matches(self, object):
        for key, value in object.items():
            if isinstance(key, str) and self.pattern.fullmatch(key):
                yield key, value

    @validates
    def validator(self, object):
        for key, value in self.get_matches(object):
            outcome = self.delegate.validate(value)
            if not outcome:
                exceptions.fail(
                    f"property: {key!r} is not valid by patternProperty "
                    f"{self.pattern.pattern!r}: {outcome.message}"
                )

    def ravel(self, object):
        if json.is_object(object):
            for key, value in self.get_matches(object):
                for schema, path, message in self.delegate.ravel(value):
                    yield self.path() + schema, (key,) + path, message
