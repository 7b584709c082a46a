import re

from . import exceptions, utils
from .types import Matcher

__all__ = "MaxLength", "MinLength", "Pattern", "get_regex"


def get_regex(pattern, keyword="pattern"):
    """compile a schema regex, a malformed regex is a schema error"""
    try:
        return re.compile(pattern)
    except (re.error, TypeError) as e:
        raise exceptions.SchemaError(
            f"invalid regex {pattern!r} in {keyword}: {e}", keyword=keyword
        ) from e


class MaxLength(Matcher):
    def __init__(self, value):
        self.value = value

    @utils.validates("string")
    def validator(self, object):
        exceptions.assertLessEqual(
            len(object),
            self.value,
            f"string length {len(object)} is more than maximum length {self.value}",
        )


class MinLength(Matcher):
    def __init__(self, value):
        self.value = value

    @utils.validates("string")
    def validator(self, object):
        exceptions.assertGreaterEqual(
            len(object),
            self.value,
            f"string length {len(object)} is less than minimum length {self.value}",
        )


class Pattern(Matcher):
    """the whole string matches the regex"""

    def __init__(self, pattern):
        self.pattern = get_regex(pattern)

    @utils.validates("string")
    def validator(self, object):
        exceptions.assertIsNotNone(
            self.pattern.fullmatch(object),
            f"pattern {self.pattern.pattern!r} does not match {object!r}",
        )
