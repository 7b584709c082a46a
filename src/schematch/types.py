"""the basis of the matcher library: outcomes, the matcher base and the common matchers.

a matcher tests exactly one schema keyword against one json value. matchers
close over the keyword's constants when they are built and hold no other
state, so a matcher can be shared by any number of validators and threads.

>>> Type("string")("abc")
Outcome(ok=True, message='')
>>> Type("string")(1).message
"expected type was 'string' but found 'integer'"
"""
import typing

from . import exceptions, json, utils

__all__ = "Outcome", "PASS", "Matcher", "Type", "ElementValid"


class Outcome(typing.NamedTuple):
    """the result of a matcher, truthy when the value passes"""

    ok: bool
    message: str = ""

    def __bool__(self):
        return self.ok


PASS = Outcome(True)


class Matcher:
    """a single schema keyword tested against a json value.

    subclasses implement ``validator``, which raises an ``AssertionError``
    naming the violated bound. a ``validator`` wrapped in ``utils.validates``
    passes values of the other json types untouched.
    """

    keyword = None

    def key(self):
        """the schema keyword this matcher enforces"""
        return self.keyword or utils.normalize_json_key(type(self).__name__)

    def path(self):
        """the path of the keyword relative to the schema that declares it"""
        return (self.key(),)

    def validator(self, object):
        pass

    def __call__(self, object):
        try:
            self.validator(object)
        except AssertionError as e:
            return Outcome(False, str(e))
        return PASS

    matches = __call__

    def ravel(self, object):
        """yield a (schema path, instance path, message) for each failure"""
        outcome = self(object)
        if not outcome:
            yield self.path(), (), outcome.message

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({args})"


class Type(Matcher):
    """the value's json type is one of the allowed type names"""

    def __init__(self, types):
        self.types = utils.enforce_tuple(types)
        for type in self.types:
            if type not in utils.JSONSCHEMA_PY_MAPPING:
                raise exceptions.SchemaError(f"unknown type {type!r}", keyword="type")

    def validator(self, object):
        if any(json.is_type(object, type) for type in self.types):
            return
        found = get_type_name(object)
        if len(self.types) == 1:
            exceptions.fail(f"expected type was {self.types[0]!r} but found {found!r}")
        exceptions.fail(
            f"expected type was any of {list(self.types)} but found {found!r}"
        )


def get_type_name(object):
    try:
        return json.get_type(object)
    except TypeError:
        return type(object).__name__


class ElementValid(Matcher):
    """an explicit element validates against an explicit validator.

    the candidate value is ignored, this matcher ties a value from elsewhere
    in a document to a validator.
    """

    keyword = "$element"

    def __init__(self, delegate, element):
        self.delegate = delegate
        self.element = element

    def validator(self, object):
        outcome = self.delegate.validate(self.element)
        if not outcome:
            exceptions.fail(
                f"element: {self.element!r}, does not validate by validator "
                f"{self.delegate.title!r}: {outcome.message}"
            )

    def ravel(self, object):
        for schema, path, message in self.delegate.ravel(self.element):
            yield self.path() + schema, path, message
