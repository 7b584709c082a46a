"""compile draft-04 schemas into validators.

a validator is bound to one schema. it compiles the matchers that apply to the
schema once, when it is built, and ANDs them for every value it is asked about.

>>> validator = Validator({"type": "string", "maxLength": 3})
>>> validator.is_valid("abc"), validator.is_valid("abcd"), validator.is_valid(1)
(True, False, False)
>>> validator.validate("abcd").message
'string length 4 is more than maximum length 3'
"""
import logging

from . import arrays, caches, exceptions, numbers, objects, strings, types, utils
from .schema import Schema
from .types import PASS
from .utils import EMPTY

__all__ = "Validator", "get_validator", "is_valid", "validate"

logger = logging.getLogger(__name__)


class Validator:
    """the compiled AND of the matchers that apply to one schema"""

    def __init__(self, schema=None, unique_items=None):
        self.schema = Schema(schema)
        self.unique_items = utils.get_unique_items_mode(unique_items)
        matchers = []
        for compile in (
            self.compile_numeric,
            self.compile_string,
            self.compile_array,
            self.compile_object,
            self.compile_common,
        ):
            matchers.extend(compile(self.schema))
        self.matchers = tuple(matchers)

        for keyword in self.schema.unsupported():
            logger.warning(
                "%s is not enforced, schema %r ignores it", keyword, self.title
            )
        logger.debug("compiled %d matchers for schema %r", len(self), self.title)

    @classmethod
    @caches.validator_cache
    def from_schema(cls, schema, unique_items):
        return cls(schema, unique_items)

    @property
    def title(self):
        return self.schema.title or "#"

    def get_validator(self, schema):
        """the validator of a sub-schema, sharing this validator's settings"""
        return get_validator(schema, self.unique_items, cls=type(self))

    def compile_numeric(self, schema):
        multiple_of = schema.multiple_of
        if multiple_of is not EMPTY and multiple_of > 0:
            yield numbers.MultipleOf(multiple_of)

        if schema.maximum is not EMPTY:
            yield numbers.Maximum(schema.maximum, schema.exclusive_maximum)

        if schema.minimum is not EMPTY:
            yield numbers.Minimum(schema.minimum, schema.exclusive_minimum)

    def compile_string(self, schema):
        if schema.max_length is not EMPTY:
            yield strings.MaxLength(schema.max_length)

        if schema.min_length > 0:
            yield strings.MinLength(schema.min_length)

        if schema.pattern:
            yield strings.Pattern(schema.pattern)

    def compile_array(self, schema):
        items = schema.items
        if isinstance(items, tuple) and len(items) == 1:
            items = items[0]
        if isinstance(items, Schema):
            # single type for all the items
            yield arrays.Items(self.get_validator(items))
        elif isinstance(items, tuple):
            # tuple typing, additionalItems only means something here
            additional = schema.additional_items
            if additional is False:
                yield arrays.MaxItems(len(items), keyword="additionalItems")
            for i, item in enumerate(items):
                yield arrays.ItemAt(self.get_validator(item), i)
            if isinstance(additional, Schema):
                yield arrays.AdditionalItems(self.get_validator(additional), len(items))

        if schema.max_items is not EMPTY:
            yield arrays.MaxItems(schema.max_items)

        if schema.min_items > 0:
            yield arrays.MinItems(schema.min_items)

        if schema.unique_items:
            yield arrays.UniqueItems(adjacent=self.unique_items == "adjacent")

    def compile_object(self, schema):
        if schema.max_properties is not EMPTY:
            yield objects.MaxProperties(schema.max_properties)

        if schema.min_properties > 0:
            yield objects.MinProperties(schema.min_properties)

        for name in schema.required:
            yield objects.Required(name)

        for name, property in schema.properties.items():
            yield objects.Property(self.get_validator(property), name)

        for pattern, property in schema.pattern_properties.items():
            yield objects.PatternProperty(self.get_validator(property), pattern)

        # additionalProperties is not enforced, see Schema.unsupported

    def compile_common(self, schema):
        if schema.type:
            yield types.Type(schema.type)

    def __len__(self):
        return len(self.matchers)

    def __repr__(self):
        return f"<{type(self).__name__} {self.title!r} matchers={len(self)}>"

    def validate(self, object, sink=None):
        """the outcome of the first failing matcher, or a pass.

        the failure message is appended to the sink when one is given."""
        for matcher in self.matchers:
            outcome = matcher(object)
            if not outcome:
                logger.debug(
                    "%r failed %s: %s", self.title, matcher.key(), outcome.message
                )
                if sink is not None:
                    sink.append(outcome.message)
                return outcome
        return PASS

    def is_valid(self, object):
        return bool(self.validate(object))

    def ravel(self, object):
        """yield every failure as a (schema path, instance path, message)"""
        for matcher in self.matchers:
            yield from matcher.ravel(object)

    def audit(self, object, max=None):
        """collect every failure of the value, up to max"""
        report = exceptions.ValidationReport()
        for failure in self.ravel(object):
            report.append(failure)
            if max is not None and len(report.failures) >= max:
                break
        return report

    def assert_valid(self, object):
        """return the value, or raise a ValidationError with the audit report"""
        report = self.audit(object)
        if not report:
            raise exceptions.ValidationError(report)
        return object


def get_validator(schema, unique_items=None, cls=Validator):
    """the cached validator of a schema"""
    if not isinstance(schema, Schema):
        schema = Schema(schema)
    return cls.from_schema(schema, utils.get_unique_items_mode(unique_items))


def is_valid(schema, object, **kwargs):
    return get_validator(schema, **kwargs).is_valid(object)


def validate(schema, object, sink=None, **kwargs):
    return get_validator(schema, **kwargs).validate(object, sink)
