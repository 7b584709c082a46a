"""a read-only typed view over a draft-04 json schema object.

the schema is frozen on construction; every accessor returns the configured
value or a well defined sentinel that means "unconstrained".

>>> schema = Schema({"type": "string", "maxLength": 3})
>>> schema.type, schema.max_length, schema.min_length
(('string',), 3, 0)
>>> schema.maximum
EMPTY
"""
import logging

from . import checker, exceptions, json, utils
from .utils import EMPTY

__all__ = ("Schema",)

logger = logging.getLogger(__name__)

# draft-04 keywords a schema may declare that are not enforced
UNSUPPORTED = (
    "additionalProperties",
    "dependencies",
    "enum",
    "allOf",
    "anyOf",
    "oneOf",
    "not",
    "$ref",
    "format",
)


class Schema:
    """a frozen, hashable draft-04 schema with typed keyword accessors"""

    __slots__ = ("_data",)

    def __init__(self, object=None, check=None):
        if object is None:
            object = {}
        if isinstance(object, Schema):
            self._data = object._data
            return
        if not json.is_object(object):
            raise exceptions.SchemaError(
                f"a schema is a json object, not {type(object).__name__}"
            )
        data = utils.freeze(object)
        if utils.CHECK_SCHEMA if check is None else check:
            checker.check_schema(data)
        self._data = data

    def __getitem__(self, key):
        return self._data[key]

    def __contains__(self, key):
        return key in self._data

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __eq__(self, other):
        if isinstance(other, Schema):
            return self._data == other._data
        return NotImplemented

    def __hash__(self):
        return hash((Schema, self._data))

    def __repr__(self):
        return f"{type(self).__name__}({self.to_dict()!r})"

    def value(self, key, default=EMPTY):
        """get the value of a keyword"""
        return self._data.get(key, default)

    def sub(self, object, *path):
        """a sub-schema view, it was checked with its parent"""
        if not json.is_object(object):
            raise exceptions.SchemaError(
                f"a schema is a json object, not {type(object).__name__}",
                keyword=path[0] if path else None,
                path=path,
            )
        return type(self)(object, check=False)

    def to_dict(self):
        return utils.unfreeze(self._data)

    def default_validator(self):
        """the canonical validator of this schema"""
        from . import validators

        return validators.get_validator(self)

    def unsupported(self):
        """the keywords this schema declares that are not enforced"""
        return tuple(k for k in UNSUPPORTED if k in self._data)

    @property
    def title(self):
        return self.value("title", "")

    @property
    def description(self):
        return self.value("description", "")

    # common

    @property
    def type(self):
        return utils.enforce_tuple(self.value("type", ()))

    # numbers

    @property
    def minimum(self):
        return self.value("minimum")

    @property
    def maximum(self):
        return self.value("maximum")

    @property
    def exclusive_minimum(self):
        return bool(self.value("exclusiveMinimum", False))

    @property
    def exclusive_maximum(self):
        return bool(self.value("exclusiveMaximum", False))

    @property
    def multiple_of(self):
        return self.value("multipleOf")

    # strings

    @property
    def min_length(self):
        return self.value("minLength", 0)

    @property
    def max_length(self):
        return self.value("maxLength")

    @property
    def pattern(self):
        return self.value("pattern", "")

    # arrays

    @property
    def items(self):
        """a sub-schema for every element, a tuple of positional sub-schemas or EMPTY"""
        items = self.value("items")
        if items is EMPTY:
            return EMPTY
        if json.is_object(items):
            return self.sub(items, "items")
        if json.is_array(items):
            return tuple(self.sub(x, "items", i) for i, x in enumerate(items))
        raise exceptions.SchemaError(
            f"items is a schema or an array of schemas, not {items!r}", keyword="items"
        )

    @property
    def additional_items(self):
        """a boolean, or a sub-schema for the elements past the tuple"""
        additional = self.value("additionalItems", True)
        if isinstance(additional, bool):
            return additional
        if json.is_object(additional):
            return self.sub(additional, "additionalItems")
        raise exceptions.SchemaError(
            f"additionalItems is a boolean or a schema, not {additional!r}",
            keyword="additionalItems",
        )

    @property
    def min_items(self):
        return self.value("minItems", 0)

    @property
    def max_items(self):
        return self.value("maxItems")

    @property
    def unique_items(self):
        return bool(self.value("uniqueItems", False))

    # objects

    @property
    def required(self):
        return utils.enforce_tuple(self.value("required", ()))

    @property
    def properties(self):
        return {
            k: self.sub(v, "properties", k)
            for k, v in self.value("properties", {}).items()
        }

    @property
    def pattern_properties(self):
        return {
            k: self.sub(v, "patternProperties", k)
            for k, v in self.value("patternProperties", {}).items()
        }

    @property
    def min_properties(self):
        return self.value("minProperties", 0)

    @property
    def max_properties(self):
        return self.value("maxProperties")


@utils.freeze.register
def freeze_schema(object: Schema):
    return object._data
