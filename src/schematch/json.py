"""capability queries and typed views over python json values.

json values are the builtins a json parser produces: ``None``, ``bool``,
``int``, ``float``, ``str``, ``list`` and ``dict``. tuples are accepted as
arrays and any mapping as an object. validation only reads these values.
"""
import collections.abc

from . import utils
from .utils import EMPTY

__all__ = (
    "get_type",
    "is_type",
    "is_null",
    "is_boolean",
    "is_integer",
    "is_number",
    "is_string",
    "is_array",
    "is_object",
    "as_string",
    "as_double",
    "as_array",
    "as_object",
    "opt",
    "equals",
)


def get_type(object):
    """the json type name of a python value

    >>> get_type(1), get_type(1.0), get_type(True), get_type(None)
    ('integer', 'number', 'boolean', 'null')
    """
    for cls in type(object).__mro__:
        if cls in utils.JSONSCHEMA_STR_MAPPING:
            return utils.JSONSCHEMA_STR_MAPPING[cls]
    if isinstance(object, tuple):
        return "array"
    if isinstance(object, collections.abc.Mapping):
        return "object"
    raise TypeError(f"{type(object).__name__} is not a json value")


def is_type(object, type):
    """test a value against a json type name, numbers include integers"""
    try:
        kind = get_type(object)
    except TypeError:
        return False
    return kind == type or (type == "number" and kind == "integer")


def is_null(object):
    return object is None


def is_boolean(object):
    return isinstance(object, bool)


def is_integer(object):
    return isinstance(object, int) and not isinstance(object, bool)


def is_number(object):
    return isinstance(object, (int, float)) and not isinstance(object, bool)


def is_string(object):
    return isinstance(object, str)


def is_array(object):
    return isinstance(object, (list, tuple))


def is_object(object):
    return isinstance(object, collections.abc.Mapping)


def _view(test, name):
    def view(object):
        if not test(object):
            raise TypeError(f"{type(object).__name__} is not a json {name}")
        return object

    view.__name__ = f"as_{name}"
    view.__doc__ = f"view a json {name}, only valid when is_{name} holds"
    return view


as_string = _view(is_string, "string")
as_array = _view(is_array, "array")
as_object = _view(is_object, "object")


def as_double(object):
    """view a json number as a double"""
    if not is_number(object):
        raise TypeError(f"{type(object).__name__} is not a json number")
    return float(object)


def opt(object, key, default=EMPTY):
    """look up an array position or an object key without raising on a miss

    >>> opt([1, 2], 1), opt([1, 2], 2), opt({"a": 1}, "b")
    (2, EMPTY, EMPTY)
    """
    if is_array(object):
        if isinstance(key, int) and 0 <= key < len(object):
            return object[key]
        return default
    if is_object(object):
        if key in object:
            return object[key]
        return default
    return default


def equals(a, b):
    """json equality

    numbers compare by value, booleans are never numbers, arrays compare in
    order and objects compare as unordered sets of keys.

    >>> equals(1, 1.0), equals(1, True), equals({"a": [1]}, {"a": [1.0]})
    (True, False, True)
    """
    if is_number(a) and is_number(b):
        return a == b
    if is_array(a) and is_array(b):
        return len(a) == len(b) and all(map(equals, a, b))
    if is_object(a) and is_object(b):
        return set(a) == set(b) and all(equals(a[k], b[k]) for k in a)
    if is_string(a) and is_string(b) or is_boolean(a) and is_boolean(b):
        return a == b
    return a is None and b is None
