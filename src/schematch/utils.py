import abc
import collections.abc
import functools
import os
from contextlib import suppress
from functools import singledispatch as register
from unittest import TestCase

import frozendict

testing = TestCase()
# assertion messages are exactly the ones the matchers write
testing.longMessage = False


class Ø(abc.ABCMeta):
    def __bool__(self):
        return False

    def __repr__(self):
        return "EMPTY"


class EMPTY(metaclass=Ø):
    """a false sentinel for unset keywords"""

    pass


# settings read from the environment, each can be overridden per call
UNIQUE_ITEMS_MODES = "pairwise", "adjacent"
UNIQUE_ITEMS = os.getenv("SCHEMATCH_UNIQUE_ITEMS", "pairwise").strip().lower()
CHECK_SCHEMA = os.getenv("SCHEMATCH_CHECK_SCHEMA", "1").strip().lower() not in {
    "0",
    "false",
    "no",
    "off",
}
# the most validators the arena keeps, 0 is unbounded
CACHE_SIZE = int(os.getenv("SCHEMATCH_CACHE_SIZE", "1024"))


def get_unique_items_mode(mode=None):
    """resolve a uniqueItems mode against the environment default"""
    mode = UNIQUE_ITEMS if mode is None else mode
    if mode not in UNIQUE_ITEMS_MODES:
        raise ValueError(
            f"unknown uniqueItems mode {mode!r}, expected one of {UNIQUE_ITEMS_MODES}"
        )
    return mode


def validates(*types):
    """a decorator for matcher methods that operate on specific json types.

    the wrapped method is a no-op for values of any other type."""

    def decorator(callable):
        @functools.wraps(callable)
        def main(self, object):
            from . import json

            if any(json.is_type(object, type) for type in types):
                return callable(self, object)

        return main

    return decorator


def enforce_tuple(x):
    """make sure the input is a tuple"""
    with suppress(TypeError):
        if x in {None, EMPTY}:
            return ()
    if isinstance(x, list):
        return tuple(x)
    if not isinstance(x, tuple):
        return (x,)
    return x


def lowercase(s):
    """return a lower string"""
    if s:
        return s[0].lower() + s[1:]
    return ""


def normalize_json_key(s):
    """convert a class name to the json key convention

    >>> normalize_json_key("MultipleOf")
    'multipleOf'
    """
    return lowercase(s)


@register
def freeze(object):
    """freeze a nested json object into something hashable."""
    if isinstance(object, collections.abc.Mapping):
        return frozendict.frozendict({k: freeze(v) for k, v in object.items()})
    return object


@freeze.register(list)
@freeze.register(tuple)
def freeze_iter(object):
    return tuple(map(freeze, object))


@register
def unfreeze(object):
    """unfreeze an immutable json object into plain lists and dictionaries."""
    if isinstance(object, collections.abc.Mapping):
        return {k: unfreeze(v) for k, v in object.items()}
    return object


@unfreeze.register(list)
@unfreeze.register(tuple)
def unfreeze_iter(object):
    return list(map(unfreeze, object))


# map a jsonschema type name to the python type
JSONSCHEMA_PY_MAPPING = dict(
    null=type(None),
    boolean=bool,
    string=str,
    integer=int,
    number=float,
    array=list,
    object=dict,
)

# map a python type to its jsonschema key
JSONSCHEMA_STR_MAPPING = dict(map(reversed, JSONSCHEMA_PY_MAPPING.items()))
