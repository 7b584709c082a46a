"""The checker module checks raw schema objects against the draft-04 meta-schema.

It provides a Checker that also accepts tuples as arrays and any mapping as an
object, so frozen schemas check the same as the json they came from."""
import collections.abc
import logging

import jsonschema

from . import exceptions

logger = logging.getLogger(__name__)


def is_array(checker, object):
    return isinstance(object, (list, tuple))


def is_object(checker, object):
    return isinstance(object, collections.abc.Mapping)


Checker = jsonschema.validators.extend(
    jsonschema.Draft4Validator,
    type_checker=jsonschema.Draft4Validator.TYPE_CHECKER.redefine(
        "array", is_array
    ).redefine("object", is_object),
)


def iter_errors(schema):
    """yield every meta-schema violation of a schema"""
    yield from Checker(Checker.META_SCHEMA).iter_errors(schema)


def check_schema(schema):
    """raise a SchemaError for the most relevant meta-schema violation"""
    error = jsonschema.exceptions.best_match(iter_errors(schema))
    if error is not None:
        logger.debug("schema failed the draft-04 meta-schema: %s", error.message)
        keyword = next(
            (x for x in reversed(error.absolute_path) if isinstance(x, str)), None
        )
        raise exceptions.SchemaError(
            error.message, keyword=keyword, path=error.absolute_path
        ) from error
    return schema
