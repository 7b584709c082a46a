import itertools

from . import exceptions, json, utils
from .types import Matcher

__all__ = (
    "Items",
    "ItemAt",
    "AdditionalItems",
    "MaxItems",
    "MinItems",
    "UniqueItems",
)

validates = utils.validates("array")


class Items(Matcher):
    """every element validates against a single item validator"""

    def __init__(self, delegate):
        self.delegate = delegate

    @validates
    def validator(self, object):
        for i, x in enumerate(object):
            outcome = self.delegate.validate(x)
            if not outcome:
                exceptions.fail(
                    f"item at pos: {i}, does not validate by validator "
                    f"{self.delegate.title!r}: {outcome.message}"
                )

    def ravel(self, object):
        if json.is_array(object):
            for i, x in enumerate(object):
                for schema, path, message in self.delegate.ravel(x):
                    yield self.path() + schema, (i,) + path, message


class ItemAt(Matcher):
    """the element at a tuple position validates when the position exists.

    a missing position passes, array length belongs to the count matchers.
    """

    keyword = "items"

    def __init__(self, delegate, index):
        self.delegate = delegate
        self.index = index

    def path(self):
        return (self.key(), self.index)

    @validates
    def validator(self, object):
        item = json.opt(object, self.index)
        if item is utils.EMPTY:
            return
        outcome = self.delegate.validate(item)
        if not outcome:
            exceptions.fail(
                f"item at pos: {self.index}, does not validate by validator "
                f"{self.delegate.title!r}: {outcome.message}"
            )

    def ravel(self, object):
        if not json.is_array(object):
            return
        item = json.opt(object, self.index)
        if item is not utils.EMPTY:
            for schema, path, message in self.delegate.ravel(item):
                yield self.path() + schema, (self.index,) + path, message


class AdditionalItems(Matcher):
    """the elements past a tuple validate against the additional item validator"""

    def __init__(self, delegate, start):
        self.delegate = delegate
        self.start = start

    @validates
    def validator(self, object):
        for i, x in enumerate(itertools.islice(object, self.start, None), self.start):
            outcome = self.delegate.validate(x)
            if not outcome:
                exceptions.fail(
                    f"additional item at pos: {i}, does not validate by validator "
                    f"{self.delegate.title!r}: {outcome.message}"
                )

    def ravel(self, object):
        if json.is_array(object):
            for i, x in enumerate(object):
                if i < self.start:
                    continue
                for schema, path, message in self.delegate.ravel(x):
                    yield self.path() + schema, (i,) + path, message


class MaxItems(Matcher):
    """an item count ceiling.

    it enforces maxItems and, bound to the tuple length, the rule that a tuple
    admits no additional items.
    """

    def __init__(self, value, keyword="maxItems"):
        self.value = value
        self.keyword = keyword

    @validates
    def validator(self, object):
        if self.keyword == "additionalItems":
            message = f"items in json array more than the {self.value} defined"
        else:
            message = f"{len(object)} items in json array more than maxItems {self.value}"
        exceptions.assertLessEqual(len(object), self.value, message)


class MinItems(Matcher):
    def __init__(self, value):
        self.value = value

    @validates
    def validator(self, object):
        exceptions.assertGreaterEqual(
            len(object),
            self.value,
            f"{len(object)} items in json array less than minItems {self.value}",
        )


class UniqueItems(Matcher):
    """no two elements of the array are equal.

    the adjacent mode only compares each element with its predecessor.

    >>> UniqueItems()([1, 2, 1]).ok, UniqueItems(adjacent=True)([1, 2, 1]).ok
    (False, True)
    """

    def __init__(self, adjacent=False):
        self.adjacent = adjacent

    @validates
    def validator(self, object):
        if self.adjacent:
            pairs = zip(range(len(object)), range(1, len(object)))
        else:
            pairs = itertools.combinations(range(len(object)), 2)
        for i, j in pairs:
            if json.equals(object[i], object[j]):
                exceptions.fail(
                    f"items in json array are not unique, "
                    f"pos: {i} and pos: {j} are both {object[i]!r}"
                )
