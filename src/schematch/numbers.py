import fractions

from . import exceptions, json, utils
from .types import Matcher

__all__ = "Maximum", "Minimum", "MultipleOf"


class Maximum(Matcher):
    """an upper bound, inclusive unless exclusive is set

    >>> Maximum(10)(10).ok, Maximum(10, exclusive=True)(10).ok
    (True, False)
    """

    def __init__(self, value, exclusive=False):
        self.value = value
        self.exclusive = bool(exclusive)

    @utils.validates("number")
    def validator(self, object):
        # int and float compare exactly, however large the int
        if self.exclusive:
            exceptions.assertLess(
                object,
                self.value,
                f"value {object} is not less than exclusive maximum {self.value}",
            )
        else:
            exceptions.assertLessEqual(
                object, self.value, f"value {object} is more than maximum {self.value}"
            )


class Minimum(Matcher):
    """a lower bound, inclusive unless exclusive is set"""

    def __init__(self, value, exclusive=False):
        self.value = value
        self.exclusive = bool(exclusive)

    @utils.validates("number")
    def validator(self, object):
        if self.exclusive:
            exceptions.assertGreater(
                object,
                self.value,
                f"value {object} is not more than exclusive minimum {self.value}",
            )
        else:
            exceptions.assertGreaterEqual(
                object, self.value, f"value {object} is less than minimum {self.value}"
            )


def remainder(object, divisor):
    """the remainder of a json number by a divisor.

    integers divide exactly, anything else divides as doubles unless the value
    does not fit in a double.

    >>> remainder(10**400, 3), remainder(10**400, 0.5), remainder(4.5, 3)
    (1, Fraction(0, 1), 1.5)
    """
    if json.is_integer(object) and json.is_integer(divisor):
        return object % divisor
    try:
        return json.as_double(object) % json.as_double(divisor)
    except OverflowError:
        return fractions.Fraction(object) % fractions.Fraction(divisor)


class MultipleOf(Matcher):
    """the value divides by the divisor with an exact zero remainder"""

    def __init__(self, value):
        if not value > 0:
            raise exceptions.SchemaError(
                f"multipleOf must be positive, not {value!r}", keyword="multipleOf"
            )
        self.value = value

    @utils.validates("number")
    def validator(self, object):
        exceptions.assertEqual(
            remainder(object, self.value),
            0,
            f"{object} is not a multiple of {self.value}",
        )
