"""schema errors, validation errors and the audit report."""
from . import utils

globals().update(
    {
        x: getattr(utils.testing, x)
        for x in dir(utils.testing)
        if x.startswith("assert") or x == "fail"
    }
)
__all__ = "SchemaError", "ValidationError", "ValidationReport"


def get_pointer(parts, root=""):
    """a json pointer from a path of keys and positions"""
    import jsonpointer

    return jsonpointer.JsonPointer.from_parts(list(parts)).path or root


class SchemaError(ValueError):
    """a schema that can not be compiled into a validator"""

    def __init__(self, message, keyword=None, path=()):
        super().__init__(message)
        self.message = message
        self.keyword = keyword
        self.path = tuple(path)

    def __str__(self):
        if self.path:
            return f"{self.message} @{get_pointer(self.path)}"
        return self.message


class ValidationReport:
    """every failure of a value against a validator.

    each failure is a ``(schema path, instance path, message)`` triple; the
    paths are tuples of keys and positions. a report is truthy when the value
    is valid.
    """

    def __init__(self, failures=()):
        self.failures = list(failures)

    @property
    def ok(self):
        return not self.failures

    def __bool__(self):
        return self.ok

    def __iter__(self):
        return iter(self.failures)

    def append(self, failure):
        self.failures.append(tuple(failure))

    def messages(self):
        return [message for _, _, message in self.failures]

    def ravel(self):
        """the failures with json pointers for both paths"""
        for schema, path, message in self.failures:
            yield get_pointer(schema), get_pointer(path, "/"), message

    def report(self):
        shift = [0, 0]
        failures = list(self.ravel())
        for schema, path, message in failures:
            shift = [max(shift[0], len(schema)), max(shift[1], len(path))]

        return "\n".join(
            "❗"
            + x
            + " " * (shift[0] - len(x))
            + " @"
            + y
            + " " * (shift[1] - len(y))
            + ": "
            + str(z)
            for x, y, z in failures
        )

    def __str__(self):
        return self.report()

    def __repr__(self):
        return f"<{type(self).__name__} failures={len(self.failures)}>"


class ValidationError(ValueError):
    """raised by Validator.assert_valid, carries the audit report"""

    def __init__(self, report):
        super().__init__(report)
        self.report = report

    def __str__(self):
        return "\n" + self.report.report()
