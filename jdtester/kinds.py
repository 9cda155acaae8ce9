"""
Value classification shared by the validation engine and the deep diff.

Every value is mapped to exactly one Kind. The engine dispatches rule groups
on it, the rule groups use it to check schema field types, and the diff uses
it to decide whether two values can be recursed into.
"""

import re
from collections.abc import Mapping
from enum import Enum
from numbers import Real
from typing import Any


class _Undefined:
    """Marker for an absent data particle (a missing key, an unset root)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


class Kind(str, Enum):
    """Closed set of value kinds understood by schemas."""

    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    REGEX = "regex"
    FUNCTION = "function"
    UNRECOGNIZED = "unrecognized"

    def __str__(self) -> str:
        return self.value


PRIMITIVE_KINDS = frozenset(
    [Kind.UNDEFINED, Kind.NULL, Kind.BOOLEAN, Kind.NUMBER, Kind.STRING]
)
CONTAINER_KINDS = frozenset([Kind.ARRAY, Kind.OBJECT])


def classify(value: Any) -> Kind:
    """
    Return the Kind of a value.

    Order matters: bool is checked before numbers (bool subclasses int) and
    containers before the generic callable check.

    Args:
        value: Any data particle or schema field

    Returns:
        The matching Kind, Kind.UNRECOGNIZED if nothing matches
    """
    if value is UNDEFINED:
        return Kind.UNDEFINED
    if value is None:
        return Kind.NULL
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    if isinstance(value, re.Pattern):
        return Kind.REGEX
    if isinstance(value, Mapping):
        return Kind.OBJECT
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, Real):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if callable(value):
        return Kind.FUNCTION
    return Kind.UNRECOGNIZED
