"""
values.py

Closed set of value kinds understood by the soft assertion checks.

Equality between kinds is strict: a number never equals its textual form, a boolean never
equals 0/1 and None never equals anything but None.
"""
import numbers
from enum import Enum
from typing import Any


class ValueKind(Enum):
    TEXT = 'text'
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    ABSENT = 'absent'
    OBJECT = 'object'


# Kinds accepted by assert_contains
CONTAINS_KINDS = frozenset({ValueKind.TEXT, ValueKind.NUMBER})


def kind_of(value: Any) -> ValueKind:
    """
    Classify a value into one of the known kinds.

    bool is checked before numbers because it is a subclass of int.

    Args:
        value: Any value passed to a check

    Returns:
        ValueKind: The kind of the value
    """
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Real):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    return ValueKind.OBJECT


def strictly_equal(actual: Any, expected: Any) -> bool:
    """
    Compare two values without any implicit coercion.

    Values of different kinds are never equal. Objects must also share the same concrete type.

    Args:
        actual: The value under test
        expected: The value it is compared to

    Returns:
        bool: True if the values are strictly equal
    """
    kind = kind_of(actual)
    if kind is not kind_of(expected):
        return False
    if kind is ValueKind.OBJECT and type(actual) is not type(expected):
        return False
    return bool(actual == expected)


def to_text(value: Any) -> str:
    """Textual form of a TEXT or NUMBER value. Integral floats render without a fraction (1.0 -> '1')."""
    kind = kind_of(value)
    if kind not in CONTAINS_KINDS:
        raise TypeError(f"Expected text or number, got {type(value).__name__}: {value!r}")
    if kind is ValueKind.TEXT:
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def require_number(value: Any, name: str) -> Any:
    if kind_of(value) is not ValueKind.NUMBER:
        raise TypeError(f"'{name}' must be a number, got {type(value).__name__}: {value!r}")
    return value
