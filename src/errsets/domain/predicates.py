"""Type predicates shared across the domain.

Every predicate is total: it returns a bool for any input, ``None``
included, and never raises.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_function(value: Any) -> bool:
    return callable(value)


def is_object(value: Any) -> bool:
    """True for key-value records (any ``Mapping``)."""
    return isinstance(value, Mapping)


def is_empty_object(value: Any) -> bool:
    return is_object(value) and len(value) == 0


def kind_of(value: Any) -> str:
    """Return the lower-case kind name of *value*.

    ``bool`` is checked before numbers because it subclasses ``int``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, complex)):
        return "number"
    if is_string(value):
        return "string"
    if is_array(value):
        return "array"
    if is_object(value):
        return "object"
    if is_function(value):
        return "function"
    return type(value).__name__.lower()


def is_object_of(value: Any, kinds: Iterable[str]) -> bool:
    """True if *value* is a mapping whose every value is one of *kinds*."""
    if not is_object(value):
        return False
    expected = set(kinds)
    return all(kind_of(item) in expected for item in value.values())
