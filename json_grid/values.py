from __future__ import annotations

from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Shape of a parsed document value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class _Missing:
    """Marker for a field a record does not define (an "undefined" cell)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def kind_of(value: Any) -> ValueKind:
    """Classify a parsed value.

    bool is checked before numbers since it subclasses int. Anything that is not
    a JSON scalar or list is treated as an object.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    return ValueKind.OBJECT


def is_container(value: Any) -> bool:
    return kind_of(value) in (ValueKind.ARRAY, ValueKind.OBJECT)


def is_record(value: Any) -> bool:
    return isinstance(value, dict)
