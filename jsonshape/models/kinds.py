"""Classification of decoded JSON values."""

from enum import Enum
from typing import Any


class JsonKind(str, Enum):
    """Kind of a node in a decoded JSON document."""
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    UNKNOWN = "unknown"


def classify(value: Any) -> JsonKind:
    """Return the JSON kind of a decoded value.

    bool is checked before the numeric types since it subclasses int.
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    return JsonKind.UNKNOWN


def type_name(value: Any) -> str:
    return type(value).__name__
