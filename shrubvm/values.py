"""Runtime values: numbers are floats, booleans are bools, strings are str."""

from __future__ import annotations

from enum import Enum

from .errors import ErrorType, VMError


class ValueType(Enum):
    """The type tag of a runtime value."""

    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"


def value_type(value: object) -> ValueType:
    """Return the type tag of a runtime value."""
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueType.NUMBER
    if isinstance(value, str):
        return ValueType.STRING
    raise VMError(ErrorType.TYPE_ERROR, f"Unsupported value {value!r}")


def same_type(first: object, second: object) -> bool:
    """Tell whether two runtime values carry the same type tag."""
    return value_type(first) is value_type(second)


def make_string(buffer: str, length: int) -> str:
    """Build a string value from the first ``length`` characters of ``buffer``."""
    if length < 0 or length > len(buffer):
        raise ValueError(f"length {length} does not fit a buffer of {len(buffer)}")
    return buffer[:length]


def format_value(value: object) -> str:
    """Render a value the way the PRINT instruction shows it."""
    try:
        kind = value_type(value)
    except VMError:
        raise VMError(ErrorType.TYPE_ERROR, "Object not printable") from None
    if kind is ValueType.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueType.NUMBER:
        return "%f" % value
    return value  # type: ignore[return-value]