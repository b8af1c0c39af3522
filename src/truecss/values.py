"""Tagged value model shared by the truthiness and equality rules."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

# Stylesheet numbers are compared at 10 decimal places.
_PRECISION = 10
_EPSILON = 10**-_PRECISION


class ValueKind(str, Enum):
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    LIST = "list"
    MAP = "map"


class ListSeparator(str, Enum):
    COMMA = "comma"
    SPACE = "space"


@dataclass(frozen=True)
class Value:
    """A single value as seen by an assertion.

    Attributes:
        kind: Which variant this is.
        data: Payload for the variant. ``None`` for null, ``bool`` for
            booleans, ``float`` for numbers, ``str`` for strings, a tuple of
            values for lists and a tuple of ``(key, value)`` pairs for maps.
        unit: Unit of a number (``"px"``, ``"%"``...). Empty when unitless.
        separator: Separator of a list.
        quoted: Whether a string is quoted. Ignored by equality.
    """

    kind: ValueKind
    data: Any = None
    unit: str = ""
    separator: ListSeparator = ListSeparator.COMMA
    quoted: bool = True

    @classmethod
    def coerce(cls, obj: Any) -> Value:
        """Convert a plain Python object into a ``Value``.

        ``None`` becomes null, ``bool``/``int``/``float``/``str`` map to their
        variants, lists and tuples become comma lists and dicts become maps.
        Values pass through untouched.
        """
        if isinstance(obj, Value):
            return obj
        if obj is None:
            return NULL
        if isinstance(obj, bool):
            return TRUE if obj else FALSE
        if isinstance(obj, (int, float)):
            return number(obj)
        if isinstance(obj, str):
            return string(obj)
        if isinstance(obj, (list, tuple)):
            return list_of(obj)
        if isinstance(obj, dict):
            return map_of(obj.items())
        raise TypeError(f"Cannot use {type(obj).__name__!r} as an assertion value")


NULL = Value(ValueKind.NULL)
TRUE = Value(ValueKind.BOOL, True)
FALSE = Value(ValueKind.BOOL, False)


def boolean(flag: bool) -> Value:
    return TRUE if flag else FALSE


def number(value: int | float, unit: str = "") -> Value:
    return Value(ValueKind.NUMBER, float(value), unit=unit)


def string(text: str, quoted: bool = True) -> Value:
    return Value(ValueKind.STRING, text, quoted=quoted)


def list_of(items, separator: ListSeparator | str = ListSeparator.COMMA) -> Value:
    return Value(
        ValueKind.LIST,
        tuple(Value.coerce(item) for item in items),
        separator=ListSeparator(separator),
    )


def map_of(pairs) -> Value:
    return Value(
        ValueKind.MAP,
        tuple((Value.coerce(k), Value.coerce(v)) for k, v in pairs),
    )


def _is_empty_collection(value: Value) -> bool:
    # An empty map and an empty list are the same value in stylesheet code.
    return value.kind in (ValueKind.LIST, ValueKind.MAP) and not value.data


def _is_empty_string(value: Value) -> bool:
    return value.kind is ValueKind.STRING and value.data == ""


def is_truthy(value: Any) -> bool:
    """Stylesheet truthiness, plus empty lists and empty strings count as false."""
    value = Value.coerce(value)
    seed = not (
        value.kind is ValueKind.NULL
        or (value.kind is ValueKind.BOOL and not value.data)
    )
    return seed and not _is_empty_collection(value) and not _is_empty_string(value)


def values_equal(left: Any, right: Any) -> bool:
    """Structural equality over the value variants."""
    left = Value.coerce(left)
    right = Value.coerce(right)

    if _is_empty_collection(left) and _is_empty_collection(right):
        return True
    if left.kind is not right.kind:
        return False

    if left.kind is ValueKind.NULL:
        return True
    if left.kind is ValueKind.BOOL:
        return left.data is right.data
    if left.kind is ValueKind.NUMBER:
        if left.unit != right.unit:
            return False
        if math.isinf(left.data) or math.isinf(right.data):
            return left.data == right.data
        # NaN is unequal to everything, itself included
        return abs(left.data - right.data) < _EPSILON
    if left.kind is ValueKind.STRING:
        return left.data == right.data
    if left.kind is ValueKind.LIST:
        if len(left.data) != len(right.data):
            return False
        if len(left.data) > 1 and left.separator is not right.separator:
            return False
        return all(values_equal(a, b) for a, b in zip(left.data, right.data))

    # Maps: same keys with equal values, in any order
    if len(left.data) != len(right.data):
        return False
    for key, val in left.data:
        match = next((v for k, v in right.data if values_equal(k, key)), None)
        if match is None or not values_equal(val, match):
            return False
    return True


def type_of(value: Any) -> str:
    """Return the stylesheet type name of a value."""
    value = Value.coerce(value)
    if value.kind is ValueKind.BOOL:
        return "bool"
    return value.kind.value


def _format_number(value: Value) -> str:
    if math.isnan(value.data):
        return f"NaN{value.unit}"
    if math.isinf(value.data):
        sign = "-" if value.data < 0 else ""
        return f"{sign}Infinity{value.unit}"
    rounded = round(value.data, _PRECISION)
    if rounded == int(rounded):
        text = str(int(rounded))
    else:
        text = f"{rounded:.{_PRECISION}f}".rstrip("0").rstrip(".")
    return f"{text}{value.unit}"


def inspect(value: Any) -> str:
    """Render a value the way the stylesheet language prints it."""
    value = Value.coerce(value)

    if value.kind is ValueKind.NULL:
        return "null"
    if value.kind is ValueKind.BOOL:
        return "true" if value.data else "false"
    if value.kind is ValueKind.NUMBER:
        return _format_number(value)
    if value.kind is ValueKind.STRING:
        if not value.quoted:
            return value.data
        escaped = value.data.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    if value.kind is ValueKind.MAP:
        if not value.data:
            return "()"
        pairs = ", ".join(f"{inspect(k)}: {_inspect_item(v)}" for k, v in value.data)
        return f"({pairs})"

    if not value.data:
        return "()"
    joiner = ", " if value.separator is ListSeparator.COMMA else " "
    text = joiner.join(_inspect_item(item) for item in value.data)
    if len(value.data) == 1 and value.separator is ListSeparator.COMMA:
        return f"({text},)"
    return text


def _inspect_item(item: Value) -> str:
    text = inspect(item)
    if item.kind is ValueKind.LIST and len(item.data) > 1:
        return f"({text})"
    return text
