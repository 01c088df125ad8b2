# argvtree Argument Tokenizer — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value recognition and coercion helpers for argvtree.

Parsed values are one of four kinds: booleans, numbers, text, or an ordered
list of earlier values. `ValueKind` names them so the merge rule in
`ResultAssembler` can dispatch on the kind of the value already stored.

Functions:
- is_number: Check whether a raw value is a number or numeric-looking text.
- to_number: Convert numeric-looking text to `int` or `float`.
- coerce_value: Apply number coercion unless the key is string-typed.
- coerce_flag: Interpret the text after `--key=` for a boolean-typed key.
- kind_of: Classify a stored value.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Any

HEX_PATTERN = re.compile(r"0x[0-9a-f]+", re.IGNORECASE | re.ASCII)
DECIMAL_PATTERN = re.compile(r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(e[-+]?\d+)?", re.ASCII)
INTEGER_PATTERN = re.compile(r"[-+]?\d+", re.ASCII)


class ValueKind(Enum):
    """The kinds of value a result leaf can hold."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"
    LIST = "list"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


def kind_of(value: Any) -> ValueKind:
    """Return the `ValueKind` of a stored value."""
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, list):
        return ValueKind.LIST
    return ValueKind.OTHER


def is_number(value: Any) -> bool:
    """
    Check whether a value is a number or looks like one.

    Native numbers always count. Text counts when it is a `0x` hexadecimal
    literal or an optionally signed decimal with optional fraction and
    exponent. Booleans never count.

    Args:
        value (Any): The raw value.

    Returns:
        bool: True if the value is numeric.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    text = value if isinstance(value, str) else str(value)
    if HEX_PATTERN.fullmatch(text):
        return True
    return DECIMAL_PATTERN.fullmatch(text) is not None


def to_number(value: Any) -> int | float:
    """
    Convert a numeric value to `int` or `float`.

    Args:
        value (Any): A value for which `is_number` returns True.

    Returns:
        int | float: Hex and plain integer text become `int`, other numeric
        text becomes `float`. Native numbers are returned unchanged.

    Raises:
        ValueError: If the value is not numeric.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    text = value if isinstance(value, str) else str(value)
    if HEX_PATTERN.fullmatch(text):
        return int(text, 16)
    if INTEGER_PATTERN.fullmatch(text):
        return int(text)
    if DECIMAL_PATTERN.fullmatch(text):
        return float(text)
    raise ValueError(f"Value '{value}' is not numeric")


def coerce_value(value: Any, string_typed: bool = False) -> Any:
    """Convert numeric-looking values to numbers unless `string_typed` is set."""
    if not string_typed and is_number(value):
        return to_number(value)
    return value


def coerce_flag(value: str) -> bool:
    """Anything other than the literal text 'false' is True."""
    return value != "false"
