#!/usr/bin/env python3

"""
Field types and their text codecs.

Every schema field is bound to exactly one codec when the schema class is
defined. A codec knows the field's default value and how to convert a single
tab-delimited token to and from the typed value.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, NewType

from .exceptions import EmptyCharacterTokenError, MalformedIntegerError, UnsupportedFieldTypeError

Int32 = NewType('Int32', int)
# A Char value must be exactly one character; construction does not check it
Char = NewType('Char', str)

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1

_DECIMAL = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True)
class FieldCodec:
    """Conversion rules for one field type."""
    name: str
    default: Any
    parse: Callable[[str], Any]
    format: Callable[[Any], str]


def parse_text(token: str) -> str:
    return token


def format_text(value: str) -> str:
    return value


def parse_int32(token: str) -> int:
    """Parse a signed decimal token into a value within the int32 range."""
    if not _DECIMAL.fullmatch(token):
        raise MalformedIntegerError(f"'{token}' is not a decimal integer", token=token)

    # Over 10 significant digits is out of range; int() raises ValueError on very long strings
    digits = token.lstrip("+-").lstrip("0")
    if len(digits) > len(str(INT32_MAX)):
        raise MalformedIntegerError(f"{len(digits)}-digit value is outside the 32-bit integer range",
                                    token=token)

    value = int(digits) if digits else 0
    if token.startswith("-"):
        value = -value
    if not INT32_MIN <= value <= INT32_MAX:
        raise MalformedIntegerError(f"{token} is outside the 32-bit integer range", token=token)
    return value


def format_int32(value: int) -> str:
    return str(value)


def parse_char(token: str) -> str:
    """Bind the first character of a token."""
    if not token:
        raise EmptyCharacterTokenError("Empty token for a character field", token=token)
    return token[0]


def format_char(value: str) -> str:
    """Write a Char value. Only single-character values parse back unchanged."""
    return value


TEXT_CODEC = FieldCodec(name='text', default='', parse=parse_text, format=format_text)
INT32_CODEC = FieldCodec(name='int32', default=0, parse=parse_int32, format=format_int32)
CHAR_CODEC = FieldCodec(name='char', default='\x00', parse=parse_char, format=format_char)

_CODECS = {
    str: TEXT_CODEC,
    Int32: INT32_CODEC,
    int: INT32_CODEC,
    Char: CHAR_CODEC,
}


def codec_for(field_type: object, field_name: str = "") -> FieldCodec:
    """Return the codec for a field annotation."""
    try:
        return _CODECS[field_type]
    except (KeyError, TypeError):
        raise UnsupportedFieldTypeError(field_name, field_type) from None
