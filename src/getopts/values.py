"""Option value coercion and display."""

from __future__ import annotations

import re

from .constants import (
    DECIMAL_NUMBER_PATTERN,
    FALSE_LITERALS,
    HEX_NUMBER_PATTERN,
    INTEGER_PATTERN,
    TRUE_LITERALS,
)
from .models import OptionType, OptionValue

_DECIMAL_RE = re.compile(DECIMAL_NUMBER_PATTERN, re.ASCII)
_HEX_RE = re.compile(HEX_NUMBER_PATTERN, re.ASCII)
_INTEGER_RE = re.compile(INTEGER_PATTERN, re.ASCII)
_ASCII_WHITESPACE = " \t\n\r\f\v"


def parse_number(text: str) -> int | float:
    """Parse a locale-free numeric literal.

    Decimal and hexadecimal integers become int, anything with a fraction or
    exponent becomes float. Surrounding ASCII whitespace is ignored.

    Raises:
        ValueError: If text is not a numeric literal
    """
    candidate = text.strip(_ASCII_WHITESPACE)
    if _HEX_RE.fullmatch(candidate):
        return int(candidate, 16)
    if _INTEGER_RE.fullmatch(candidate):
        return int(candidate)
    if _DECIMAL_RE.fullmatch(candidate):
        return float(candidate)
    raise ValueError(f"{text!r} is not a number")


def parse_boolean(text: str) -> bool:
    """Parse true/yes/y and false/no/n (case-sensitive)."""
    if text in TRUE_LITERALS:
        return True
    if text in FALSE_LITERALS:
        return False
    raise ValueError(f"{text!r} is not a boolean")


def coerce_value(value_type: OptionType, text: str) -> OptionValue:
    if value_type == OptionType.NUMBER:
        return parse_number(text)
    if value_type == OptionType.BOOLEAN:
        return parse_boolean(text)
    return text


def format_value(value: OptionValue) -> str:
    """Render a value the way it appears in help annotations."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
