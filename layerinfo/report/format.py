# -*- coding: utf-8 -*-
"""Formatting of single attribute values for the report tables.

Values fall into a closed set of kinds (number, string, struct, other) and each kind has its own renderer.
Numbers also report their integral width so that a column of numbers can be aligned on the decimal point.
"""

import json
from decimal import Decimal
from enum import Enum

import numpy as np


class ValueKind(Enum):
    """Kinds of attribute values, each rendered differently."""

    NUMBER = "number"
    STRING = "string"
    STRUCT = "struct"
    OTHER = "other"


def classify_value(val):
    """Get the ValueKind of an attribute value.

    Booleans are not numbers here, even though bool is a subclass of int.
    """
    if isinstance(val, (bool, np.bool_)):
        return ValueKind.OTHER
    if isinstance(val, (int, float, np.integer, np.floating)):
        return ValueKind.NUMBER
    if isinstance(val, str):
        return ValueKind.STRING
    if isinstance(val, (dict, list, tuple)):
        return ValueKind.STRUCT
    return ValueKind.OTHER


def format_number(val):
    """Shortest text form of a number; integral floats are shown without a decimal part.

    Parameters:
    -----------
    val : int, float or numpy number
        Value to format

    Returns:
    --------
    text : str
        e.g. "3", "12.5", "-0.25", "9223372036854776000", "1e+21", "nan"
    """
    if isinstance(val, np.generic):
        val = val.item()
    if isinstance(val, float) and val.is_integer() and abs(val) < 1e21:
        # int() prints the exact binary value, which has more digits than repr past 1e16
        if abs(val) >= 1e16:
            return format(Decimal(repr(val)), "f")
        return str(int(val))
    return repr(val)


def escape_char(c):
    """Map one character of a string value to its display text.

    Newline, carriage return and tab become backslash escapes; all other non-printing characters are dropped.
    """
    if c == "\n":
        return "\\n"
    if c == "\r":
        return "\\r"
    if c == "\t":
        return "\\t"
    if not c.isprintable():
        return ""
    return c


def format_string(val):
    """Quote a string value with single quotes, escaping line breaks and tabs."""
    return "'" + "".join(escape_char(c) for c in val) + "'"


def format_struct(val):
    """Compact JSON text of a dict or list value."""
    return json.dumps(val, separators=(",", ":"), ensure_ascii=False, default=str)


def format_other(val):
    return str(val)


_RENDERERS = {
    ValueKind.NUMBER: format_number,
    ValueKind.STRING: format_string,
    ValueKind.STRUCT: format_struct,
    ValueKind.OTHER: format_other,
}


def format_value(val):
    """Render an attribute value according to its kind."""
    return _RENDERERS[classify_value(val)](val)


def count_integral_chars(val):
    """Count the characters left of the decimal point of a formatted number (0 for non-numbers).

    Numbers without a decimal point count in full, including a leading sign or exponent.
    """
    if classify_value(val) is not ValueKind.NUMBER:
        return 0
    text = format_number(val)
    idx = text.find(".")
    return idx if idx >= 0 else len(text)


def format_table_item(name, val, col1_chars, integral_chars):
    """Format one row of an attribute table.

    Parameters:
    -----------
    name : str
        Field name
    val : any
        Field value
    col1_chars : int
        Width of the field-name column
    integral_chars : int
        Widest integral part among the numbers of the table

    Returns:
    --------
    line : str
        Padded field name followed by the rendered value
    """
    line = name.ljust(col1_chars)
    if classify_value(val) is ValueKind.NUMBER:
        line += " " * (integral_chars - count_integral_chars(val))
    return line + format_value(val)
