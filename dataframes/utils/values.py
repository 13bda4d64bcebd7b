# dataframes/utils/values.py
"""
Cell level helpers shared by the CSV codec, the filter and the printer.

Cells are plain Python values: ``int``/``float`` for numbers (NaN marks a
missing value) and ``str`` for text. Booleans are never considered numeric.
"""
from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any, Union

# Leading float prefix: "12.5abc" -> "12.5", "  -3e2x" -> "  -3e2"
_LEADING_FLOAT_RE = re.compile(r"^\s*[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)
# Whole-string numeric literal (used for the CSV numeric test and loose equality)
_NUMERIC_LITERAL_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)
_PREFIXED_INT_RE = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
# "1e-07" -> "1e-7", "1e+021" -> "1e+21"
_EXPONENT_PAD_RE = re.compile(r"e([+-])0+(?=\d)")


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_float_literal(text: str) -> float:
    sign = -1.0 if text.startswith("-") else 1.0
    body = text.lstrip("+-")
    if body == "Infinity":
        return sign * math.inf
    return float(text)


# --- Coercion ---

def coerce(raw: str, decimal: str = ".") -> Union[float, str]:
    """
    Best-effort conversion of a CSV field into a number.

    The first occurrence of ``decimal`` is replaced by ``.`` and the longest
    leading float is parsed; trailing garbage is ignored ("12kg" -> 12.0).
    If no number can be read the original, untouched string is returned.

    Args:
        raw (str): The field as read from the CSV text.
        decimal (str): Decimal mark used in the file ("," for "12,5").

    Returns:
        Union[float, str]: The parsed float or ``raw`` itself.
    """
    candidate = raw.replace(decimal, ".", 1) if decimal else raw
    match = _LEADING_FLOAT_RE.match(candidate)
    if match is None:
        return raw
    return _parse_float_literal(match.group(0).strip())


def to_number(value: Any) -> float:
    """Strict numeric conversion of a whole value; NaN when it is not a number."""
    if is_number(value):
        return float(value)
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0  # blank text converts to zero
        if _NUMERIC_LITERAL_RE.fullmatch(text):
            return _parse_float_literal(text)
        if _PREFIXED_INT_RE.fullmatch(text):
            return float(int(text, 0))
    return math.nan


def passes_numeric_test(cell: Any) -> bool:
    """True when the cell reads as a number, i.e. its decimal point may be localized."""
    return not math.isnan(to_number(cell))


# --- Equality ---

def loose_equals(cell: Any, value: Any) -> bool:
    """
    Cross-type equality used by ``DataFrame.where``.

    A numeric cell matches a numeric string (12 == "12"), booleans compare
    as 1/0, strings compare exactly with strings and NaN never matches.
    """
    if cell is None or value is None:
        return cell is None and value is None
    if isinstance(cell, bool) or isinstance(value, bool):
        cell = int(cell) if isinstance(cell, bool) else cell
        value = int(value) if isinstance(value, bool) else value
    if isinstance(cell, str) and isinstance(value, str):
        return cell == value
    if is_number(cell) or is_number(value):
        if not isinstance(cell, (int, float, str)) or not isinstance(value, (int, float, str)):
            return False
        return to_number(cell) == to_number(value)
    return cell == value


# --- Formatting ---

def number_to_string(value: Union[int, float]) -> str:
    """String form of a number: ``20.0`` -> ``"20"``, NaN -> ``"NaN"``."""
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if 1e-6 <= abs(value) < 1e-4:
        # fixed notation down to 1e-6, exponent form below
        return format(Decimal(repr(value)), "f")
    return _EXPONENT_PAD_RE.sub(r"e\1", repr(value))


def cell_to_string(cell: Any) -> str:
    if is_number(cell):
        return number_to_string(cell)
    return str(cell)


def format_cell(cell: Any, float_precision: int = 2) -> str:
    """Printable form of a cell: non-integral numbers get ``float_precision`` decimals."""
    if isinstance(cell, float) and not cell.is_integer():
        if math.isfinite(cell):
            return f"{cell:.{float_precision}f}"
        return number_to_string(cell)
    return cell_to_string(cell)

