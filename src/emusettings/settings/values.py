"""Typed value parsing and formatting for settings files.

A raw value from a ``key = value`` line is classified by trying a fixed,
ordered list of parsers. The first one that accepts the text wins:

1. integer (decimal digits with an optional sign, signed 64-bit range)
2. float (decimal/exponent notation, ``NaN`` and ``Infinity``), narrowed
   to single precision
3. boolean (the exact literals ``True`` and ``False``)
4. string (anything else)
"""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Callable
from typing import Final, Optional, Union

SettingValue = Union[bool, int, float, str]

INT64_MIN: Final = -(2**63)
INT64_MAX: Final = 2**63 - 1
# Significant digits of the widest int64 value
INT64_MAX_DIGITS: Final = 19
# Nine significant digits always identify a single-precision value
FLOAT32_MAX_DIGITS: Final = 9

_INT_PATTERN: Final = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN: Final = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_NON_FINITE: Final[dict[str, float]] = {
    "NaN": math.nan,
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}
_BOOLEANS: Final[dict[str, bool]] = {"True": True, "False": False}


def to_float32(value: float) -> float:
    """Round a float to the nearest single-precision value.

    Finite values beyond the single-precision range become signed infinity.
    """
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_int(text: str) -> Optional[int]:
    """Parse a decimal integer, or return None."""
    if not _INT_PATTERN.fullmatch(text):
        return None
    # Bound the digit count before int() so huge tokens stay cheap and legal
    if len(text.lstrip("+-").lstrip("0")) > INT64_MAX_DIGITS:
        return None
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def parse_float(text: str) -> Optional[float]:
    """Parse a single-precision floating point number, or return None."""
    if text in _NON_FINITE:
        return _NON_FINITE[text]
    if not _FLOAT_PATTERN.fullmatch(text):
        return None
    return to_float32(float(text))


def parse_bool(text: str) -> Optional[bool]:
    """Parse ``True``/``False`` (case-sensitive), or return None."""
    return _BOOLEANS.get(text)


# Evaluated in order; parse_value falls back to the raw string.
VALUE_PARSERS: Final[tuple[Callable[[str], Optional[SettingValue]], ...]] = (
    parse_int,
    parse_float,
    parse_bool,
)


def parse_value(text: str) -> SettingValue:
    """Infer the typed value of a raw setting string.

    Args:
        text: Value text, already stripped of surrounding whitespace

    Returns:
        An int, float or bool when one of the parsers accepts the text,
        otherwise the text itself
    """
    for parser in VALUE_PARSERS:
        value = parser(text)
        if value is not None:
            return value
    return text


def _format_float32(value: float) -> str:
    """Shortest text that parses back to the same single-precision value."""
    value = to_float32(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    shortest = value
    for digits in range(1, FLOAT32_MAX_DIGITS + 1):
        candidate = float(f"{value:.{digits}g}")
        if to_float32(candidate) == value:
            shortest = candidate
            break
    # repr keeps a "." or exponent, so the text never sniffs as an integer
    return repr(shortest)


def format_value(value: SettingValue) -> str:
    """Render a typed value the way it is written to disk.

    The output always parses back to an equal value of the same type.
    Floats are written at single precision: ``0.1`` stays ``0.1``.
    """
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, float):
        return _format_float32(value)
    return str(value)
