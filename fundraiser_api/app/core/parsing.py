"""
Lenient number coercion for admin payloads.

The admin dashboard posts whatever the user typed in a form field, so
counts and amounts may arrive as numbers, numeric strings or strings
with trailing garbage (``"12 laps"``).  These helpers take the leading
number of the textual value, the same way a browser form would be read,
and return ``None`` when there is nothing numeric to read.
"""

import math
import re
from typing import Any, Optional, Union

_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

Number = Union[int, float]


def _as_text(value: Any) -> Optional[str]:
    # Booleans are ints in Python but are not accepted as counts.
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return repr(value)
    if isinstance(value, (int, str)):
        return str(value)
    return None


def parse_int(value: Any) -> Optional[int]:
    """Return the leading integer of ``value`` or ``None``."""
    text = _as_text(value)
    if text is None:
        return None
    match = _INT_RE.match(text)
    if not match:
        return None
    return int(match.group(1))


def parse_float(value: Any) -> Optional[Number]:
    """Return the leading decimal number of ``value`` or ``None``.

    Integral results are returned as ``int`` so that ``150`` is stored
    as ``150`` and not ``150.0`` in the JSON document.
    """
    text = _as_text(value)
    if text is None:
        return None
    match = _FLOAT_RE.match(text)
    if not match:
        return None
    number = float(match.group(1))
    if not math.isfinite(number):
        return None
    return normalize_number(number)


def normalize_number(number: Number) -> Number:
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def int_or_default(value: Any, default: int) -> int:
    """Parse ``value`` as an integer, falling back to ``default`` on 0 or garbage."""
    return parse_int(value) or default


def float_or_default(value: Any, default: Number) -> Number:
    """Parse ``value`` as a number, falling back to ``default`` on 0 or garbage."""
    return parse_float(value) or default


def clamp_non_negative(number: Number) -> Number:
    return max(0, number)
