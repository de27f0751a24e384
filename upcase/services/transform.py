"""Text transform: value coercion and uppercase mapping.

``to_text`` turns any decoded JSON value into the same string a
JavaScript client gets from ``String(value)``: booleans are lower case,
numbers use the shortest round-trip digits with ``e+21``-style exponents,
arrays are comma-joined and objects become ``[object Object]``.
``uppercase`` applies the full Unicode case mapping, which is
locale-independent and may change the length of the text (``"ß"``
becomes ``"SS"``).
"""

from __future__ import annotations

import math
from typing import Any

# Integers beyond this lose precision as IEEE doubles
_MAX_SAFE_INT = 2 ** 53


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr gives the shortest digits that round-trip, as Number#toString does
    mantissa, _, exp = repr(abs(value)).partition("e")
    whole, _, frac = mantissa.partition(".")
    raw = whole + frac
    digits = raw.lstrip("0")
    point = len(whole) + int(exp or 0) - (len(raw) - len(digits))
    digits = digits.rstrip("0")
    k = len(digits)

    if k <= point <= 21:
        return sign + digits + "0" * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits
    e = point - 1
    exponent = f"e{'+' if e >= 0 else '-'}{abs(e)}"
    if k == 1:
        return sign + digits + exponent
    return sign + digits[0] + "." + digits[1:] + exponent


def to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        if abs(value) < _MAX_SAFE_INT:
            return str(value)
        try:
            return _format_number(float(value))
        except OverflowError:
            return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(v) for v in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def uppercase(text: str) -> str:
    return text.upper()
