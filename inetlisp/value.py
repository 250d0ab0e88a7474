"""Runtime values: booleans, 61-bit integers, truncated floats and objects."""

from __future__ import annotations

import math
import struct
from typing import Any

_INT_BITS = 61
_INT_SPAN = 1 << _INT_BITS
_INT_HALF = 1 << (_INT_BITS - 1)
_FLOAT_DATA_MASK = 0xFFFF_FFFF_FFFF_FFF8


class InetError(Exception):
    """Raised when the interaction-net runtime meets an invalid state."""


def xint(target: int) -> int:
    """Return an integer value, wrapped to the 61 bits a value can carry."""
    return ((int(target) + _INT_HALF) % _INT_SPAN) - _INT_HALF


def xfloat(target: float) -> float:
    """Return a float value with the lowest three bits of its encoding cleared."""
    (bits,) = struct.unpack("<Q", struct.pack("<d", float(target)))
    (result,) = struct.unpack("<d", struct.pack("<Q", bits & _FLOAT_DATA_MASK))
    return result


def xbool(target: Any) -> bool:
    return bool(target)


def is_xint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_xfloat(value: Any) -> bool:
    return isinstance(value, float)


def is_xbool(value: Any) -> bool:
    return isinstance(value, bool)


def to_bool(value: Any) -> bool:
    if not is_xbool(value):
        raise InetError(f"expected a bool, got: {format_value(value)}")
    return value


def to_int64(value: Any) -> int:
    if not is_xint(value):
        raise InetError(f"expected an int, got: {format_value(value)}")
    return value


def to_double(value: Any) -> float:
    if not is_xfloat(value):
        raise InetError(f"expected a float, got: {format_value(value)}")
    return value


def xbool_and(x: Any, y: Any) -> bool:
    return xbool(to_bool(x) and to_bool(y))


def xbool_or(x: Any, y: Any) -> bool:
    return xbool(to_bool(x) or to_bool(y))


def xbool_not(x: Any) -> bool:
    return xbool(not to_bool(x))


def xint_p(value: Any) -> bool:
    return xbool(is_xint(value))


def xint_add(x: Any, y: Any) -> int:
    return xint(to_int64(x) + to_int64(y))


def xint_sub(x: Any, y: Any) -> int:
    return xint(to_int64(x) - to_int64(y))


def xint_mul(x: Any, y: Any) -> int:
    return xint(to_int64(x) * to_int64(y))


def _truncated_quotient(x: int, y: int) -> int:
    if y == 0:
        raise InetError("integer division by zero")
    quotient = abs(x) // abs(y)
    return -quotient if (x < 0) != (y < 0) else quotient


def xint_div(x: Any, y: Any) -> int:
    """Integer division rounding toward zero."""
    return xint(_truncated_quotient(to_int64(x), to_int64(y)))


def xint_mod(x: Any, y: Any) -> int:
    """Remainder whose sign follows the dividend."""
    a, b = to_int64(x), to_int64(y)
    return xint(a - b * _truncated_quotient(a, b))


def xint_to_xfloat(x: Any) -> float:
    if not is_xint(x):
        raise InetError("[xint_to_xfloat] type mismatch")
    return xfloat(float(x))


def xfloat_p(value: Any) -> bool:
    return xbool(is_xfloat(value))


def xfloat_add(x: Any, y: Any) -> float:
    return xfloat(to_double(x) + to_double(y))


def xfloat_sub(x: Any, y: Any) -> float:
    return xfloat(to_double(x) - to_double(y))


def xfloat_mul(x: Any, y: Any) -> float:
    return xfloat(to_double(x) * to_double(y))


def xfloat_div(x: Any, y: Any) -> float:
    a, b = to_double(x), to_double(y)
    try:
        return xfloat(a / b)
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return xfloat(math.nan)
        return xfloat(math.copysign(math.inf, a) * math.copysign(1.0, b))


def xfloat_mod(x: Any, y: Any) -> float:
    a, b = to_double(x), to_double(y)
    try:
        return xfloat(math.fmod(a, b))
    except ValueError:
        return xfloat(math.nan)


def xfloat_to_xint(x: Any) -> int:
    if not is_xfloat(x):
        raise InetError("[xfloat_to_xint] type mismatch")
    if math.isnan(x) or math.isinf(x):
        raise InetError(f"[xfloat_to_xint] can not convert: {format_value(x)}")
    return xint(math.trunc(x))


def format_value(value: Any) -> str:
    """Render a value the way the interpreter prints it."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if is_xint(value):
        return str(value)
    if is_xfloat(value):
        text = "%.17g" % value
        if "." not in text:
            text += ".0"
        return text
    if value is None:
        return "<unknown-value />"
    return str(value)