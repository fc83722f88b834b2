"""Q15 fixed-point arithmetic on 32-bit signed integers."""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence

FRACTIONAL_BITS = 15
ONE = 1 << FRACTIONAL_BITS

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1


def _wrap_int32(value: int) -> int:
    """Reduce an integer to the 32-bit two's complement range."""
    return ((value - _INT32_MIN) & 0xFFFFFFFF) + _INT32_MIN


def _to_float32(value: float) -> float:
    """Round a number to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def float_to_fixed_point(value: float) -> int:
    """Convert a number to Q15, truncating toward zero."""
    scaled = _to_float32(value) * ONE
    if math.isnan(scaled):
        raise ValueError("cannot convert NaN to fixed point")
    truncated = math.trunc(scaled)
    if not _INT32_MIN <= truncated <= _INT32_MAX:
        raise OverflowError(f"{value!r} does not fit in Q15 on 32 bits")
    return truncated


def fixed_point_to_float(value: int) -> float:
    """Convert a Q15 number to a single-precision value."""
    return _to_float32(_to_float32(_wrap_int32(value)) / ONE)


def fixed_point_multiply(a: int, b: int) -> int:
    """Multiply two Q15 numbers with 32-bit wrap-around."""
    return _wrap_int32(a * b) >> FRACTIONAL_BITS


def fixed_point_divide(a: int, b: int) -> int:
    """Divide two Q15 numbers; division by zero yields 0."""
    if b == 0:
        return 0
    return _wrap_int32(_truncating_div(_wrap_int32(a << FRACTIONAL_BITS), b))


def _weighted_sum(bias: int, weights: Sequence[int], features: Sequence[int]) -> int:
    """Bias plus the Q15 dot product of weights and features."""
    if len(features) < len(weights):
        raise ValueError(
            f"expected at least {len(weights)} features, got {len(features)}"
        )
    total = bias
    for weight, feature in zip(weights, features):
        total = _wrap_int32(total + fixed_point_multiply(weight, feature))
    return total