"""Input normalisation in Q15 fixed point."""

from __future__ import annotations

from q15learn.fixed_point import _wrap_int32, fixed_point_divide


def normalize(value: int, min_value: int, max_value: int) -> int:
    """Return (value - min) / (max - min) in Q15; an empty range yields 0."""
    value_range = _wrap_int32(max_value - min_value)
    return fixed_point_divide(_wrap_int32(value - min_value), value_range)