"""Logistic regression in Q15 fixed point."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass

from q15learn.fixed_point import FRACTIONAL_BITS, ONE, _weighted_sum, fixed_point_divide

_SATURATION = 8 << FRACTIONAL_BITS
_HALF = 1 << (FRACTIONAL_BITS - 1)


def fixed_point_sigmoid(x: int) -> int:
    """Approximate the logistic function in Q15 as 0.5 + 0.25 * x / (1 + |x|)."""
    if x > _SATURATION:
        return ONE
    if x < -_SATURATION:
        return 0
    denominator = ONE + abs(x)
    fraction = fixed_point_divide(x, denominator)
    return _HALF + (fraction >> 2)


@dataclass
class LogisticRegressionModel:
    """Logistic model whose weights and bias are Q15 integers."""

    weights: MutableSequence[int]
    bias: int

    @property
    def num_features(self) -> int:
        return len(self.weights)

    def predict(self, features: Sequence[int]) -> int:
        """Return the Q15 sigmoid of the weighted sum of the features."""
        return fixed_point_sigmoid(_weighted_sum(self.bias, self.weights, features))