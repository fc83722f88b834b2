"""Linear regression in Q15 fixed point."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass

from q15learn.fixed_point import _weighted_sum, _wrap_int32, fixed_point_multiply


@dataclass
class LinearRegressionModel:
    """Linear model whose weights and bias are Q15 integers.

    The weights sequence is used in place, so training updates it.
    """

    weights: MutableSequence[int]
    bias: int

    @property
    def num_features(self) -> int:
        return len(self.weights)

    def predict(self, features: Sequence[int]) -> int:
        """Return bias plus the weighted sum of the features, in Q15."""
        return _weighted_sum(self.bias, self.weights, features)

    def update(self, features: Sequence[int], target: int, learning_rate: int) -> None:
        """Apply one gradient-descent step towards the target."""
        error = _wrap_int32(target - self.predict(features))
        for index, (weight, feature) in enumerate(zip(self.weights, features)):
            step = fixed_point_multiply(learning_rate, fixed_point_multiply(error, feature))
            self.weights[index] = _wrap_int32(weight + step)
        self.bias = _wrap_int32(self.bias + fixed_point_multiply(learning_rate, error))