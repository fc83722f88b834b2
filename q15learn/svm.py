"""Linear support vector machine in Q15 fixed point."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass

from q15learn.fixed_point import ONE, _weighted_sum


@dataclass
class SVMModel:
    """Linear SVM whose weights and bias are Q15 integers."""

    weights: MutableSequence[int]
    bias: int

    @property
    def num_features(self) -> int:
        return len(self.weights)

    def predict(self, features: Sequence[int]) -> int:
        """Return 1.0 in Q15 for a non-negative decision value, else 0."""
        return ONE if _weighted_sum(self.bias, self.weights, features) >= 0 else 0