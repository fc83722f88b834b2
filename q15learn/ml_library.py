"""Training and classification helpers built on the linear model."""

from __future__ import annotations

from collections.abc import Sequence

from q15learn.linear_regression import LinearRegressionModel


def _linear_output(model: LinearRegressionModel, features: Sequence[int]) -> int:
    """Return the model's raw Q15 linear output for the given features."""
    values = [int(feature) for feature in features]
    return model.predict(values)


def _classify(linear_output: int, positive: int, negative: int) -> int:
    """Map a linear output to a class label by its sign (zero counts as positive)."""
    if linear_output >= 0:
        return positive
    return negative


def linear_regression_train(
    model: LinearRegressionModel,
    features: Sequence[int],
    target: int,
    learning_rate: int,
) -> None:
    """Apply one gradient-descent step to the model."""
    model.update(features, target, learning_rate)


def logistic_regression_predict(model: LinearRegressionModel, features: Sequence[int]) -> int:
    """Return 1 when the linear output is non-negative, else 0."""
    linear_output = _linear_output(model, features)
    return _classify(linear_output, positive=1, negative=0)


def svm_predict(model: LinearRegressionModel, features: Sequence[int]) -> int:
    """Return 1 when the linear output is non-negative, else -1."""
    linear_output = _linear_output(model, features)
    return _classify(linear_output, positive=1, negative=-1)