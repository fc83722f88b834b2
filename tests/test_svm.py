import pytest
from hypothesis import given
from hypothesis import strategies as st

from q15learn.fixed_point import float_to_fixed_point
from q15learn.svm import SVMModel


def _example_model():
    weights = [float_to_fixed_point(0.5), float_to_fixed_point(-0.5)]
    return SVMModel(weights, float_to_fixed_point(0.0))


def test_svm_predict_zero_decision_is_positive_class():
    features = [float_to_fixed_point(1.0), float_to_fixed_point(1.0)]
    assert _example_model().predict(features) == 1 << 15


def test_svm_predict_negative_decision():
    features = [float_to_fixed_point(0.0), float_to_fixed_point(1.0)]
    assert _example_model().predict(features) == 0


def test_svm_predict_positive_decision():
    features = [float_to_fixed_point(1.0), float_to_fixed_point(0.0)]
    assert _example_model().predict(features) == 1 << 15


def test_svm_rejects_too_few_features():
    with pytest.raises(ValueError):
        _example_model().predict([0])


@given(st.lists(st.integers(min_value=-65536, max_value=65536), min_size=2, max_size=2))
def test_svm_output_is_binary(features):
    assert _example_model().predict(features) in (0, 1 << 15)