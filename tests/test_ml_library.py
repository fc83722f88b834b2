import pytest
from hypothesis import given
from hypothesis import strategies as st

from q15learn.fixed_point import float_to_fixed_point
from q15learn.linear_regression import LinearRegressionModel
from q15learn.ml_library import (
    linear_regression_train,
    logistic_regression_predict,
    svm_predict,
)

_Q15 = st.integers(min_value=-65536, max_value=65536)


def _model():
    return LinearRegressionModel([float_to_fixed_point(1.0)], float_to_fixed_point(0.0))


def test_logistic_threshold():
    model = _model()
    assert logistic_regression_predict(model, [float_to_fixed_point(0.5)]) == 1
    assert logistic_regression_predict(model, [float_to_fixed_point(-0.5)]) == 0
    assert logistic_regression_predict(model, [0]) == 1


def test_svm_threshold():
    model = _model()
    assert svm_predict(model, [float_to_fixed_point(0.5)]) == 1
    assert svm_predict(model, [float_to_fixed_point(-0.5)]) == -1


def test_predict_rejects_too_few_features():
    with pytest.raises(ValueError):
        svm_predict(LinearRegressionModel([1, 2], 0), [1])


def test_train_with_zero_rate_changes_nothing():
    model = _model()
    linear_regression_train(model, [float_to_fixed_point(1.0)], float_to_fixed_point(2.0), 0)
    assert model == _model()


def test_train_reduces_error():
    one = float_to_fixed_point(1.0)
    model = LinearRegressionModel([0], 0)
    before = abs(one - model.predict([one]))
    linear_regression_train(model, [one], one, float_to_fixed_point(0.25))
    assert abs(one - model.predict([one])) < before


@given(st.lists(_Q15, min_size=1, max_size=4), _Q15, st.data())
def test_train_matches_model_update(weights, bias, data):
    features = data.draw(st.lists(_Q15, min_size=len(weights), max_size=len(weights)))
    target = data.draw(_Q15)
    rate = data.draw(st.integers(min_value=0, max_value=32768))
    trained = LinearRegressionModel(list(weights), bias)
    updated = LinearRegressionModel(list(weights), bias)
    linear_regression_train(trained, features, target, rate)
    updated.update(features, target, rate)
    assert trained == updated


@given(st.lists(_Q15, min_size=1, max_size=4), _Q15, st.data())
def test_classifiers_agree_on_sign(weights, bias, data):
    features = data.draw(st.lists(_Q15, min_size=len(weights), max_size=len(weights)))
    model = LinearRegressionModel(weights, bias)
    positive = model.predict(features) >= 0
    assert logistic_regression_predict(model, features) == (1 if positive else 0)
    assert svm_predict(model, features) == (1 if positive else -1)