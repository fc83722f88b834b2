# q15learn

Small machine-learning models that work entirely in Q15 fixed-point
arithmetic. A Q15 number is an integer with 15 fractional bits, so
`32768` stands for `1.0` and `16384` stands for `0.5`. Values behave
like 32-bit signed integers: sums and products wrap around on overflow.
Floating point is used only to convert to Q15 and back.

It provides:

- Q15 conversion, multiplication and division (`q15learn.fixed_point`)
- A linear regression model with a gradient-descent update step
  (`q15learn.linear_regression`)
- A logistic regression model with a fixed-point sigmoid approximation
  (`q15learn.logistic_regression`)
- A linear SVM classifier (`q15learn.svm`)
- Min–max normalisation into Q15 (`q15learn.preprocess`)
- Training and simple classification helpers that share one linear model
  (`q15learn.ml_library`)

The package has no dependencies outside the standard library. The
optional `test` extra installs pytest and hypothesis for its test suite.

## Fixed-point basics

```python
from q15learn.fixed_point import (
    float_to_fixed_point,
    fixed_point_to_float,
    fixed_point_multiply,
    fixed_point_divide,
)

half = float_to_fixed_point(0.5)        # 16384
quarter = float_to_fixed_point(0.25)    # 8192

fixed_point_to_float(fixed_point_multiply(half, quarter))  # 0.125
fixed_point_to_float(fixed_point_divide(half, quarter))    # 2.0
```

`float_to_fixed_point` rounds the value to single precision and then
truncates toward zero. It raises `ValueError` for NaN and
`OverflowError` when the result does not fit in 32 bits.
`fixed_point_to_float` returns a single-precision value.
Division by zero gives `0` rather than raising.

## Linear regression

```python
from q15learn.fixed_point import float_to_fixed_point as q, fixed_point_to_float
from q15learn.linear_regression import LinearRegressionModel

model = LinearRegressionModel(weights=[q(0.5), q(-0.25)], bias=q(0.1))
prediction = model.predict([q(1.0), q(2.0)])
fixed_point_to_float(prediction)  # about 0.1

# One gradient-descent step towards a target value
model.update([q(1.0), q(2.0)], target=q(0.5), learning_rate=q(0.1))
```

`update` changes the `weights` list in place and replaces `bias`.
`num_features` is the number of weights. Every model's `predict` raises
`ValueError` when it is given fewer features than the model has weights;
extra features are ignored.

## Logistic regression

```python
from q15learn.fixed_point import float_to_fixed_point as q
from q15learn.logistic_regression import LogisticRegressionModel, fixed_point_sigmoid

model = LogisticRegressionModel(weights=[q(1.0)], bias=q(0.0))
model.predict([q(0.0)])      # 16384, i.e. 0.5

fixed_point_sigmoid(q(9.0))  # 32768, i.e. 1.0
```

The sigmoid is approximated as `0.5 + 0.25 * x / (1 + |x|)` on
`[-8, 8]` and clamped to `0` and `1` outside that range.

## Linear SVM

```python
from q15learn.fixed_point import float_to_fixed_point as q
from q15learn.svm import SVMModel

model = SVMModel(weights=[q(0.5), q(-0.5)], bias=q(0.0))
model.predict([q(1.0), q(0.5)])  # 32768: the positive class, as Q15 1.0
```

A decision value that is exactly zero also gives `32768`. Negative
decision values give `0`.

## Normalisation

```python
from q15learn.preprocess import normalize
from q15learn.fixed_point import fixed_point_to_float

fixed_point_to_float(normalize(5, 0, 10))  # 0.5
```

`normalize` returns `(value - min_value) / (max_value - min_value)` in
Q15. When `min_value` equals `max_value` it returns `0`.

## Shared-model helpers

`q15learn.ml_library` works on any `LinearRegressionModel`:

```python
from q15learn.fixed_point import float_to_fixed_point as q
from q15learn.linear_regression import LinearRegressionModel
from q15learn.ml_library import (
    linear_regression_train,
    logistic_regression_predict,
    svm_predict,
)

model = LinearRegressionModel(weights=[q(0.5)], bias=q(0.1))
linear_regression_train(model, [q(0.2)], target=q(0.4), learning_rate=q(0.01))

logistic_regression_predict(model, [q(0.2)])  # 1 or 0
svm_predict(model, [q(0.2)])                  # 1 or -1
```

Unlike the model classes above, these helpers return plain class labels,
not Q15 values: `logistic_regression_predict` gives `1` for a
non-negative linear output and `0` otherwise, `svm_predict` gives `1`
or `-1`.

## What it does not do

q15learn is a library of pure functions and models. It does not read
sensors, drive actuators or run a training loop of its own, and it has
no command-line tool. Feeding data in and acting on predictions is left
to the calling code.