"""Q15 fixed-point arithmetic and linear models: regression, logistic regression, SVM and normalisation."""

__version__ = "0.1.0"

__all__ = [
    "fixed_point",
    "linear_regression",
    "logistic_regression",
    "svm",
    "preprocess",
    "ml_library",
]