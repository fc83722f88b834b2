[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "q15learn"
version = "0.1.0"
description = "Small machine-learning models in Q15 fixed-point arithmetic: linear and logistic regression, linear SVM and normalisation."
requires-python = ">=3.10"
dependencies = []
keywords = ["fixed-point", "q15", "machine-learning", "linear-regression", "logistic-regression", "svm", "embedded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["q15learn"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
