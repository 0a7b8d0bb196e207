"""Least-squares polynomial regression in one variable."""

__version__ = "0.1.0"

from .exceptions import (
    PolynomialRegressionError,
    InputMismatchError,
    EmptyInputError,
    NonFiniteInputError,
    DegreeError,
    SingularSystemError,
)

from .fitting import fit, power_sums, normal_matrix

from .solvers import solve_augmented

from .evaluate import evaluate, poly_fit

from .regressors import PolynomialRegression

from .metrics import (
    residuals,
    rmse,
    mae,
    r2_score,
)

__all__ = [
    # Errors
    "PolynomialRegressionError",
    "InputMismatchError",
    "EmptyInputError",
    "NonFiniteInputError",
    "DegreeError",
    "SingularSystemError",

    # Fitting
    "fit",
    "power_sums",
    "normal_matrix",
    "solve_augmented",

    # Evaluation
    "evaluate",
    "poly_fit",

    # Estimator
    "PolynomialRegression",

    # Metrics
    "residuals",
    "rmse",
    "mae",
    "r2_score",
]
