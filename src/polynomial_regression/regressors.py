"""Estimator interface for polynomial regression."""

import numpy as np
from typing import Optional

from .evaluate import evaluate
from .fitting import as_samples, fit
from .metrics import r2_score
from .solvers import DEFAULT_PIVOTING


class PolynomialRegression():
    """
    Ordinary Least Squares (OLS) polynomial regression in one variable.

    Fits y ≈ a0 + a1*x + ... + an*x^n by minimizing the squared residuals:
        minimize ||y - Va||²
    where V is the Vandermonde matrix of x. The solution is obtained from
    the normal equations:
        (V^T V) a = V^T y
    solved by Gaussian elimination with row pivoting.

    Attributes:
        order: Polynomial order
        pivoting: Row pivoting strategy used by the solver
        rtol: Relative pivot tolerance (None for the default)
        params: Fitted coefficients of shape (order + 1,), lowest degree first

    Example:
        >>> regressor = PolynomialRegression(order=2)
        >>> regressor.fit(x_train, y_train)
        >>> predictions = regressor.predict(x_test)
        >>> coefficients = regressor.get_params()
    """

    def __init__(
        self,
        order: int = 1,
        pivoting: str = DEFAULT_PIVOTING,
        rtol: Optional[float] = None,
    ):
        """
        Initialize the polynomial regression model.

        Args:
            order: Polynomial order. Default: 1.
            pivoting: "absolute" (default) or "signed".
            rtol: Relative pivot tolerance. Default: None (dtype dependent).
        """
        self.order = order
        self.pivoting = pivoting
        self.rtol = rtol
        self.params = None

    def fit(self, x: np.ndarray, y: np.ndarray) -> "PolynomialRegression":
        """
        Fit the polynomial using ordinary least squares.

        Args:
            x: Sample x-coordinates of shape (n_samples,)
            y: Sample y-values of shape (n_samples,)

        Returns:
            self: The fitted model
        """
        self.params = fit(x, y, self.order, pivoting=self.pivoting, rtol=self.rtol)
        return self

    def _check_fitted(self, method: str):
        if self.params is None:
            raise ValueError(
                f"Model must be fitted before calling {method}(). Call fit() first."
            )

    def predict(self, x):
        """
        Evaluate the fitted polynomial.

        Args:
            x: A scalar or an array of evaluation points

        Returns:
            predictions: Scalar or array matching `x`
        """
        self._check_fitted("predict")
        return evaluate(self.params, x)

    def score(self, x: np.ndarray, y: np.ndarray) -> float:
        """Return the coefficient of determination R² of the fit on (x, y)."""
        self._check_fitted("score")
        x, y = as_samples(x, y)
        return r2_score(y, self.predict(x))

    def get_params(self) -> np.ndarray:
        """
        Get the fitted parameters.

        Returns:
            params: Coefficient array of shape (order + 1,)
        """
        self._check_fitted("get_params")
        return self.params

    def __repr__(self):
        return (
            f"PolynomialRegression(order={self.order}, "
            f"pivoting='{self.pivoting}', rtol={self.rtol})"
        )
