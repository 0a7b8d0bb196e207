"""
Least-squares polynomial fitting via the normal equations.

Fits y ≈ a0 + a1*x + a2*x^2 + ... + an*x^n by minimizing the squared residuals
    minimize Σ (y_j - P(x_j))²

The minimizer solves the (n+1) x (n+1) normal equations
    Σ_k a_k Σ_j x_j^(i+k) = Σ_j x_j^i y_j,    i = 0..n
which are assembled from power sums and solved by Gaussian elimination.
"""

import numpy as np
from typing import Optional, Sequence, Tuple

from .exceptions import (
    DegreeError,
    EmptyInputError,
    InputMismatchError,
    NonFiniteInputError,
)
from .solvers import DEFAULT_PIVOTING, solve_augmented


def working_dtype(*arrays) -> np.dtype:
    """
    Floating point dtype shared by the given arrays.

    Floating input keeps its precision; integer and boolean input is
    computed in float64.
    """
    dtype = np.result_type(*arrays)
    if not np.issubdtype(dtype, np.floating):
        dtype = np.dtype(np.float64)
    return dtype


def _check_order(order) -> int:
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
        raise DegreeError(f"Order must be an integer, got {order!r}.")
    if order < 0:
        raise DegreeError(f"Order must be non-negative, got {order}.")
    return int(order)


def as_samples(x: Sequence[float], y: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert paired samples to 1-D floating point arrays of a common dtype.

    Integer input is promoted to float64; float32 input stays float32.

    Raises:
        InputMismatchError: If `x` and `y` differ in length
        EmptyInputError: If there are no samples
        NonFiniteInputError: If any sample is NaN or infinite
    """
    x = np.asarray(x).ravel()
    y = np.asarray(y).ravel()

    if len(x) != len(y):
        raise InputMismatchError(
            f"Dimensions of x ({len(x)}) and y ({len(y)}) do not match."
        )
    if len(x) == 0:
        raise EmptyInputError("x and y must contain at least one sample.")

    dtype = working_dtype(x, y)
    x = x.astype(dtype, copy=False)
    y = y.astype(dtype, copy=False)

    for name, values in (("x", x), ("y", y)):
        bad = ~np.isfinite(values)
        if bad.any():
            raise NonFiniteInputError(
                f"{name} contains {bad.sum()} non-finite value(s), "
                f"first at index {int(np.argmax(bad))}."
            )

    return x, y


def _vander(x: np.ndarray, n: int) -> np.ndarray:
    # np.vander allocates in at least float64; keep the sample precision
    return np.vander(x, n, increasing=True).astype(x.dtype, copy=False)


def power_sums(x: np.ndarray, order: int) -> np.ndarray:
    """
    Return X[i] = Σ_j x_j^i for i = 0..2*order.

    Args:
        x: Sample x-coordinates of shape (n_samples,)
        order: Polynomial order

    Returns:
        X: Power sums of shape (2 * order + 1,), in the dtype of `x`
            (float64 for integer input)
    """
    x = np.asarray(x)
    x = x.astype(working_dtype(x), copy=False)
    return _vander(x, 2 * order + 1).sum(axis=0)


def normal_matrix(x: np.ndarray, y: np.ndarray, order: int) -> np.ndarray:
    """
    Build the augmented normal-equations matrix.

    The coefficient block is the Gram matrix of the monomial basis,
    B[i, j] = X[i + j], and the last column holds Y[i] = Σ_j x_j^i y_j.

    Args:
        x: Sample x-coordinates of shape (n_samples,)
        y: Sample y-values of shape (n_samples,)
        order: Polynomial order

    Returns:
        B: Augmented matrix of shape (order + 1, order + 2)
    """
    x = np.asarray(x)
    y = np.asarray(y)
    dtype = working_dtype(x, y)
    x = x.astype(dtype, copy=False)
    y = y.astype(dtype, copy=False)
    n = order + 1

    X = power_sums(x, order)
    B = np.empty((n, n + 1), dtype=dtype)

    idx = np.arange(n)
    B[:, :n] = X[idx[:, None] + idx[None, :]]
    B[:, n] = _vander(x, n).T @ y

    return B


def fit(
    x: Sequence[float],
    y: Sequence[float],
    order: int,
    pivoting: str = DEFAULT_PIVOTING,
    rtol: Optional[float] = None,
) -> np.ndarray:
    """
    Fit a polynomial of the given order to sample points by least squares.

    Args:
        x: Sample x-coordinates
        y: Sample y-values, paired with `x` by index
        order: Highest power in the fitted polynomial (>= 0)
        pivoting: Row pivoting strategy, "absolute" (default) or "signed".
            See `polynomial_regression.solvers`.
        rtol: Relative tolerance below which a pivot counts as zero.
            Default: scaled machine epsilon of the working dtype.

    Returns:
        coefficients: Array of shape (order + 1,), lowest degree first

    Raises:
        InputMismatchError: If `x` and `y` differ in length
        EmptyInputError: If no samples are given
        NonFiniteInputError: If a sample is NaN or infinite
        DegreeError: If `order` is not a non-negative integer
        SingularSystemError: If the normal equations are singular, e.g. when
            there are fewer distinct x values than coefficients

    Example:
        >>> fit([0, 1, 2, 3], [1, 3, 5, 7], 1)
        array([1., 2.])
    """
    x, y = as_samples(x, y)
    order = _check_order(order)

    B = normal_matrix(x, y, order)
    return solve_augmented(B, pivoting=pivoting, rtol=rtol)
