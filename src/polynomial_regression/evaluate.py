"""Evaluation of fitted polynomials."""

import numpy as np
from typing import Sequence, Union

from .fitting import fit, working_dtype


def evaluate(
    coefficients: Sequence[float], x: Union[float, Sequence[float]]
) -> Union[np.floating, np.ndarray]:
    """
    Evaluate a polynomial at one or more points.

    Computes Σ_i coefficients[i] * x^i with a running power of x, so no
    exponentiation is performed. Array input is evaluated element by element
    with exactly the same operations as scalar input.

    Args:
        coefficients: Polynomial coefficients, lowest degree first
        x: A scalar or a sequence of evaluation points

    Returns:
        A scalar for scalar `x`, otherwise an array with the shape of `x`.
        An empty coefficient vector evaluates to zero.

    Example:
        >>> evaluate([1.0, 2.0, 3.0], 2.0)
        17.0
        >>> evaluate([1.0, 2.0, 3.0], [0.0, 1.0, 2.0])
        array([ 1.,  6., 17.])
    """
    coefficients = np.asarray(coefficients).ravel()
    x = np.asarray(x)
    dtype = working_dtype(coefficients, x)
    x = x.astype(dtype, copy=False)

    total = np.zeros(x.shape, dtype=dtype)
    power = np.ones(x.shape, dtype=dtype)
    for c in coefficients.astype(dtype, copy=False):
        total += c * power
        power *= x

    return total[()]


def poly_fit(
    x: Sequence[float],
    y: Sequence[float],
    x_eval: Union[float, Sequence[float]],
    order: int,
    **fit_kwargs,
) -> Union[np.floating, np.ndarray]:
    """
    Fit a polynomial to (x, y) and evaluate it at `x_eval`.

    Equivalent to `evaluate(fit(x, y, order, **fit_kwargs), x_eval)`; any error
    raised by `fit` propagates unchanged.

    Args:
        x: Sample x-coordinates
        y: Sample y-values
        x_eval: A scalar or a sequence of points to evaluate at
        order: Polynomial order
        **fit_kwargs: Passed through to `fit` (`pivoting`, `rtol`)

    Returns:
        Fitted values at `x_eval`, scalar or array to match `x_eval`
    """
    return evaluate(fit(x, y, order, **fit_kwargs), x_eval)
