"""
Gaussian elimination for small dense linear systems.

The systems solved here are the normal equations of a polynomial
least-squares fit, stored in augmented form: an array `B` of shape
(n, n + 1) whose last column is the right-hand side.

Two pivoting strategies are supported:
- "absolute": partial pivoting on the largest magnitude in each column,
  chosen just before that column is eliminated.
- "signed": a single pass before elimination which swaps in any later row
  holding a strictly larger (signed) value in the pivot column.
"""

import numpy as np
from typing import Optional

from .exceptions import SingularSystemError


DEFAULT_PIVOTING = "absolute"
PIVOTING_STRATEGIES = ("absolute", "signed")

# Default pivot tolerance is RTOL_FACTOR * n * machine epsilon
RTOL_FACTOR = 100


def default_rtol(n: int, dtype) -> float:
    """Relative pivot tolerance for an n-by-n system of the given dtype."""
    return RTOL_FACTOR * n * float(np.finfo(dtype).eps)


def pivot_rows(B: np.ndarray) -> np.ndarray:
    """
    Reorder the rows of an augmented matrix in place using signed comparisons.

    For each row i, every later row k whose entry in column i is strictly
    greater than B[i, i] is swapped into position i. Ties keep the earlier row.

    Args:
        B: Augmented matrix of shape (n, n + 1)

    Returns:
        B: The same array, reordered
    """
    n = B.shape[0]
    for i in range(n):
        for k in range(i + 1, n):
            if B[i, i] < B[k, i]:
                B[[i, k]] = B[[k, i]]
    return B


def back_substitute(B: np.ndarray) -> np.ndarray:
    """
    Solve an upper-triangular augmented system.

    Args:
        B: Augmented matrix of shape (n, n + 1), zero below the diagonal

    Returns:
        a: Solution vector of shape (n,)
    """
    n = B.shape[0]
    a = np.zeros(n, dtype=B.dtype)
    for i in range(n - 1, -1, -1):
        # a[j] is still zero for j < i
        a[i] = (B[i, n] - B[i, i + 1:n] @ a[i + 1:]) / B[i, i]
    return a


def _check_pivot(B: np.ndarray, i: int, atol: float):
    pivot = B[i, i]
    if not np.isfinite(pivot) or abs(pivot) <= atol:
        raise SingularSystemError(
            f"Singular system: pivot {i} is {pivot!r} (tolerance {atol:.3g}). "
            "The order may be too high for the number of distinct x values.",
            pivot_index=i,
            pivot_value=float(pivot),
        )


def solve_augmented(
    B: np.ndarray,
    pivoting: str = DEFAULT_PIVOTING,
    rtol: Optional[float] = None,
) -> np.ndarray:
    """
    Solve the linear system held in an augmented matrix.

    The input is copied; the caller's array is left untouched.

    Args:
        B: Augmented matrix of shape (n, n + 1)
        pivoting: "absolute" (default) or "signed"
        rtol: Pivot tolerance relative to the largest coefficient magnitude.
            Default: `RTOL_FACTOR * n * eps` for the working dtype.

    Returns:
        a: Solution vector of shape (n,)

    Raises:
        SingularSystemError: If a pivot is zero, near zero or not finite
    """
    if pivoting not in PIVOTING_STRATEGIES:
        raise ValueError(
            f"Unknown pivoting strategy '{pivoting}'. "
            f"Choose from {list(PIVOTING_STRATEGIES)}."
        )

    B = np.array(B, copy=True)
    if not np.issubdtype(B.dtype, np.floating):
        B = B.astype(np.float64)

    if B.ndim != 2 or B.shape[1] != B.shape[0] + 1:
        raise ValueError(
            f"Expected an augmented matrix of shape (n, n + 1), got {B.shape}."
        )

    n = B.shape[0]
    if n == 0:
        return np.zeros(0, dtype=B.dtype)

    if not np.all(np.isfinite(B)):
        raise SingularSystemError(
            "Singular system: normal equations contain non-finite entries."
        )

    if rtol is None:
        rtol = default_rtol(n, B.dtype)
    scale = float(np.max(np.abs(B[:, :n])))
    if scale == 0.0:
        scale = 1.0
    atol = rtol * scale

    if pivoting == "signed":
        pivot_rows(B)

    for i in range(n):
        if pivoting == "absolute":
            p = i + int(np.argmax(np.abs(B[i:, i])))
            if p != i:
                B[[i, p]] = B[[p, i]]

        _check_pivot(B, i, atol)

        # Zero column i below the diagonal
        if i < n - 1:
            t = B[i + 1:, i] / B[i, i]
            B[i + 1:] -= np.outer(t, B[i])

    return back_substitute(B)
