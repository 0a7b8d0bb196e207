"""Exception hierarchy for polynomial regression."""

from typing import Optional


class PolynomialRegressionError(ValueError):
    """Base class for errors raised while fitting a polynomial."""

    pass


class InputMismatchError(PolynomialRegressionError):
    """
    Sample arrays have different lengths.

    Raised when `x` and `y` do not pair up index by index.
    """

    pass


class EmptyInputError(PolynomialRegressionError):
    """Raised when the sample arrays contain no observations."""

    pass


class NonFiniteInputError(PolynomialRegressionError):
    """Raised when a sample value is NaN or infinite."""

    pass


class DegreeError(PolynomialRegressionError):
    """Raised when the polynomial order is not a non-negative integer."""

    pass


class SingularSystemError(PolynomialRegressionError):
    """
    The normal equations cannot be solved.

    Raised when elimination meets a zero, near-zero or non-finite pivot,
    e.g. when the order is too high for the number of distinct `x` values.

    Attributes:
        pivot_index: Row of the offending pivot
        pivot_value: Value found on the diagonal
    """

    def __init__(self, message: str, pivot_index: Optional[int] = None,
                 pivot_value: Optional[float] = None):
        super().__init__(message)
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
