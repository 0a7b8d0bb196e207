"""Goodness-of-fit metrics for fitted polynomials."""

import numpy as np


def residuals(y_true: np.ndarray, y_pred: np.ndarray) -> np.ndarray:
    """
    Calculate residuals y_true - y_pred.

    Args:
        y_true: Observed values
        y_pred: Fitted values

    Returns:
        residuals: Array of the same shape as the inputs
    """
    return np.asarray(y_true) - np.asarray(y_pred)


def rmse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate the root mean square error (RMSE).

    Args:
        y_true: Observed values
        y_pred: Fitted values

    Returns:
        rmse: Root mean square error
    """
    return float(np.sqrt(np.mean(residuals(y_true, y_pred)**2)))


def mae(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Calculate mean absolute error (MAE).

    Args:
        y_true: Observed values
        y_pred: Fitted values

    Returns:
        mae: Mean absolute error
    """
    return float(np.mean(np.abs(residuals(y_true, y_pred))))


def r2_score(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Coefficient of determination R² of a set of fitted values.

    R² = 1 - Σ(y_true - y_pred)² / Σ(y_true - mean(y_true))²

    When y_true is constant the ratio is undefined; a perfect fit scores 1.0
    and anything else scores 0.0.

    Args:
        y_true: Observed values
        y_pred: Fitted values
    """
    y_true = np.asarray(y_true)
    sum_e = np.sum(residuals(y_true, y_pred)**2)
    sum_s = np.sum((y_true - np.mean(y_true))**2)
    if sum_s == 0:
        return 1.0 if sum_e == 0 else 0.0
    return float(1.0 - sum_e / sum_s)
