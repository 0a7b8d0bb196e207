"""
Loading of sample points from CSV files.

Each row of the file is one observation; two named columns hold the
x-coordinate and the y-value.
"""

import numpy as np
import pandas as pd
from typing import Tuple


def load_samples(
    file_path: str,
    x_column: str = "x",
    y_column: str = "y",
    dropna: bool = True,
    verbose: bool = False,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Load paired sample points from a CSV file.

    Args:
        file_path: Path to CSV file.
        x_column: Name of the column holding x-coordinates. Default: 'x'.
        y_column: Name of the column holding y-values. Default: 'y'.
        dropna: Drop rows where either value is missing. Default: True.
        verbose: Print progress messages. Default: False.

    Returns:
        x: float64 array of shape (n_samples,)
        y: float64 array of shape (n_samples,)
    """
    if verbose:
        print(f"Loading samples from {file_path}...")

    df = pd.read_csv(file_path)

    missing = [col for col in (x_column, y_column) if col not in df.columns]
    if missing:
        raise ValueError(
            f"Column(s) {missing} not found in {file_path}. "
            f"Available columns: {', '.join(df.columns.tolist())}"
        )

    df = df[[x_column, y_column]]

    if verbose:
        print(f"  Loaded {len(df)} rows")

    if dropna:
        n_before = len(df)
        df = df.dropna()
        n_after = len(df)
        if verbose and n_before != n_after:
            print(f"  Removed {n_before - n_after} rows with missing values")

    x = df[x_column].to_numpy(dtype=float)
    y = df[y_column].to_numpy(dtype=float)
    return x, y
