"""
Pearson correlation between numeric columns.

Uses population moments throughout, matching the profiler's std. A pair
with a constant side (std 0) or fewer than two paired observations gets a
correlation of 0.0 rather than NaN.
"""
from typing import Dict, Iterable, Sequence

import numpy as np
import pandas as pd

from salescope.table import Table, coerce_numeric

CORRELATION_DECIMALS = 4


def pearson(x: Sequence[float], y: Sequence[float]) -> float:
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.shape != y.shape:
        raise ValueError(f"x and y must have the same length, got {x.size} and {y.size}")
    finite = np.isfinite(x) & np.isfinite(y)
    x, y = x[finite], y[finite]
    if x.size < 2 or np.all(x == x[0]) or np.all(y == y[0]):
        return 0.0
    # r is scale-invariant; dividing by the largest magnitude keeps the products finite
    x = x / np.abs(x).max()
    y = y / np.abs(y).max()
    dx = x - x.mean()
    dy = y - y.mean()
    std_x = np.sqrt(np.mean(dx * dx))
    std_y = np.sqrt(np.mean(dy * dy))
    cov = np.mean(dx * dy)
    return float(np.clip(cov / (std_x * std_y), -1.0, 1.0))


def _numeric_frame(table: Table, columns: Iterable[str]) -> pd.DataFrame:
    present = [c for c in dict.fromkeys(columns) if c in table]
    return pd.DataFrame({c: coerce_numeric(table.column(c)) for c in present})


def correlation_matrix(table: Table, numeric_columns: Iterable[str]) -> Dict[str, Dict[str, float]]:
    """
    Symmetric matrix ``{col: {other: r}}`` over the declared columns present
    in the table. Each pair uses only the rows where both values are numeric.
    """
    frame = _numeric_frame(table, numeric_columns)
    cols = list(frame.columns)
    matrix = {c: {} for c in cols}
    for i, a in enumerate(cols):
        for b in cols[i:]:
            if a == b:
                values = frame[a].dropna()
                r = pearson(values, values)
            else:
                both = frame[a].notna() & frame[b].notna()
                r = pearson(frame.loc[both, a], frame.loc[both, b])
            r = round(r, CORRELATION_DECIMALS)
            matrix[a][b] = r
            matrix[b][a] = r
    return matrix


def correlations_with(table: Table, numeric_columns: Iterable[str], reference: str) -> Dict[str, float]:
    """One row of the matrix: each declared column against ``reference``."""
    numeric_columns = list(numeric_columns)
    matrix = correlation_matrix(table, numeric_columns + [reference])
    row = matrix.get(reference, {})
    return {c: row[c] for c in numeric_columns if c in row}
