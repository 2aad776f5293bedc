"""
Descriptive profiler for salescope tables.

Computes:
- shape and a per-column kind guess (numeric / categorical / empty)
- per-column missing counts
- numeric stats (count, mean, median, population std, min, max)
- top_k values for categorical columns
Every function is pure over a loaded Table and returns JSON-serializable dicts.
"""
import logging
import numbers
from typing import Any, Dict, Iterable, List

import numpy as np
import pandas as pd

from salescope.config import AnalysisConfig
from salescope.correlation import correlation_matrix
from salescope.table import Table, coerce_numeric, is_missing

logger = logging.getLogger(__name__)

DISPLAY_DECIMALS = 2


def _round(value: float) -> float:
    return round(float(value), DISPLAY_DECIMALS)


def _missing_mask(series: pd.Series) -> pd.Series:
    return series.map(is_missing).astype(bool)


def _is_truthy(value: Any) -> bool:
    if is_missing(value):
        return False
    if isinstance(value, str):
        return True
    try:
        return bool(value)
    except (TypeError, ValueError):
        return True


def column_kind(series: pd.Series) -> str:
    present = series[~_missing_mask(series)]
    if present.empty:
        return "empty"
    if all(isinstance(v, numbers.Real) and not isinstance(v, (bool, np.bool_)) for v in present):
        return "numeric"
    return "categorical"


def numeric_values(table: Table, column: str) -> np.ndarray:
    """Values of ``column`` that survive numeric coercion, in row order."""
    return coerce_numeric(table.column(column)).dropna().to_numpy(dtype=float)


def overview(table: Table, n_head: int = 5) -> Dict[str, Any]:
    return {
        "n_rows": table.n_rows,
        "n_columns": table.n_columns,
        "columns": {str(c): column_kind(table.column(c)) for c in table.columns},
        "head": table.head(n_head),
    }


def count_missing(table: Table) -> Dict[str, int]:
    """Missing cells (None, NaN or "") per column, for every column in the table."""
    return {str(c): int(_missing_mask(table.column(c)).sum()) for c in table.columns}


def summarize_numeric(table: Table, numeric_columns: Iterable[str]) -> Dict[str, Dict[str, float]]:
    """
    Summary stats per declared numeric column.

    std is the population standard deviation (divisor N). Columns where no
    value survives numeric coercion are left out of the result.
    """
    report = {}
    for col in numeric_columns:
        values = numeric_values(table, col)
        if values.size == 0:
            logger.debug("No numeric values in column %r, omitting it", col)
            continue
        # moments on values scaled into [-1, 1] so huge magnitudes do not overflow
        scale = float(np.abs(values).max()) or 1.0
        scaled = values / scale
        report[col] = {
            "count": int(values.size),
            "mean": _round(scaled.mean() * scale),
            "median": _round(np.median(values)),
            "std": _round(scaled.std(ddof=0) * scale),
            "min": _round(values.min()),
            "max": _round(values.max()),
        }
    return report


def top_categories(table: Table, categorical_columns: Iterable[str], k: int = 10) -> Dict[str, Dict[str, int]]:
    """
    The k most frequent values per declared categorical column.

    Falsy cells (missing, "", 0, False) are not counted. Equal counts keep
    the order in which the values first appear.
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    report = {}
    for col in categorical_columns:
        series = table.column(col)
        if series.empty:
            report[col] = {}
            continue
        series = series[series.map(_is_truthy).astype(bool)].astype(str)
        if series.empty:
            report[col] = {}
            continue
        counts = series.value_counts(sort=False).reindex(pd.unique(series))
        counts = counts.sort_values(ascending=False, kind="stable").head(k)
        report[col] = {str(key): int(v) for key, v in counts.items()}
    return report


def positive_values(table: Table, column: str) -> List[float]:
    values = numeric_values(table, column)
    return [float(v) for v in values[values > 0]]


def profile_table(table: Table, config: AnalysisConfig, n_head: int = 5) -> Dict[str, Any]:
    numeric_cols = config.numeric_analysis_columns
    report = overview(table, n_head=n_head)
    report.update({
        "missing": count_missing(table),
        "numeric": summarize_numeric(table, numeric_cols),
        "categorical": top_categories(table, config.categorical_analysis_columns, k=config.top_k),
        "correlation": correlation_matrix(table, numeric_cols),
    })
    return report
