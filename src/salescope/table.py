"""
Record table for salescope.

A Table is the loaded dataset: an ordered, read-only sequence of records whose
column set is fixed by the first record's keys. It is backed by an object-dtype
DataFrame so every value comes back exactly as the parser produced it.
"""
import io
import logging
from typing import Any, Dict, Iterable, List, Mapping, Tuple

import numpy as np
import pandas as pd

from salescope.errors import EmptyDatasetError, ParseError

logger = logging.getLogger(__name__)


def is_missing(value: Any) -> bool:
    """True for None, NaN-like markers and the empty string. 0 and False are values."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # list-like cells: pd.isna returns an array
        return False


def coerce_numeric(series: pd.Series) -> pd.Series:
    """
    Numeric view of a column as float64: booleans become 1/0, anything that
    fails coercion (missing cells, free text, "inf") becomes NaN.
    """
    values = series.map(lambda v: int(v) if isinstance(v, (bool, np.bool_)) else v)
    out = pd.to_numeric(values, errors="coerce").astype(float)
    return out.where(np.isfinite(out))


class Table:
    def __init__(self, frame: pd.DataFrame):
        self._frame = frame

    @property
    def columns(self) -> List[str]:
        return list(self._frame.columns)

    @property
    def n_rows(self) -> int:
        return int(len(self._frame))

    @property
    def n_columns(self) -> int:
        return int(self._frame.shape[1])

    @property
    def shape(self) -> Tuple[int, int]:
        return self.n_rows, self.n_columns

    def __len__(self) -> int:
        return self.n_rows

    def __contains__(self, column: str) -> bool:
        return column in self._frame.columns

    def column(self, name: str) -> pd.Series:
        """Copy of one column; an empty series when the table has no such column."""
        if name not in self._frame.columns:
            return pd.Series([], dtype=object, name=name)
        return self._frame[name].copy()

    def records(self) -> List[Dict[str, Any]]:
        cols = self.columns
        return [dict(zip(cols, row)) for row in self._frame.itertuples(index=False, name=None)]

    def head(self, n: int = 5) -> List[Dict[str, Any]]:
        cols = self.columns
        return [dict(zip(cols, row)) for row in self._frame.head(n).itertuples(index=False, name=None)]

    def to_frame(self) -> pd.DataFrame:
        return self._frame.copy()

    def __repr__(self) -> str:
        return f"Table(n_rows={self.n_rows}, columns={self.columns!r})"


def load(raw_records: Iterable[Mapping[str, Any]]) -> Table:
    """
    Build a Table from parsed rows.

    The header is the first record's key order. Keys a later record lacks
    become None; keys it has beyond the header are ignored.
    """
    records = list(raw_records)
    if not records:
        raise EmptyDatasetError("Dataset contains no records")
    columns = list(records[0].keys())
    rows = [[rec.get(c) for c in columns] for rec in records]
    frame = pd.DataFrame(rows, columns=columns, dtype=object)
    logger.info("Loaded %d records with %d columns", len(rows), len(columns))
    return Table(frame)


def _type_mixed_column(series: pd.Series) -> pd.Series:
    """Per-cell typing for a text column: finite numeric cells become floats, the rest stay text."""
    numeric = pd.to_numeric(series, errors="coerce")
    finite = np.isfinite(numeric.astype(float))
    return series.astype(object).where(~finite, numeric.astype(object))


def read_csv_records(source: Any) -> List[Dict[str, Any]]:
    """
    Parse CSV text into typed records with pandas.

    ``source`` is a path, a file-like object or raw bytes (as handed over by an
    upload widget). Numeric text becomes int/float and only empty cells become
    None; tokens such as "N/A" or "null" are kept as text.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    try:
        df = pd.read_csv(source, keep_default_na=False, na_values=[""])
    except pd.errors.EmptyDataError as e:
        logger.warning("CSV has no header or records: %s", e)
        raise EmptyDatasetError(f"CSV has no header or records: {e}") from e
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        logger.warning("Error parsing CSV: %s", e)
        raise ParseError(f"Error parsing CSV: {e}") from e
    for col in df.columns:
        if df[col].dtype == object:
            df[col] = _type_mixed_column(df[col])
    records = df.astype(object).to_dict(orient="records")
    return [{k: (None if is_missing(v) else v) for k, v in rec.items()} for rec in records]


def load_csv(source: Any) -> Table:
    return load(read_csv_records(source))
