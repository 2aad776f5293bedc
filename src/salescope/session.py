"""
AnalysisSession owns the currently loaded Table.

It replaces a process-wide "current dataset" variable: callers hold one
session, load into it, run analyses and exports against it and clear it. Every
analysis or export before a successful load raises NoDataLoadedError.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from salescope import correlation, exporter, profiler
from salescope.config import VIDEO_GAME_SALES, AnalysisConfig
from salescope.errors import NoDataLoadedError
from salescope.table import Table, load, load_csv

logger = logging.getLogger(__name__)


class AnalysisSession:
    def __init__(self, config: AnalysisConfig = VIDEO_GAME_SALES):
        self.config = config
        self._table: Optional[Table] = None

    @property
    def is_loaded(self) -> bool:
        return self._table is not None

    @property
    def table(self) -> Table:
        if self._table is None:
            raise NoDataLoadedError()
        return self._table

    def load(self, records: Iterable[Mapping[str, Any]]) -> Table:
        # a failed load raises before the previous table is replaced
        self._table = load(records)
        return self._table

    def load_csv(self, source: Any) -> Table:
        self._table = load_csv(source)
        return self._table

    def clear(self) -> None:
        if self._table is not None:
            logger.info("Cleared table with %d records", self._table.n_rows)
        self._table = None

    def overview(self, n_head: int = 5) -> Dict[str, Any]:
        return profiler.overview(self.table, n_head=n_head)

    def missing_values(self) -> Dict[str, int]:
        return profiler.count_missing(self.table)

    def numeric_summary(self) -> Dict[str, Dict[str, float]]:
        return profiler.summarize_numeric(self.table, self.config.numeric_analysis_columns)

    def top_categories(self, column: Optional[str] = None) -> Dict[str, Dict[str, int]]:
        columns = [column] if column is not None else self.config.categorical_analysis_columns
        return profiler.top_categories(self.table, columns, k=self.config.top_k)

    def correlations(self) -> Dict[str, Dict[str, float]]:
        return correlation.correlation_matrix(self.table, self.config.numeric_analysis_columns)

    def correlation_vector(self) -> Dict[str, float]:
        reference = self.config.correlation_reference
        if reference is None:
            return {}
        return correlation.correlations_with(self.table, self.config.numeric_analysis_columns, reference)

    def histogram_values(self) -> List[float]:
        if self.config.histogram_column is None:
            return []
        return profiler.positive_values(self.table, self.config.histogram_column)

    def profile(self) -> Dict[str, Any]:
        return profiler.profile_table(self.table, self.config)

    def export_csv(self) -> str:
        return exporter.export_csv(self.table)

    def export_summary(self, generated_at: Optional[datetime] = None) -> str:
        return exporter.export_summary(self.table, generated_at=generated_at)
