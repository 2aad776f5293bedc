"""salescope: exploratory data analysis for video game sales tables."""
from salescope.config import VIDEO_GAME_SALES, AnalysisConfig, load_config
from salescope.errors import (
    ConfigError,
    EmptyDatasetError,
    NoDataLoadedError,
    ParseError,
    SalescopeError,
)
from salescope.session import AnalysisSession
from salescope.table import Table, load, load_csv, read_csv_records

__version__ = "0.3.0"

__all__ = [
    "AnalysisConfig",
    "AnalysisSession",
    "ConfigError",
    "EmptyDatasetError",
    "NoDataLoadedError",
    "ParseError",
    "SalescopeError",
    "Table",
    "VIDEO_GAME_SALES",
    "load",
    "load_config",
    "load_csv",
    "read_csv_records",
]
