"""
Column declarations for an analysis run.

The engine never hard-codes a dataset: callers pass an AnalysisConfig naming
which columns are numeric, which are categorical and which one is a row id.
VIDEO_GAME_SALES is the layout of the public vgsales.csv dump.
"""
import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from salescope.errors import ConfigError


@dataclass(frozen=True)
class AnalysisConfig:
    numeric_columns: Tuple[str, ...] = ()
    categorical_columns: Tuple[str, ...] = ()
    id_column: Optional[str] = None
    top_k: int = 10
    histogram_column: Optional[str] = None
    correlation_reference: Optional[str] = None

    def __post_init__(self):
        # lists from JSON are accepted but stored as tuples to keep the config hashable
        object.__setattr__(self, "numeric_columns", tuple(self.numeric_columns))
        object.__setattr__(self, "categorical_columns", tuple(self.categorical_columns))
        if self.top_k < 1:
            raise ConfigError(f"top_k must be >= 1, got {self.top_k}")

    @property
    def numeric_analysis_columns(self) -> Tuple[str, ...]:
        return tuple(c for c in self.numeric_columns if c != self.id_column)

    @property
    def categorical_analysis_columns(self) -> Tuple[str, ...]:
        return tuple(c for c in self.categorical_columns if c != self.id_column)

    def with_top_k(self, top_k: int) -> "AnalysisConfig":
        data = self.to_dict()
        data["top_k"] = int(top_k)
        return AnalysisConfig.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["numeric_columns"] = list(self.numeric_columns)
        data["categorical_columns"] = list(self.categorical_columns)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {unknown}")
        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigError(f"Invalid config value: {e}") from e


VIDEO_GAME_SALES = AnalysisConfig(
    numeric_columns=("Year", "NA_Sales", "EU_Sales", "JP_Sales", "Other_Sales", "Global_Sales"),
    categorical_columns=("Platform", "Genre", "Publisher"),
    id_column="Rank",
    top_k=10,
    histogram_column="Global_Sales",
    correlation_reference="Global_Sales",
)


def load_config(path: Union[str, Path]) -> AnalysisConfig:
    """Read an AnalysisConfig from a JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigError(f"Could not read config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must hold a JSON object")
    return AnalysisConfig.from_dict(data)
