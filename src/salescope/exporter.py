"""
Serialization of loaded tables and computed reports.

Nothing here computes statistics: it only formats what is already loaded or
already profiled.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from salescope.table import Table

logger = logging.getLogger(__name__)

CSV_FILE_NAME = "video_game_sales_analysis.csv"
SUMMARY_FILE_NAME = "game_sales_summary.json"
PROFILE_FILE_NAME = "game_sales_profile.json"


def export_csv(table: Table) -> str:
    """The loaded records as CSV text: header row plus one line per record, no index."""
    text = table.to_frame().to_csv(index=False)
    logger.info("Exported %d records to CSV", table.n_rows)
    return text


def export_summary(table: Table, generated_at: Optional[datetime] = None) -> str:
    if generated_at is None:
        generated_at = datetime.now(timezone.utc)
    summary = {
        "overview": {"records": table.n_rows, "columns": table.n_columns},
        "generated": generated_at.isoformat(),
    }
    logger.info("Exported summary for %d records, %d columns", table.n_rows, table.n_columns)
    return json.dumps(summary, indent=2)


def export_profile(report: Dict[str, Any]) -> str:
    logger.info("Exported profile report with %d sections", len(report))
    return json.dumps(report, indent=2, default=str)
