import json
import logging
import numbers
from datetime import datetime, timezone
from pathlib import Path

import pytest

from salescope.config import VIDEO_GAME_SALES, AnalysisConfig
from salescope.exporter import export_csv, export_profile, export_summary
from salescope.profiler import count_missing, profile_table
from salescope.table import load, load_csv

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def test_csv_round_trip_keeps_records():
    table = load_csv(FIXTURES_DIR / "vgsales_sample.csv")
    reloaded = load_csv(export_csv(table).encode("utf-8"))
    assert reloaded.n_rows == table.n_rows
    assert reloaded.columns == table.columns
    for before, after in zip(table.records(), reloaded.records()):
        for col in table.columns:
            if isinstance(before[col], numbers.Number):
                assert after[col] == pytest.approx(before[col])
            else:
                assert after[col] == before[col]


def test_csv_has_header_and_no_index():
    table = load([{"Platform": "PS4", "Global_Sales": 1.5}, {"Platform": "Xbox", "Global_Sales": None}])
    lines = export_csv(table).splitlines()
    assert lines == ["Platform,Global_Sales", "PS4,1.5", "Xbox,"]


def test_summary_json():
    table = load([{"a": 1, "b": 2}, {"a": 3, "b": 4}, {"a": 5, "b": 6}])
    when = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    summary = json.loads(export_summary(table, generated_at=when))
    assert summary == {
        "overview": {"records": 3, "columns": 2},
        "generated": "2024-05-01T12:30:00+00:00",
    }


def test_summary_defaults_to_now():
    summary = json.loads(export_summary(load([{"a": 1}])))
    generated = datetime.fromisoformat(summary["generated"])
    assert generated.tzinfo is not None


def test_profile_json_is_loadable():
    table = load_csv(FIXTURES_DIR / "vgsales_sample.csv")
    report = json.loads(export_profile(profile_table(table, VIDEO_GAME_SALES)))
    assert report["n_rows"] == 12
    assert report["missing"]["Year"] == 0
    assert report["missing"]["Publisher"] == 1
    assert report["categorical"]["Platform"]["Wii"] == 4


def test_csv_round_trip_keeps_null_like_text():
    rows = [
        {"Publisher": "NA", "Name": "None", "Genre": "null"},
        {"Publisher": "N/A", "Name": "Tetris", "Genre": ""},
    ]
    table = load(rows)
    reloaded = load_csv(export_csv(table).encode("utf-8"))
    assert reloaded.records() == [
        {"Publisher": "NA", "Name": "None", "Genre": "null"},
        {"Publisher": "N/A", "Name": "Tetris", "Genre": None},
    ]
    assert count_missing(reloaded) == {"Publisher": 0, "Name": 0, "Genre": 1}


def test_profile_json_is_strict_with_non_finite_input():
    table = load([{"x": "inf", "y": 1}, {"x": 1, "y": 2}, {"x": 2, "y": 4}, {"x": "-inf", "y": 3}])
    config = AnalysisConfig(numeric_columns=("x", "y"))
    text = export_profile(profile_table(table, config))

    def reject(constant):
        raise ValueError(f"non-standard JSON constant {constant}")

    report = json.loads(text, parse_constant=reject)
    assert report["numeric"]["x"]["count"] == 2
    assert report["correlation"]["x"]["y"] == 1.0


def test_exports_are_logged(caplog):
    table = load([{"a": 1}])
    with caplog.at_level(logging.INFO, logger="salescope"):
        export_csv(table)
        export_summary(table)
        export_profile({"n_rows": 1})
    messages = [r.getMessage() for r in caplog.records]
    assert "Exported 1 records to CSV" in messages
    assert "Exported summary for 1 records, 1 columns" in messages
    assert "Exported profile report with 1 sections" in messages
