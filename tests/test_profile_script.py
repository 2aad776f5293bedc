"""
Runs scripts/profile_sales.py end to end on the fixture CSV.
"""
import json
import subprocess
import sys
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent / "fixtures"
ROOT = Path(__file__).parent.parent


def _run(*args):
    return subprocess.run(
        [sys.executable, "scripts/profile_sales.py", *args],
        capture_output=True,
        text=True,
        cwd=ROOT,
    )


def test_profile_script_text_report():
    result = _run(str(FIXTURES_DIR / "vgsales_sample.csv"))
    assert result.returncode == 0, (
        f"profile_sales.py failed with code {result.returncode}\n"
        f"stdout: {result.stdout}\n"
        f"stderr: {result.stderr}"
    )
    assert "Dataset Shape: 12 rows x 11 columns" in result.stdout
    assert "MISSING VALUES" in result.stdout
    assert "TOP CATEGORIES (first 10)" in result.stdout
    assert "CORRELATION" in result.stdout


def test_profile_script_json_output():
    result = _run(str(FIXTURES_DIR / "vgsales_sample.csv"), "--json", "--top-k", "2")
    assert result.returncode == 0, result.stderr
    report = json.loads(result.stdout)
    assert report["n_rows"] == 12
    assert report["categorical"]["Platform"] == {"Wii": 4, "GB": 2}


def test_profile_script_custom_config(tmp_path):
    config = tmp_path / "columns.json"
    config.write_text(json.dumps({"numeric_columns": ["EU_Sales"], "categorical_columns": ["Genre"]}))
    result = _run(str(FIXTURES_DIR / "vgsales_sample.csv"), "--json", "--config", str(config))
    assert result.returncode == 0, result.stderr
    report = json.loads(result.stdout)
    assert list(report["numeric"]) == ["EU_Sales"]
    assert list(report["categorical"]) == ["Genre"]


def test_profile_script_missing_file():
    result = _run("does_not_exist.csv")
    assert result.returncode == 1
    assert "Error reading CSV" in result.stderr
