#!/usr/bin/env python3
"""
Print an EDA report for a video game sales CSV.
Usage:
  python scripts/profile_sales.py <input.csv>
  python scripts/profile_sales.py <input.csv> --json
  python scripts/profile_sales.py <input.csv> --top-k 5 --config columns.json
"""
import sys
import logging
import argparse
from pathlib import Path

# Make the src/ layout importable without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from salescope import AnalysisSession, SalescopeError, VIDEO_GAME_SALES, load_config
from salescope.exporter import export_profile
from salescope.logging_ import setup_logger


def print_report(report, config):
    print("=" * 60)
    print("VIDEO GAME SALES PROFILE")
    print("=" * 60)
    print(f"\nDataset Shape: {report['n_rows']} rows x {report['n_columns']} columns")

    print("\n--- MISSING VALUES ---")
    for col, n in report["missing"].items():
        print(f"  {col:15s}: {n}")

    print("\n--- NUMERIC COLUMNS ---")
    if not report["numeric"]:
        print("  (no numeric values)")
    for col, s in report["numeric"].items():
        print(f"  {col:15s}: mean={s['mean']:.2f} median={s['median']:.2f} "
              f"std={s['std']:.2f} min={s['min']:.2f} max={s['max']:.2f}")

    print(f"\n--- TOP CATEGORIES (first {config.top_k}) ---")
    for col, counts in report["categorical"].items():
        print(f"  {col}:")
        for value, n in counts.items():
            print(f"    {value:20s} {n}")

    print("\n--- CORRELATION ---")
    reference = config.correlation_reference
    row = report["correlation"].get(reference, {}) if reference else {}
    for col, r in row.items():
        print(f"  {col:15s} vs {reference}: {r:+.4f}")
    print("=" * 60)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Profile a video game sales CSV")
    parser.add_argument("input_csv", help="Path to input CSV file")
    parser.add_argument("--json", action="store_true", help="Output results as JSON")
    parser.add_argument("--top-k", type=int, default=None, help="Number of top categories per column")
    parser.add_argument("--config", default=None, help="JSON file with column declarations")
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")
    args = parser.parse_args(argv)

    setup_logger("salescope", level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config) if args.config else VIDEO_GAME_SALES
        if args.top_k is not None:
            config = config.with_top_k(args.top_k)
        session = AnalysisSession(config)
        session.load_csv(args.input_csv)
    except (SalescopeError, OSError) as e:
        print(f"Error reading CSV: {e}", file=sys.stderr)
        return 1

    report = session.profile()
    if args.json:
        print(export_profile(report))
    else:
        print_report(report, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
