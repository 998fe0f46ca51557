"""
Command-line interface for the release schedule tool.
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

import pandas as pd

from .models import DEFAULT_PROJECT_NAME
from .reporting import export_intervals_csv, export_worksheets, print_summary, save_intervals_json
from .schedule import derive_intervals


def _load_schedule(path: Path) -> Dict[str, Any]:
    """Read a schedule file keyed by version label, keeping its order."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Schedule {path} must be a JSON object keyed by version")
    return data


def _parse_date_arg(value: str, flag: str) -> datetime:
    try:
        return datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        print(f"Error: Invalid {flag} format. Use YYYY-MM-DD", file=sys.stderr)
        sys.exit(1)


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Derive release schedule chart intervals from version lifecycle data"
    )

    parser.add_argument(
        "--data",
        required=True,
        help="Path to the JSON schedule, keyed by version label"
    )

    parser.add_argument(
        "--start-date",
        default=None,
        help="Start of the chart window (YYYY-MM-DD). Default: today"
    )

    parser.add_argument(
        "--end-date",
        default=None,
        help="End of the chart window (YYYY-MM-DD). Default: one year after start"
    )

    parser.add_argument(
        "--exclude-master",
        action="store_true",
        help="Leave out the Master (unstable) bar"
    )

    parser.add_argument(
        "--project-name",
        default=DEFAULT_PROJECT_NAME,
        help=f"Project name used in row labels. Default: {DEFAULT_PROJECT_NAME}"
    )

    parser.add_argument(
        "--csv",
        action="store_true",
        help="Also export the intervals as CSV"
    )

    parser.add_argument(
        "--get-worksheets",
        action="store_true",
        help="Export the intervals to an Excel file with one sheet per version"
    )

    parser.add_argument(
        "--output-dir",
        default="./output",
        help="Output directory for results. Default: ./output"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.start_date:
        start_date = _parse_date_arg(args.start_date, "start-date")
    else:
        start_date = datetime.today().replace(hour=0, minute=0, second=0, microsecond=0)

    if args.end_date:
        end_date = _parse_date_arg(args.end_date, "end-date")
    else:
        end_date = (pd.Timestamp(start_date) + pd.DateOffset(years=1)).to_pydatetime()

    try:
        schedule = _load_schedule(Path(args.data))
        intervals = derive_intervals(
            schedule,
            start_date,
            end_date,
            exclude_master=args.exclude_master,
            project_name=args.project_name,
        )
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print_summary(args.project_name, start_date, end_date, intervals)

    output_dir = Path(args.output_dir)
    results_file = save_intervals_json(intervals, output_dir, args.project_name)
    logging.info("Intervals saved to: %s", results_file)

    if args.csv:
        csv_file = export_intervals_csv(intervals, output_dir, args.project_name)
        logging.info("CSV saved to: %s", csv_file)

    if args.get_worksheets:
        excel_file = export_worksheets(intervals, output_dir, args.project_name)
        if excel_file is not None:
            logging.info("Worksheets saved to: %s", excel_file)


if __name__ == "__main__":
    main()
