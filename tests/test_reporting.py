import json
from pathlib import Path

import pandas as pd
from openpyxl import load_workbook

from release_schedule.reporting import (
    export_intervals_csv,
    export_worksheets,
    intervals_to_frame,
    save_intervals_json,
)
from release_schedule.schedule import derive_intervals


RECORDS = {
    "v18": {"start": "2022-04-19", "lts": "2022-10-25", "end": "2025-04-30"},
    "v20": {
        "start": "2023-04-18",
        "end": "2026-04-30",
        "releases": {"security": {"start": "2023-06-01", "type": "maintenance"}},
    },
}


def _intervals():
    return derive_intervals(RECORDS, "2023-01-01", "2024-01-01", project_name="Node")


def test_intervals_to_frame_keeps_order_and_open_ends():
    df = intervals_to_frame(_intervals())

    assert list(df.columns) == ["name", "type", "label", "start", "end"]
    assert list(df["name"]) == ["Master", "Node 18", "Node 20", "Node 20"]
    assert df["end"].isna().tolist() == [False, False, False, True]
    assert df["start"].iloc[0] == pd.Timestamp("2023-01-01", tz="UTC")


def test_reporting_exports(tmp_path: Path):
    output_dir = tmp_path / "out"
    intervals = _intervals()

    results_file = save_intervals_json(intervals, output_dir, "Node")
    csv_file = export_intervals_csv(intervals, output_dir, "Node")
    excel_file = export_worksheets(intervals, output_dir, "Node")

    assert results_file.exists()
    assert csv_file.exists()
    assert excel_file is not None and excel_file.exists()

    with open(results_file) as f:
        saved = json.load(f)
    assert saved[0]["name"] == "Master"
    assert saved[-1]["end"] is None

    assert len(pd.read_csv(csv_file)) == len(intervals)
    assert load_workbook(excel_file).sheetnames == ["Master", "Node 18", "Node 20"]


def test_file_names_use_project_name(tmp_path: Path):
    results_file = save_intervals_json(_intervals(), tmp_path, "Node JS")

    assert results_file.name == "Node_JS_intervals.json"


def test_export_worksheets_skips_empty(tmp_path: Path):
    assert export_worksheets([], tmp_path, "Node") is None


def test_worksheet_names_are_sanitized_and_unique(tmp_path: Path):
    prefix = "Platform: runtime/core?"
    records = {
        "v1-long-maintenance-branch-a": {"start": "2023-01-01", "end": "2024-01-01"},
        "v1-long-maintenance-branch-b": {"start": "2023-01-01", "end": "2024-01-01"},
    }
    intervals = derive_intervals(records, "2023-01-01", "2024-01-01", project_name=prefix)

    excel_file = export_worksheets(intervals, tmp_path, prefix)

    sheetnames = load_workbook(excel_file).sheetnames
    assert len(sheetnames) == 3
    assert len({name.lower() for name in sheetnames}) == 3
    assert all(len(name) <= 31 for name in sheetnames)
    assert not any(ch in name for name in sheetnames for ch in ":/?")
    assert excel_file.parent == tmp_path
