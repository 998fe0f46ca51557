"""
Reporting and export utilities.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Sequence

import pandas as pd

from .models import Interval


logger = logging.getLogger(__name__)

COLUMNS = ["name", "type", "label", "start", "end"]

# Excel rejects these in sheet titles
_INVALID_SHEET_CHARS = re.compile(r"[\[\]:*?/\\]")
_MAX_SHEET_NAME = 31


def _file_stem(project_name: str) -> str:
    return re.sub(r"[\s/\\]+", "_", project_name.strip()) or "schedule"


def _sheet_names(names: Sequence[str]) -> list[str]:
    """Excel-safe, case-insensitively unique sheet titles."""
    used = set()
    titles = []
    for name in names:
        base = _INVALID_SHEET_CHARS.sub("_", str(name)).strip("'")[:_MAX_SHEET_NAME] or "Sheet"
        title = base
        counter = 2
        while title.lower() in used:
            suffix = f" ({counter})"
            title = base[:_MAX_SHEET_NAME - len(suffix)] + suffix
            counter += 1
        used.add(title.lower())
        titles.append(title)
    return titles


def _drop_timezones(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    for col in df.columns:
        if isinstance(df[col].dtype, pd.DatetimeTZDtype):
            df[col] = df[col].dt.tz_convert("UTC").dt.tz_localize(None)
    return df


def intervals_to_frame(intervals: Sequence[Interval]) -> pd.DataFrame:
    """Tabulate intervals; open ends become ``NaT``."""
    df = pd.DataFrame([interval.to_dict() for interval in intervals], columns=COLUMNS)
    for col in ("start", "end"):
        df[col] = pd.to_datetime(df[col], utc=True)
    return df


def print_summary(
    project_name: str,
    query_start: datetime,
    query_end: datetime,
    intervals: Sequence[Interval],
) -> None:
    logger.info("=" * 60)
    logger.info("RELEASE SCHEDULE")
    logger.info("=" * 60)
    logger.info("Project: %s", project_name)
    logger.info("Window: %s to %s", query_start.date(), query_end.date())
    logger.info("-" * 60)
    for interval in intervals:
        end = interval.end.date() if interval.end is not None else "open"
        logger.info(
            "%-20s %-12s %-14s %s -> %s",
            interval.name, interval.type, interval.label or "", interval.start.date(), end,
        )
    logger.info("-" * 60)
    logger.info("Number of intervals: %d", len(intervals))
    logger.info("=" * 60)


def save_intervals_json(intervals: Sequence[Interval], output_dir: Path, project_name: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    results_file = output_dir / f"{_file_stem(project_name)}_intervals.json"
    with open(results_file, 'w') as f:
        json.dump([interval.to_dict() for interval in intervals], f, indent=2, default=str)
    return results_file


def export_intervals_csv(intervals: Sequence[Interval], output_dir: Path, project_name: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_file = output_dir / f"{_file_stem(project_name)}_intervals.csv"
    _drop_timezones(intervals_to_frame(intervals)).to_csv(csv_file, index=False)
    return csv_file


def export_worksheets(intervals: Sequence[Interval], output_dir: Path, project_name: str) -> Path | None:
    """Write one worksheet per chart row."""
    if not intervals:
        return None
    output_dir.mkdir(parents=True, exist_ok=True)
    excel_file = output_dir / f"{_file_stem(project_name)}_worksheets.xlsx"
    df = _drop_timezones(intervals_to_frame(intervals))
    groups = list(df.groupby("name", sort=False))
    titles = _sheet_names([name for name, _ in groups])
    with pd.ExcelWriter(excel_file, engine='openpyxl') as writer:
        for title, (_, rows) in zip(titles, groups):
            rows.to_excel(writer, sheet_name=title, index=False)
    return excel_file
