#!/usr/bin/env python3
"""
Example script showing how to use the release-schedule tool.
"""

import json
from datetime import datetime
from pathlib import Path

from release_schedule import ChartOptions, create, derive_intervals
from release_schedule.reporting import export_worksheets, intervals_to_frame


SCHEDULE_FILE = Path(__file__).with_name("schedule.json")


def load_schedule():
    with open(SCHEDULE_FILE, encoding="utf-8") as f:
        return json.load(f)


def example_basic_derivation():
    """Example: Intervals for one year of the schedule."""
    print("="*60)
    print("Example 1: Basic Derivation")
    print("="*60)

    intervals = derive_intervals(
        load_schedule(),
        datetime(2023, 1, 1),
        datetime(2024, 1, 1),
    )

    for interval in intervals:
        print(f"{interval.name:<12} {interval.type:<12} {interval.label or '':<14} "
              f"{interval.start.date()} -> {interval.end.date() if interval.end is not None else 'open'}")


def example_without_master():
    """Example: Custom project name, no Master bar, as a DataFrame."""
    print("\n" + "="*60)
    print("Example 2: Without Master")
    print("="*60)

    intervals = derive_intervals(
        load_schedule(),
        datetime(2022, 1, 1),
        datetime(2025, 1, 1),
        exclude_master=True,
        project_name="Node",
    )

    print(intervals_to_frame(intervals).to_string(index=False))


class PrintingRenderer:
    """Minimal renderer that lists the bars it would draw."""

    def render(self, intervals, options):
        left = options.margin.left
        print(f"Chart with left margin {left}px, animate={options.animate}")
        for interval in intervals:
            print(f"  [{interval.type}] {interval.name}: {interval.label or ''}")


def example_create_with_renderer():
    """Example: Hand the intervals to a renderer."""
    print("\n" + "="*60)
    print("Example 3: Rendering")
    print("="*60)

    options = ChartOptions(
        data=load_schedule(),
        query_start=datetime(2023, 6, 1),
        query_end=datetime(2024, 6, 1),
        animate=True,
    )
    intervals = create(options, renderer=PrintingRenderer())

    excel_file = export_worksheets(intervals, Path("./output/example3"), options.project_name)
    print(f"\nWorksheets saved to: {excel_file}")


def main():
    example_basic_derivation()
    example_without_master()
    example_create_with_renderer()


if __name__ == "__main__":
    main()
