"""
Derive chart intervals from a release schedule.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

from .models import (
    ACTIVE,
    CURRENT,
    DEFAULT_PROJECT_NAME,
    MAINTENANCE,
    MASTER_NAME,
    UNSTABLE,
    Interval,
    VersionRecord,
)
from .time_utils import overlaps, parse_window


logger = logging.getLogger(__name__)

RecordInput = Union[VersionRecord, Mapping[str, Any]]
Window = Tuple[datetime, datetime]


def load_records(records: Mapping[str, RecordInput]) -> Dict[str, VersionRecord]:
    """Validate every record up front, preserving the input order.

    Raises:
        MissingFieldError: If any record lacks ``start`` or ``end``
    """
    loaded = {}
    for label, record in records.items():
        if not isinstance(record, VersionRecord):
            record = VersionRecord.from_mapping(label, record)
        loaded[label] = record
    return loaded


def _phase_starts(record: VersionRecord) -> Iterator[Tuple[str, Optional[datetime]]]:
    # Latest phase first: each phase ends where the next one starts.
    yield MAINTENANCE, record.maintenance
    yield ACTIVE, record.lts
    yield CURRENT, record.start


def _phase_intervals(name: str, record: VersionRecord, window: Window) -> Iterator[Interval]:
    working_end = record.end
    for phase, phase_start in _phase_starts(record):
        if phase_start is None:
            continue
        if overlaps(phase_start, working_end, *window):
            yield Interval(name, phase, phase, phase_start, working_end)
        working_end = phase_start


def _release_intervals(name: str, record: VersionRecord, window: Window) -> Iterator[Interval]:
    for label, release in record.releases.items():
        if overlaps(release.start, release.end, *window):
            yield Interval(name, release.type, label, release.start, release.end)


def derive_intervals(
    records: Mapping[str, RecordInput],
    query_start: Any,
    query_end: Any,
    exclude_master: bool = False,
    project_name: str = DEFAULT_PROJECT_NAME,
) -> List[Interval]:
    """Turn version records into the ordered bars of a release chart.

    Args:
        records: Version label to record, in display order
        query_start: Start of the visualized window
        query_end: End of the visualized window
        exclude_master: Skip the synthetic ``Master`` bar
        project_name: Prefix of every display name

    Returns:
        Intervals overlapping the window, ``Master`` first when included,
        then per record its phases (maintenance, active, current) followed
        by its sub-releases.
    """
    window = parse_window(query_start, query_end)
    loaded = load_records(records)

    output: List[Interval] = []
    for record in loaded.values():
        name = f"{project_name} {record.display_label}"
        output.extend(_phase_intervals(name, record, window))
        output.extend(_release_intervals(name, record, window))

    if not exclude_master:
        output.insert(0, Interval(MASTER_NAME, UNSTABLE, None, window[0], window[1]))

    logger.debug(
        "Derived %d intervals from %d versions between %s and %s",
        len(output), len(loaded), window[0], window[1],
    )
    return output
