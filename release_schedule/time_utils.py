"""
Shared datetime helpers.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional, Tuple

import pandas as pd


def ensure_utc(dt: datetime) -> datetime:
    """Return a timezone-aware UTC datetime."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_date(value: Any) -> Optional[pd.Timestamp]:
    """Parse a schedule date and normalize it to UTC.

    ``None`` and blank strings mean the field is absent and return ``None``.
    Numbers are epoch milliseconds. Anything that cannot be parsed becomes
    ``pd.NaT``, which compares false against every date.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    if value is pd.NaT:
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return pd.to_datetime(value, unit="ms", utc=True, errors="coerce")
    if isinstance(value, datetime):
        value = ensure_utc(value)
    return pd.to_datetime(value, utc=True, errors="coerce")


def parse_window(start: Any, end: Any) -> Tuple[pd.Timestamp, pd.Timestamp]:
    """Parse the query window bounds."""
    window = []
    for bound_name, bound in (("start", start), ("end", end)):
        parsed = parse_date(bound)
        if parsed is None or pd.isna(parsed):
            raise ValueError(f"Invalid query {bound_name}: {bound!r}")
        window.append(parsed)
    return window[0], window[1]


def overlaps(
    start: datetime,
    end: Optional[datetime],
    window_start: datetime,
    window_end: datetime,
) -> bool:
    """Strict overlap of ``[start, end)`` with the window; ``end=None`` is unbounded."""
    if not start < window_end:
        return False
    return end is None or end > window_start
