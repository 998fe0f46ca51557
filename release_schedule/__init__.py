"""
Release Schedule

Derive release schedule chart intervals from version lifecycle dates.
"""

__version__ = "0.1.0"

from .chart import create
from .cli import main
from .models import ChartMargin, ChartOptions, Interval, MissingFieldError, SubRelease, VersionRecord
from .schedule import derive_intervals

__all__ = [
    "ChartMargin",
    "ChartOptions",
    "Interval",
    "MissingFieldError",
    "SubRelease",
    "VersionRecord",
    "create",
    "derive_intervals",
    "main",
]
