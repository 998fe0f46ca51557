"""
Core data models for release schedules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from .time_utils import parse_date


CURRENT = "current"
ACTIVE = "active"
MAINTENANCE = "maintenance"
UNSTABLE = "unstable"

MASTER_NAME = "Master"
DEFAULT_PROJECT_NAME = "Node.js"


class MissingFieldError(ValueError):
    """A version record lacks a required field."""

    def __init__(self, record: str, field_name: str):
        self.record = record
        self.field = field_name
        super().__init__(f"missing {field_name} in version {record!r}")


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"{what} must be an object, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class SubRelease:
    """A named release nested under a version.

    Dates are normalized to UTC on construction; an empty ``type`` falls back
    to ``"active"``.
    """

    label: str
    start: datetime
    type: str = ACTIVE
    end: Optional[datetime] = None

    def __post_init__(self) -> None:
        start = parse_date(self.start)
        if start is None:
            raise MissingFieldError(self.label, "start")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", parse_date(self.end))
        object.__setattr__(self, "type", self.type or ACTIVE)

    @classmethod
    def from_mapping(cls, record: str, label: str, raw: Mapping[str, Any]) -> "SubRelease":
        raw = _require_mapping(raw, f"Release {label!r} of version {record!r}")
        if parse_date(raw.get("start")) is None:
            raise MissingFieldError(record, f"releases.{label}.start")
        return cls(
            label=label,
            start=raw.get("start"),
            type=raw.get("type") or ACTIVE,
            end=raw.get("end"),
        )


@dataclass(frozen=True)
class VersionRecord:
    """Lifecycle dates of a single version line.

    Dates may be given as strings, ``date``/``datetime`` objects or epoch
    milliseconds; they are normalized to UTC timestamps on construction.
    """

    label: str
    start: datetime
    end: datetime
    lts: Optional[datetime] = None
    maintenance: Optional[datetime] = None
    releases: Dict[str, SubRelease] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            value = parse_date(getattr(self, name))
            if value is None:
                raise MissingFieldError(self.label, name)
            object.__setattr__(self, name, value)
        object.__setattr__(self, "lts", parse_date(self.lts))
        object.__setattr__(self, "maintenance", parse_date(self.maintenance))
        object.__setattr__(self, "releases", dict(self.releases))

    @classmethod
    def from_mapping(cls, label: str, raw: Mapping[str, Any]) -> "VersionRecord":
        """Build a record from a raw schedule entry.

        Args:
            label: Version key, e.g. ``"v18"``
            raw: Entry as loaded from a schedule file

        Raises:
            MissingFieldError: If ``start`` or ``end`` is absent
            ValueError: If the entry or its ``releases`` is not an object
        """
        raw = _require_mapping(raw, f"Version {label!r}")
        releases = raw.get("releases")
        if releases is None:
            releases = {}
        releases = _require_mapping(releases, f"Releases of version {label!r}")
        return cls(
            label=label,
            start=raw.get("start"),
            end=raw.get("end"),
            lts=raw.get("lts"),
            maintenance=raw.get("maintenance"),
            releases={
                name: SubRelease.from_mapping(label, name, release)
                for name, release in releases.items()
            },
        )

    @property
    def display_label(self) -> str:
        if self.label.startswith("v"):
            return self.label[1:]
        return self.label


@dataclass(frozen=True)
class Interval:
    """A typed bar of the release chart."""

    name: str
    type: str
    label: Optional[str]
    start: datetime
    end: Optional[datetime]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "label": self.label,
            "start": self.start,
            "end": self.end,
        }


@dataclass(frozen=True)
class ChartMargin:
    """Chart margins in pixels."""

    top: int = 30
    right: int = 30
    bottom: int = 30
    left: int = 160


@dataclass(frozen=True)
class ChartOptions:
    """Options handed to a chart renderer.

    Output targets (``html``, ``svg``, ``png``) are independent; a target left
    as ``None`` is skipped.
    """

    data: Mapping[str, Any]
    query_start: datetime
    query_end: datetime
    exclude_master: bool = False
    project_name: str = DEFAULT_PROJECT_NAME
    margin: ChartMargin = field(default_factory=ChartMargin)
    animate: bool = False
    html: Optional[str] = None
    svg: Optional[str] = None
    png: Optional[str] = None

    @property
    def output_targets(self) -> Dict[str, str]:
        targets = {"html": self.html, "svg": self.svg, "png": self.png}
        return {kind: path for kind, path in targets.items() if path is not None}
