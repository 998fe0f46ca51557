"""
Interfaces for chart renderers.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import ChartOptions, Interval


class ChartRenderer(Protocol):
    """Draw derived intervals and write the requested output targets.

    A renderer maps ``name`` to a vertical band, ``(start, end)`` to a
    horizontal extent on a time scale clamped to the query window, and
    ``type``/``label`` to style and text. It writes one file per target in
    ``options.output_targets``, each opened in a ``with`` block.
    """

    def render(self, intervals: Sequence[Interval], options: ChartOptions) -> None:
        ...
