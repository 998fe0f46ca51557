"""
Chart entry point: derive intervals and hand them to a renderer.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .interfaces import ChartRenderer
from .models import ChartOptions, Interval
from .schedule import derive_intervals


logger = logging.getLogger(__name__)


def create(options: ChartOptions, renderer: Optional[ChartRenderer] = None) -> List[Interval]:
    """Derive the chart intervals and render them.

    Derivation errors propagate before the renderer is called, so a chart is
    either rendered from the full interval list or not at all.

    Args:
        options: Schedule data, query window and render options
        renderer: Collaborator that draws and writes the chart

    Returns:
        The derived intervals
    """
    intervals = derive_intervals(
        options.data,
        options.query_start,
        options.query_end,
        exclude_master=options.exclude_master,
        project_name=options.project_name,
    )

    targets = options.output_targets
    if renderer is None:
        if targets:
            logger.warning(
                "No renderer configured, skipping outputs: %s", ", ".join(sorted(targets))
            )
        return intervals

    logger.info("Rendering %d intervals to %s", len(intervals), ", ".join(targets.values()) or "memory")
    renderer.render(intervals, options)
    return intervals
