"""Grid layout: geometry and pathfinding.

The layout graph itself lives in ``gridflow.layout.graph`` and is driven
through ``gridflow.layout.engine.full_layout``.
"""

from __future__ import annotations

from gridflow.layout.pathfinder import a_star, simplify_path
from gridflow.layout.types import CanvasCoord, GridCoord, Heading, heading_between

__all__ = [
    "CanvasCoord",
    "GridCoord",
    "Heading",
    "a_star",
    "heading_between",
    "simplify_path",
]
