"""Layout engine convenience functions."""

from __future__ import annotations

from gridflow.config import RenderConfig
from gridflow.ir.graph import GraphIR
from gridflow.layout.graph import LayoutGraph


def full_layout(gir: GraphIR, config: RenderConfig | None = None) -> LayoutGraph:
    """Build a layout graph from the IR and run every layout phase."""
    g = LayoutGraph.from_ir(gir, config)
    g.layout()
    return g
