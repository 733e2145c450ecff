"""ASCII/Unicode text renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from gridflow.layout.graph import Edge, LayoutGraph, Node
from gridflow.layout.types import CanvasCoord, Heading, heading_between
from gridflow.renderers.canvas import Canvas, merge_onto
from gridflow.renderers.charset import CharSet

_ORIGIN = CanvasCoord(0, 0)


# ─── Node Rendering ──────────────────────────────────────────────────────────


def _paint_node(canvas: Canvas, n: Node) -> Canvas:
    assert n.box is not None and n.canvas_coord is not None, f"node {n.name!r} drawn before layout"
    merged = merge_onto(canvas, n.canvas_coord, n.box)
    n.drawn = True
    return merged


# ─── Edge Rendering ──────────────────────────────────────────────────────────


def _paint_path(g: LayoutGraph, e: Edge) -> Canvas:
    frag = g.canvas.blank_copy()
    prev = e.path[0]
    for nxt in e.path[1:]:
        a = g.grid_to_canvas(prev)
        b = g.grid_to_canvas(nxt)
        if a == b:
            continue
        # Inset both ends so the segment stops short of box borders and corners.
        frag.draw_line(a, b, 1, 1)
        prev = nxt
    return frag


def _final_segment(g: LayoutGraph, e: Edge) -> tuple[CanvasCoord, CanvasCoord] | None:
    """Canvas endpoints of the last path segment that has any length."""
    end = g.grid_to_canvas(e.path[-1])
    for c in reversed(e.path[:-1]):
        start = g.grid_to_canvas(c)
        if start != end:
            return start, end
    return None


def _step_back(a: CanvasCoord, b: CanvasCoord) -> CanvasCoord:
    """The cell just before b on the straight line from a."""
    sx = (b.x > a.x) - (b.x < a.x)
    sy = (b.y > a.y) - (b.y < a.y)
    return CanvasCoord(b.x - sx, b.y - sy)


def _paint_box_start(g: LayoutGraph, e: Edge) -> Canvas:
    frag = g.canvas.blank_copy()
    if frag.charset == CharSet.Ascii or len(e.path) < 2:
        return frag

    glyph = frag.chars.box_start(heading_between(e.path[0], e.path[1]))
    if glyph is None:
        return frag
    # The first path cell is the source box's border.
    at = g.grid_to_canvas(e.path[0])
    frag.set(at.x, at.y, glyph)
    return frag


def _paint_arrow_head(g: LayoutGraph, e: Edge) -> Canvas:
    frag = g.canvas.blank_copy()
    segment = _final_segment(g, e)
    if segment is None:
        return frag

    a, b = segment
    heading = heading_between(a, b)
    # A self reference whose last segment collapses to a stub re-enters from below.
    if e.is_self_reference and max(abs(b.x - a.x), abs(b.y - a.y)) < 3:
        heading = Heading.UP
    tip = _step_back(a, b)
    frag.set(tip.x, tip.y, frag.chars.arrow(heading))
    return frag


def _paint_corners(g: LayoutGraph, e: Edge) -> Canvas:
    frag = g.canvas.blank_copy()
    bc = frag.chars
    for prev, curr, nxt in zip(e.path, e.path[1:], e.path[2:]):
        at = g.grid_to_canvas(curr)
        frag.set(at.x, at.y, bc.turn(heading_between(prev, curr), heading_between(curr, nxt)))
    return frag


def _paint_label(g: LayoutGraph, e: Edge) -> Canvas:
    frag = g.canvas.blank_copy()
    if not e.label or len(e.label_line) < 2:
        return frag

    a, b = g.line_to_canvas(e.label_line)
    middle_x = min(a.x, b.x) + abs(a.x - b.x) // 2
    middle_y = min(a.y, b.y) + abs(a.y - b.y) // 2
    frag.draw_text(CanvasCoord(middle_x - len(e.label) // 2, middle_y), e.label)
    return frag


@dataclass
class EdgeFragments:
    """Per-edge drawings, grouped so each group is merged in a fixed order."""

    lines: list[Canvas] = field(default_factory=list)
    corners: list[Canvas] = field(default_factory=list)
    arrow_heads: list[Canvas] = field(default_factory=list)
    box_starts: list[Canvas] = field(default_factory=list)
    labels: list[Canvas] = field(default_factory=list)

    def add(self, g: LayoutGraph, e: Edge) -> None:
        if not e.path:
            return
        self.lines.append(_paint_path(g, e))
        self.corners.append(_paint_corners(g, e))
        self.arrow_heads.append(_paint_arrow_head(g, e))
        self.box_starts.append(_paint_box_start(g, e))
        self.labels.append(_paint_label(g, e))

    def in_merge_order(self) -> list[Canvas]:
        return [*self.lines, *self.corners, *self.arrow_heads, *self.box_starts, *self.labels]


# ─── Public Renderer ─────────────────────────────────────────────────────────


class AsciiRenderer:
    """ASCII/Unicode text renderer for a laid-out graph."""

    def render(self, g: LayoutGraph) -> str:
        canvas = g.canvas
        for n in g.nodes:
            if not n.drawn:
                canvas = _paint_node(canvas, n)

        fragments = EdgeFragments()
        for e in g.edges:
            fragments.add(g, e)
        canvas = merge_onto(canvas, _ORIGIN, *fragments.in_merge_order())

        g.canvas = canvas
        return canvas.to_string()
