"""Grid layout engine.

Phases, run once per render and strictly in order by ``LayoutGraph.layout``:

  1. Placement    nodes reserve 3x3 grid blocks, level by level
  2. Sizing       column widths / row heights from node content
  3. Routing      A* path per edge, shorter of two candidate heading pairs
  4. Labels       pick the path segment that hosts each edge label
  5. Resolution   grid -> canvas coordinates, node box fragments
  6. Canvas size  grow the shared canvas to the grid's total size
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from gridflow.config import RenderConfig
from gridflow.errors import RoutingError
from gridflow.ir.graph import GraphIR
from gridflow.layout.pathfinder import a_star, simplify_path
from gridflow.layout.types import CanvasCoord, GridCoord, Heading, heading_between
from gridflow.renderers.canvas import Canvas, Rect
from gridflow.syntax.types import StyleClass
from gridflow.types import Direction

logger = logging.getLogger(__name__)

# Grid units from one node block to the next, along either axis.
LEVEL_STEP: int = 4
BLOCK_SIZE: int = 3

# How far past the outermost node block the pathfinder may wander.
SEARCH_MARGIN: int = LEVEL_STEP


@dataclass(eq=False)
class Node:
    name: str
    index: int
    style_class_name: str = ""
    style_class: StyleClass | None = None
    grid_coord: GridCoord | None = None
    canvas_coord: CanvasCoord | None = None
    box: Canvas | None = None
    drawn: bool = False

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class Edge:
    source: Node
    target: Node
    label: str = ""
    path: list[GridCoord] = field(default_factory=list)
    label_line: list[GridCoord] = field(default_factory=list)
    start_heading: Heading | None = None
    end_heading: Heading | None = None

    @property
    def is_self_reference(self) -> bool:
        return self.source is self.target


def self_reference_headings(direction: Direction) -> tuple[Heading, Heading, Heading, Heading]:
    if direction == Direction.LR:
        return (Heading.RIGHT, Heading.DOWN, Heading.DOWN, Heading.RIGHT)
    return (Heading.DOWN, Heading.RIGHT, Heading.RIGHT, Heading.DOWN)


def candidate_headings(
    source: GridCoord, target: GridCoord, is_self_reference: bool, direction: Direction
) -> tuple[Heading, Heading, Heading, Heading]:
    """Return (preferred, preferred_opposite, alternative, alternative_opposite).

    For diagonal neighbours LR layouts prefer leaving vertically and TD
    layouts prefer leaving horizontally.
    """
    if is_self_reference:
        return self_reference_headings(direction)

    d = heading_between(source, target)
    lr = direction == Direction.LR
    match d:
        case Heading.LOWER_RIGHT:
            if lr:
                return (Heading.DOWN, Heading.LEFT, Heading.RIGHT, Heading.UP)
            return (Heading.RIGHT, Heading.UP, Heading.DOWN, Heading.LEFT)
        case Heading.UPPER_RIGHT:
            if lr:
                return (Heading.UP, Heading.LEFT, Heading.RIGHT, Heading.DOWN)
            return (Heading.RIGHT, Heading.DOWN, Heading.UP, Heading.LEFT)
        case Heading.LOWER_LEFT:
            if lr:
                return (Heading.DOWN, Heading.RIGHT, Heading.LEFT, Heading.UP)
            return (Heading.LEFT, Heading.UP, Heading.DOWN, Heading.RIGHT)
        case Heading.UPPER_LEFT:
            if lr:
                return (Heading.UP, Heading.RIGHT, Heading.LEFT, Heading.DOWN)
            return (Heading.LEFT, Heading.DOWN, Heading.UP, Heading.RIGHT)
        case _:
            return (d, d.opposite(), d, d.opposite())


class LayoutGraph:
    """Nodes and edges of one diagram plus the grid state they are laid out on."""

    def __init__(self, config: RenderConfig | None = None, direction: Direction = Direction.LR) -> None:
        self.config = config or RenderConfig()
        self.direction = direction
        self.nodes: list[Node] = []
        self.edges: list[Edge] = []
        self.grid: dict[int, Node] = {}
        self.column_width: dict[int, int] = {}
        self.row_height: dict[int, int] = {}
        self.style_classes: dict[str, StyleClass] = {}
        self.canvas = Canvas(0, 0, self.config.charset)
        self._by_name: dict[str, Node] = {}
        self._extent = GridCoord(0, 0)
        self._sized = False

    @classmethod
    def from_ir(cls, gir: GraphIR, config: RenderConfig | None = None) -> LayoutGraph:
        config = config or RenderConfig()
        g = cls(config, config.resolve_direction(gir.direction))
        for name in gir.node_names():
            data = gir.node_data(name)
            g.append_node(Node(name=name, index=data.index, style_class_name=data.style_class_name))
        for src, tgt, data in gir.edges():
            g.edges.append(Edge(source=g._by_name[src], target=g._by_name[tgt], label=data.label))
        g.set_style_classes(gir.style_classes)
        return g

    # ─── Accessors ───────────────────────────────────────────────────────────

    def append_node(self, node: Node) -> None:
        self.nodes.append(node)
        self._by_name[node.name] = node

    def get_node(self, name: str) -> Node | None:
        return self._by_name.get(name)

    def children(self, node: Node) -> list[Node]:
        return [e.target for e in self.edges if e.source is node]

    def set_style_classes(self, style_classes: dict[str, StyleClass]) -> None:
        self.style_classes = dict(style_classes)
        for n in self.nodes:
            if n.style_class_name:
                n.style_class = self.style_classes.get(n.style_class_name)

    # ─── Pipeline ────────────────────────────────────────────────────────────

    def layout(self) -> None:
        """Run every layout phase in order."""
        self.place_nodes()
        self.size_grid()
        self.route_edges()
        self.resolve_coordinates()
        self.size_canvas()

    def place_nodes(self) -> None:
        """Assign every node a grid block, roots first, then children level by level."""
        highest_per_level: dict[int, int] = {}

        # A node is a root unless an earlier node (or one of its children) named it.
        found: set[str] = set()
        roots: list[Node] = []
        for n in self.nodes:
            if n.name not in found:
                roots.append(n)
            found.add(n.name)
            for child in self.children(n):
                found.add(child.name)

        for n in roots:
            self.reserve_spot(n, self._level_coord(0, highest_per_level.get(0, 0)))
            highest_per_level[0] = self._cross(n.grid_coord) + LEVEL_STEP

        for n in self.nodes:
            if n.grid_coord is None:
                continue
            child_level = self._level(n.grid_coord) + LEVEL_STEP
            for child in self.children(n):
                if child.grid_coord is not None:
                    continue
                self.reserve_spot(child, self._level_coord(child_level, highest_per_level.get(child_level, 0)))
                highest_per_level[child_level] = self._cross(child.grid_coord) + LEVEL_STEP

        placed = [n.grid_coord for n in self.nodes if n.grid_coord is not None]
        if placed:
            self._extent = GridCoord(
                max(c.x for c in placed) + BLOCK_SIZE - 1,
                max(c.y for c in placed) + BLOCK_SIZE - 1,
            )

    def size_grid(self) -> None:
        for n in self.nodes:
            self._set_column_width(n)

    def route_edges(self) -> None:
        for e in self.edges:
            self._determine_path(e)
            self._increase_grid_size_for_path(e.path)
            self._determine_label_line(e)

    def resolve_coordinates(self) -> None:
        self._sized = True
        for n in self.nodes:
            if n.grid_coord is None:
                continue
            n.canvas_coord = self.grid_to_canvas(n.grid_coord)
            n.box = self._node_box(n)

    def size_canvas(self) -> None:
        self.canvas.resize(sum(self.column_width.values()), sum(self.row_height.values()))

    # ─── Placement ───────────────────────────────────────────────────────────

    def _level(self, c: GridCoord) -> int:
        return c.x if self.direction == Direction.LR else c.y

    def _cross(self, c: GridCoord) -> int:
        return c.y if self.direction == Direction.LR else c.x

    def _level_coord(self, level: int, cross: int) -> GridCoord:
        if self.direction == Direction.LR:
            return GridCoord(level, cross)
        return GridCoord(cross, level)

    def _block(self, origin: GridCoord) -> list[GridCoord]:
        return [GridCoord(origin.x + dx, origin.y + dy) for dx in range(BLOCK_SIZE) for dy in range(BLOCK_SIZE)]

    def reserve_spot(self, n: Node, requested: GridCoord) -> GridCoord:
        """Reserve the first free block at or after requested along the cross axis."""
        coord = requested
        while any(c.key() in self.grid for c in self._block(coord)):
            coord = self._level_coord(self._level(coord), self._cross(coord) + LEVEL_STEP)
        for c in self._block(coord):
            self.grid[c.key()] = n
        n.grid_coord = coord
        logger.debug("placed node %r at grid %d,%d", n.name, coord.x, coord.y)
        return coord

    def is_free_in_grid(self, c: GridCoord) -> bool:
        if c.x < 0 or c.y < 0:
            return False
        if c.x > self._extent.x + SEARCH_MARGIN or c.y > self._extent.y + SEARCH_MARGIN:
            return False
        return c.key() not in self.grid

    # ─── Sizing ──────────────────────────────────────────────────────────────

    def _grow(self, sizes: dict[int, int], index: int, size: int) -> None:
        sizes[index] = max(sizes.get(index, 0), size)

    def _set_column_width(self, n: Node) -> None:
        if n.grid_coord is None:
            return
        # Three columns per node: border, padding + label + padding, border.
        pad = self.config.border_padding
        cols = [1, 2 * pad + len(n.name), 1]
        rows = [1, 1 + 2 * pad, 1]
        for i, w in enumerate(cols):
            self._grow(self.column_width, n.grid_coord.x + i, w)
        for i, h in enumerate(rows):
            self._grow(self.row_height, n.grid_coord.y + i, h)

        # Gap before the node
        if n.grid_coord.x > 0:
            self._grow(self.column_width, n.grid_coord.x - 1, self.config.padding_x)
        if n.grid_coord.y > 0:
            self._grow(self.row_height, n.grid_coord.y - 1, self.config.padding_y)

    def _increase_grid_size_for_path(self, path: list[GridCoord]) -> None:
        for c in path:
            self.column_width.setdefault(c.x, self.config.padding_x // 2)
            self.row_height.setdefault(c.y, self.config.padding_y // 2)

    # ─── Routing ─────────────────────────────────────────────────────────────

    def _find_path(self, start: GridCoord, goal: GridCoord) -> list[GridCoord] | None:
        path = a_star(start, goal, self.is_free_in_grid)
        if path is None:
            return None
        return simplify_path(path)

    def _determine_path(self, e: Edge) -> None:
        assert e.source.grid_coord is not None and e.target.grid_coord is not None, "edge routed before placement"
        src, tgt = e.source.grid_coord, e.target.grid_coord

        if e.is_self_reference:
            logger.debug("self-reference edge on %r", e.source.name)
        pref, pref_opp, alt, alt_opp = candidate_headings(src, tgt, e.is_self_reference, self.direction)

        preferred = self._find_path(src + pref, tgt + pref_opp)
        if (alt, alt_opp) == (pref, pref_opp):
            alternative = preferred
        else:
            alternative = self._find_path(src + alt, tgt + alt_opp)

        if preferred is None and alternative is None:
            raise RoutingError(e.source.name, e.target.name)
        if preferred is None:
            logger.debug("preferred route %s->%s failed for %r -> %r", pref.name, pref_opp.name, e.source.name, e.target.name)
        elif alternative is None:
            logger.debug("alternative route %s->%s failed for %r -> %r", alt.name, alt_opp.name, e.source.name, e.target.name)

        if alternative is None or (preferred is not None and len(preferred) <= len(alternative)):
            e.start_heading, e.end_heading, e.path = pref, pref_opp, preferred
        else:
            e.start_heading, e.end_heading, e.path = alt, alt_opp, alternative
        logger.debug(
            "routed %r -> %r via %s", e.source.name, e.target.name, " ".join(f"{c.x},{c.y}" for c in e.path)
        )

    def line_width(self, line: list[GridCoord]) -> int:
        """Total width of the columns a segment spans."""
        lo = min(c.x for c in line)
        hi = max(c.x for c in line)
        return sum(self.column_width.get(x, 0) for x in range(lo, hi + 1))

    def _determine_label_line(self, e: Edge) -> None:
        if not e.label or len(e.path) < 2:
            return

        label_len = len(e.label)
        largest_line = [e.path[0], e.path[1]]
        largest_width = 0
        for a, b in zip(e.path, e.path[1:]):
            line = [a, b]
            width = self.line_width(line)
            if width >= label_len:
                largest_line = line
                break
            if width > largest_width:
                largest_width = width
                largest_line = line

        lo = min(largest_line[0].x, largest_line[1].x)
        hi = max(largest_line[0].x, largest_line[1].x)
        self._grow(self.column_width, lo + (hi - lo) // 2, label_len + 2)
        e.label_line = largest_line

    # ─── Resolution ──────────────────────────────────────────────────────────

    def grid_to_canvas(self, c: GridCoord, heading: Heading | None = None) -> CanvasCoord:
        """Convert a grid cell to the canvas cell at its centre.

        Only valid once sizing has finished.
        """
        assert self._sized, "grid_to_canvas called before grid sizing was finalized"
        target = c + heading if heading is not None else c
        x = sum(self.column_width.get(col, 0) for col in range(target.x))
        y = sum(self.row_height.get(row, 0) for row in range(target.y))
        return CanvasCoord(
            x + self.column_width.get(target.x, 0) // 2,
            y + self.row_height.get(target.y, 0) // 2,
        )

    def line_to_canvas(self, line: list[GridCoord]) -> list[CanvasCoord]:
        return [self.grid_to_canvas(c) for c in line]

    def _node_box(self, n: Node) -> Canvas:
        assert n.grid_coord is not None
        # The box spans the node's first two columns/rows; its right and
        # bottom border land on the first cell of the third.
        w = sum(self.column_width.get(n.grid_coord.x + i, 0) for i in range(2))
        h = sum(self.row_height.get(n.grid_coord.y + i, 0) for i in range(2))
        box = Canvas(w + 1, h + 1, self.config.charset)
        box.draw_box(Rect(0, 0, w + 1, h + 1), box.chars)

        text_x = w // 2 - -(-len(n.name) // 2) + 1
        box.draw_text(CanvasCoord(text_x, h // 2), n.name)
        return box
