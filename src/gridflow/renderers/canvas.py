"""Canvas — resizable 2D character grid for rendering.

Every drawn element (node box, edge line, corner, arrowhead, label) is
painted on its own canvas fragment and composited with ``merge_onto``.
"""

from __future__ import annotations

from dataclasses import dataclass

from gridflow.layout.types import CanvasCoord, Heading, heading_between
from gridflow.renderers.charset import BoxChars, CharSet, is_junction_char, merge_junctions

_STEPS: dict[Heading, tuple[int, int]] = {
    Heading.UP: (0, -1),
    Heading.DOWN: (0, 1),
    Heading.LEFT: (-1, 0),
    Heading.RIGHT: (1, 0),
    Heading.UPPER_LEFT: (-1, -1),
    Heading.UPPER_RIGHT: (1, -1),
    Heading.LOWER_LEFT: (-1, 1),
    Heading.LOWER_RIGHT: (1, 1),
}


@dataclass
class Rect:
    x: int
    y: int
    width: int
    height: int


class Canvas:
    """A 2D character grid onto which graph elements are painted.

    The grid only ever grows; cells are addressed as (col, row).
    """

    def __init__(self, width: int = 0, height: int = 0, charset: CharSet = CharSet.Unicode) -> None:
        self.width = 0
        self.height = 0
        self.charset = charset
        self.cells: list[list[str]] = []
        self.resize(width, height)

    @property
    def chars(self) -> BoxChars:
        return BoxChars.for_charset(self.charset)

    def blank_copy(self) -> Canvas:
        """An empty canvas with the same size and charset."""
        return Canvas(self.width, self.height, self.charset)

    def copy(self) -> Canvas:
        dup = Canvas(0, 0, self.charset)
        dup.width = self.width
        dup.height = self.height
        dup.cells = [list(row) for row in self.cells]
        return dup

    def resize(self, width: int, height: int) -> None:
        """Grow to at least width x height cells, keeping existing content."""
        if width > self.width:
            for row in self.cells:
                row.extend(" " * (width - self.width))
            self.width = width
        if height > self.height:
            self.cells.extend([" "] * self.width for _ in range(height - self.height))
            self.height = height

    def get(self, col: int, row: int) -> str:
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.cells[row][col]
        return " "

    def set(self, col: int, row: int, c: str) -> None:
        """Write one cell, growing the canvas to reach it. Negative cells are ignored."""
        if col < 0 or row < 0:
            return
        self.resize(col + 1, row + 1)
        self.cells[row][col] = c

    def draw_text(self, origin: CanvasCoord, text: str) -> None:
        for i, ch in enumerate(text):
            self.set(origin.x + i, origin.y, ch)

    def draw_line(
        self, start: CanvasCoord, end: CanvasCoord, start_inset: int = 0, end_inset: int = 0
    ) -> list[CanvasCoord]:
        """Draw a straight or 45-degree segment and return the cells written.

        The insets pull the segment's first and last cell inwards; a segment
        that shrinks below one cell draws nothing.
        """
        dx = end.x - start.x
        dy = end.y - start.y
        if dx != 0 and dy != 0 and abs(dx) != abs(dy):
            raise ValueError(f"cannot draw a line from {start} to {end}: not straight or diagonal")

        heading = heading_between(start, end)
        glyph = self.chars.line(heading)
        sx, sy = _STEPS[heading]
        self.resize(max(start.x, end.x) + 1, max(start.y, end.y) + 1)

        x, y = start.x + sx * start_inset, start.y + sy * start_inset
        last_x, last_y = end.x - sx * end_inset, end.y - sy * end_inset
        drawn: list[CanvasCoord] = []
        while (x - last_x) * sx <= 0 and (y - last_y) * sy <= 0:
            self.set(x, y, glyph)
            drawn.append(CanvasCoord(x, y))
            x += sx
            y += sy
        return drawn

    def draw_box(self, rect: Rect, bc: BoxChars) -> None:
        if rect.width < 2 or rect.height < 2:
            return
        x0 = rect.x
        y0 = rect.y
        x1 = rect.x + rect.width - 1
        y1 = rect.y + rect.height - 1
        for col in range(x0 + 1, x1):
            self.set(col, y0, bc.horizontal)
            self.set(col, y1, bc.horizontal)
        for row in range(y0 + 1, y1):
            self.set(x0, row, bc.vertical)
            self.set(x1, row, bc.vertical)
        self.set(x0, y0, bc.top_left)
        self.set(x1, y0, bc.top_right)
        self.set(x0, y1, bc.bottom_left)
        self.set(x1, y1, bc.bottom_right)

    def to_string(self) -> str:
        return "\n".join("".join(row) for row in self.cells)


def merge_onto(base: Canvas, offset: CanvasCoord, *fragments: Canvas) -> Canvas:
    """Composite fragments onto a copy of base, shifted by offset.

    Blank fragment cells are transparent. Where both the existing and the
    incoming cell are Unicode junction glyphs they fuse; otherwise the
    later fragment wins.
    """
    merged = base.copy()
    for frag in fragments:
        merged.resize(frag.width + offset.x, frag.height + offset.y)

    fuse = merged.charset == CharSet.Unicode
    for frag in fragments:
        for row, line in enumerate(frag.cells):
            for col, c in enumerate(line):
                if c == " ":
                    continue
                x, y = col + offset.x, row + offset.y
                current = merged.get(x, y)
                if fuse and is_junction_char(c) and is_junction_char(current):
                    merged.set(x, y, merge_junctions(current, c))
                else:
                    merged.set(x, y, c)
    return merged
