"""Character sets and junction merging for box-drawing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gridflow.layout.types import Heading


class CharSet(Enum):
    Unicode = "unicode"
    Ascii = "ascii"


@dataclass(frozen=True)
class BoxChars:
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    horizontal: str
    vertical: str
    diagonal_down: str  # upper-left to lower-right
    diagonal_up: str  # lower-left to upper-right
    tee_right: str
    tee_left: str
    tee_down: str
    tee_up: str
    corner: str
    arrow_right: str
    arrow_left: str
    arrow_down: str
    arrow_up: str
    arrow_upper_right: str
    arrow_upper_left: str
    arrow_lower_right: str
    arrow_lower_left: str
    arrow_other: str

    @classmethod
    def unicode(cls) -> BoxChars:
        return _UNICODE

    @classmethod
    def ascii(cls) -> BoxChars:
        return _ASCII

    @classmethod
    def for_charset(cls, cs: CharSet) -> BoxChars:
        if cs == CharSet.Unicode:
            return cls.unicode()
        return cls.ascii()

    def line(self, heading: Heading) -> str:
        """Glyph for a straight segment running along heading."""
        match heading:
            case Heading.UP | Heading.DOWN | Heading.MIDDLE:
                return self.vertical
            case Heading.LEFT | Heading.RIGHT:
                return self.horizontal
            case Heading.UPPER_LEFT | Heading.LOWER_RIGHT:
                return self.diagonal_down
            case Heading.UPPER_RIGHT | Heading.LOWER_LEFT:
                return self.diagonal_up

    def arrow(self, heading: Heading) -> str:
        """Arrowhead glyph pointing along heading."""
        match heading:
            case Heading.UP:
                return self.arrow_up
            case Heading.DOWN:
                return self.arrow_down
            case Heading.LEFT:
                return self.arrow_left
            case Heading.RIGHT:
                return self.arrow_right
            case Heading.UPPER_RIGHT:
                return self.arrow_upper_right
            case Heading.UPPER_LEFT:
                return self.arrow_upper_left
            case Heading.LOWER_RIGHT:
                return self.arrow_lower_right
            case Heading.LOWER_LEFT:
                return self.arrow_lower_left
            case Heading.MIDDLE:
                return self.arrow_other

    def turn(self, incoming: Heading, outgoing: Heading) -> str:
        """Corner glyph where a path turns from incoming to outgoing."""
        match (incoming, outgoing):
            case (Heading.RIGHT, Heading.DOWN) | (Heading.UP, Heading.LEFT):
                return self.top_right
            case (Heading.RIGHT, Heading.UP) | (Heading.DOWN, Heading.LEFT):
                return self.bottom_right
            case (Heading.LEFT, Heading.DOWN) | (Heading.UP, Heading.RIGHT):
                return self.top_left
            case (Heading.LEFT, Heading.UP) | (Heading.DOWN, Heading.RIGHT):
                return self.bottom_left
            case _:
                return self.corner

    def box_start(self, heading: Heading) -> str | None:
        """Junction where a path leaves a box border heading outwards."""
        match heading:
            case Heading.UP:
                return self.tee_up
            case Heading.DOWN:
                return self.tee_down
            case Heading.LEFT:
                return self.tee_left
            case Heading.RIGHT:
                return self.tee_right
            case _:
                return None


_UNICODE = BoxChars(
    top_left="┌",
    top_right="┐",
    bottom_left="└",
    bottom_right="┘",
    horizontal="─",
    vertical="│",
    diagonal_down="╲",
    diagonal_up="╱",
    tee_right="├",
    tee_left="┤",
    tee_down="┬",
    tee_up="┴",
    corner="+",
    arrow_right="►",
    arrow_left="◄",
    arrow_down="▼",
    arrow_up="▲",
    arrow_upper_right="◥",
    arrow_upper_left="◤",
    arrow_lower_right="◢",
    arrow_lower_left="◣",
    arrow_other="●",
)

_ASCII = BoxChars(
    top_left="+",
    top_right="+",
    bottom_left="+",
    bottom_right="+",
    horizontal="-",
    vertical="|",
    diagonal_down="\\",
    diagonal_up="/",
    tee_right="+",
    tee_left="+",
    tee_down="+",
    tee_up="+",
    corner="+",
    arrow_right=">",
    arrow_left="<",
    arrow_down="v",
    arrow_up="^",
    arrow_upper_right="*",
    arrow_upper_left="*",
    arrow_lower_right="*",
    arrow_lower_left="*",
    arrow_other="*",
)


# up, down, left, right
_ARMS_TABLE: dict[str, tuple[bool, bool, bool, bool]] = {
    "─": (False, False, True, True),
    "│": (True, True, False, False),
    "┌": (False, True, False, True),
    "┐": (False, True, True, False),
    "└": (True, False, False, True),
    "┘": (True, False, True, False),
    "├": (True, True, False, True),
    "┤": (True, True, True, False),
    "┬": (False, True, True, True),
    "┴": (True, False, True, True),
    "┼": (True, True, True, True),
    "╴": (False, False, True, False),
    "╵": (True, False, False, False),
    "╶": (False, False, False, True),
    "╷": (False, True, False, False),
}

JUNCTION_CHARS: frozenset[str] = frozenset(_ARMS_TABLE)

_CHAR_FOR_ARMS: dict[tuple[bool, bool, bool, bool], str] = {arms: c for c, arms in _ARMS_TABLE.items()}


@dataclass
class Arms:
    """Which arms of a junction cell are active."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    @classmethod
    def from_char(cls, c: str) -> Arms | None:
        entry = _ARMS_TABLE.get(c)
        if entry is None:
            return None
        u, d, lft, r = entry
        return cls(up=u, down=d, left=lft, right=r)

    def merge(self, other: Arms) -> Arms:
        return Arms(
            up=self.up or other.up,
            down=self.down or other.down,
            left=self.left or other.left,
            right=self.right or other.right,
        )

    def to_char(self) -> str:
        return _CHAR_FOR_ARMS.get((self.up, self.down, self.left, self.right), " ")


def is_junction_char(c: str) -> bool:
    return c in JUNCTION_CHARS


def merge_junctions(existing: str, incoming: str) -> str:
    """Fuse two junction glyphs into the glyph carrying both sets of arms."""
    ea = Arms.from_char(existing)
    na = Arms.from_char(incoming)
    if ea is None or na is None:
        return incoming
    return ea.merge(na).to_char()
