"""Centralized configuration for gridflow."""

from __future__ import annotations

from dataclasses import dataclass

from gridflow.errors import ConfigurationError
from gridflow.renderers.charset import CharSet
from gridflow.types import Direction

BOX_BORDER_PADDING: int = 1
PADDING_BETWEEN_X: int = 5
PADDING_BETWEEN_Y: int = 5


@dataclass
class RenderConfig:
    """Configuration for the layout and rendering pipeline.

    Attributes:
        use_ascii: Draw with plain ASCII instead of Unicode box-drawing glyphs.
        border_padding: Spaces between a node's label and its border.
        padding_x: Width of the gap column between neighbouring nodes.
        padding_y: Height of the gap row between neighbouring nodes.
        direction: Flow orientation override; None keeps the diagram's own.
    """

    use_ascii: bool = False
    border_padding: int = BOX_BORDER_PADDING
    padding_x: int = PADDING_BETWEEN_X
    padding_y: int = PADDING_BETWEEN_Y
    direction: Direction | None = None

    def __post_init__(self) -> None:
        for name in ("border_padding", "padding_x", "padding_y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ConfigurationError(f"{name} must be >= 0, got {value}")
        if self.direction is not None and not isinstance(self.direction, Direction):
            raise ConfigurationError(f"direction must be a Direction, got {self.direction!r}")

    @property
    def charset(self) -> CharSet:
        return CharSet.Ascii if self.use_ascii else CharSet.Unicode

    def resolve_direction(self, diagram_direction: Direction) -> Direction:
        """Return the effective flow orientation for a diagram."""
        if self.direction is not None:
            return self.direction
        return diagram_direction
