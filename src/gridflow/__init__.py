"""gridflow: flowchart text to ASCII/Unicode box-drawing diagrams on a character grid."""

from __future__ import annotations

from gridflow.config import BOX_BORDER_PADDING, PADDING_BETWEEN_X, PADDING_BETWEEN_Y, RenderConfig
from gridflow.errors import ConfigurationError, DiagramError, InputError, RoutingError
from gridflow.ir.graph import GraphIR
from gridflow.layout.engine import full_layout
from gridflow.parsers import parse
from gridflow.renderers.ascii import AsciiRenderer
from gridflow.renderers.base import Renderer
from gridflow.syntax.types import Diagram
from gridflow.types import Direction


def render_diagram(diagram: Diagram, config: RenderConfig | None = None) -> str:
    """Lay out and draw an already-parsed Diagram.

    Raises:
        InputError: If the diagram is empty or malformed.
        RoutingError: If an edge cannot be routed.
    """
    gir = GraphIR.from_diagram(diagram)
    g = full_layout(gir, config)
    renderer: Renderer = AsciiRenderer()
    return renderer.render(g)


def render_dsl(
    src: str,
    use_ascii: bool = False,
    border_padding: int = BOX_BORDER_PADDING,
    padding_x: int = PADDING_BETWEEN_X,
    padding_y: int = PADDING_BETWEEN_Y,
    direction: str | None = None,
) -> str:
    """Parse a flowchart string and render it to ASCII/Unicode art.

    Args:
        src: Flowchart source, starting with a ``graph LR`` / ``graph TD`` header.
        use_ascii: True for plain ASCII; False for Unicode box-drawing characters.
        border_padding: Spaces between a node's label and its border.
        padding_x: Width of the gap between node columns.
        padding_y: Height of the gap between node rows.
        direction: Override the header's orientation ('LR', 'TD', 'TB'); None keeps it.

    Returns:
        The rendered text, rows joined by newlines, without a trailing newline.

    Raises:
        ValueError: If the input cannot be parsed or an option is invalid.
        RoutingError: If an edge cannot be routed.
    """
    override = Direction.from_str(direction) if direction is not None else None
    config = RenderConfig(
        use_ascii=use_ascii,
        border_padding=border_padding,
        padding_x=padding_x,
        padding_y=padding_y,
        direction=override,
    )
    return render_diagram(parse(src), config)


__all__ = [
    "ConfigurationError",
    "Diagram",
    "DiagramError",
    "Direction",
    "InputError",
    "RenderConfig",
    "RoutingError",
    "render_diagram",
    "render_dsl",
]
