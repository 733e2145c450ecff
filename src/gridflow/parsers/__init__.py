"""Parser registry — detect the diagram type and dispatch to the right parser."""

from __future__ import annotations

from gridflow.errors import InputError
from gridflow.parsers.base import Parser
from gridflow.parsers.flowchart import FlowchartParser
from gridflow.syntax.types import Diagram


def detect_type(src: str) -> str:
    """Detect the diagram type from source text. Returns 'flowchart' etc."""
    for line in src.splitlines():
        line = line.strip()
        if not line or line.startswith("%%"):
            continue
        lower = line.lower()
        if lower.startswith("flowchart") or lower.startswith("graph"):
            return "flowchart"
        break
    return "flowchart"  # default


_PARSERS: dict[str, type[Parser]] = {
    "flowchart": FlowchartParser,
}


def parse(src: str) -> Diagram:
    """Detect the diagram type and parse to a Diagram."""
    diagram_type = detect_type(src)
    parser_cls = _PARSERS.get(diagram_type)
    if parser_cls is None:
        raise InputError(f"unsupported diagram type: {diagram_type}")
    return parser_cls().parse(src)


__all__ = ["FlowchartParser", "Parser", "detect_type", "parse"]
