"""Flowchart parser — line-oriented regex matching.

Parses the Mermaid flowchart subset gridflow renders into a Diagram:

    graph LR            (or TD / TB, ``flowchart`` works too)
    A --> B --> C
    A -->|label| B
    A & B --> C & D
    classDef hot fill:#f96,stroke:#333
    A:::hot
    Standalone
"""

from __future__ import annotations

import logging
import re

from gridflow.errors import InputError
from gridflow.syntax.types import Diagram, StyleClass, TextEdge, TextNode
from gridflow.types import Direction

logger = logging.getLogger(__name__)

# ─── Patterns ────────────────────────────────────────────────────────────────

_COMMENT_RE = re.compile(r"%%.*$")
_HEADER_RE = re.compile(r"^(?:graph|flowchart)\s+(\w+)$")
_ARROW_RE = re.compile(r"\s+-->(?:\|([^|]*)\|)?\s+")
_GROUP_RE = re.compile(r"\s+&\s+")
_CLASS_DEF_RE = re.compile(r"^classDef\s+(\S+)\s+(.+)$")
_STYLED_NODE_RE = re.compile(r"^(.+):::(.+)$")


def _clean_lines(src: str) -> list[str]:
    lines = []
    for raw in src.splitlines():
        line = _COMMENT_RE.sub("", raw).strip()
        if line:
            lines.append(line)
    return lines


def parse_node(text: str) -> TextNode:
    """Parse ``name`` or ``name:::class``."""
    text = text.strip()
    m = _STYLED_NODE_RE.match(text)
    if m:
        return TextNode(name=m.group(1).strip(), style_class=m.group(2).strip())
    return TextNode(name=text)


def parse_style_class(name: str, styles: str) -> StyleClass:
    """Parse ``key:value,key:value`` style pairs; malformed pairs are dropped."""
    parsed: dict[str, str] = {}
    for style in styles.split(","):
        kv = style.split(":")
        if len(kv) >= 2:
            parsed[kv[0].strip()] = kv[1].strip()
    return StyleClass(name=name, styles=parsed)


def _parse_group(text: str) -> list[TextNode]:
    return [parse_node(part) for part in _GROUP_RE.split(text.strip())]


class FlowchartParser:
    """Flowchart/graph diagram parser."""

    def parse(self, src: str) -> Diagram:
        lines = _clean_lines(src)
        if not lines:
            raise InputError("diagram source is empty")

        diagram = Diagram(direction=self._parse_header(lines[0]))
        for line in lines[1:]:
            self._parse_line(line, diagram)
        return diagram

    def _parse_header(self, line: str) -> Direction:
        m = _HEADER_RE.match(line)
        if m is None:
            raise InputError(f"first line should declare the graph, e.g. 'graph LR'; got {line!r}")
        try:
            return Direction.from_str(m.group(1))
        except ValueError as e:
            raise InputError(str(e)) from e

    def _parse_line(self, line: str, diagram: Diagram) -> None:
        m = _CLASS_DEF_RE.match(line)
        if m:
            style_class = parse_style_class(m.group(1), m.group(2))
            diagram.style_classes[style_class.name] = style_class
            return

        # re.split with one capture group alternates node groups and labels.
        parts = _ARROW_RE.split(line)
        groups = [_parse_group(text) for text in parts[0::2]]
        labels = [(label or "").strip() for label in parts[1::2]]

        if len(groups) == 1:
            logger.debug("no arrow on line %r, declaring standalone nodes", line)
            for node in groups[0]:
                diagram.add_node(node)
            return

        for lhs, rhs, label in zip(groups, groups[1:], labels):
            for parent in lhs:
                for child in rhs:
                    logger.debug("edge %r -> %r label=%r", parent.name, child.name, label)
                    diagram.add_edge(TextEdge(parent=parent, child=child, label=label))
