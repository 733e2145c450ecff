"""Parsed diagram data handed from the parser to the layout pipeline.

A Diagram maps every node name to the ordered list of edge records whose
parent it is. A name with an empty list is a standalone node.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gridflow.types import Direction


@dataclass
class TextNode:
    name: str
    style_class: str = ""


@dataclass
class TextEdge:
    parent: TextNode
    child: TextNode
    label: str = ""


@dataclass
class StyleClass:
    name: str
    styles: dict[str, str] = field(default_factory=dict)


@dataclass
class Diagram:
    direction: Direction = field(default_factory=Direction.default)
    data: dict[str, list[TextEdge]] = field(default_factory=dict)
    style_classes: dict[str, StyleClass] = field(default_factory=dict)

    def add_node(self, node: TextNode) -> None:
        """Declare a node, keeping any edges already recorded for it."""
        self.data.setdefault(node.name, [])

    def add_edge(self, edge: TextEdge) -> None:
        """Record an edge under its parent and make sure the child exists."""
        self.data.setdefault(edge.parent.name, []).append(edge)
        self.data.setdefault(edge.child.name, [])
