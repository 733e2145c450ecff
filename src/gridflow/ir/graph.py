"""Graph IR — converts a parsed Diagram into a networkx MultiDiGraph.

This module owns the canonical graph data structure used by the layout
and rendering phases. Node insertion order is discovery order (a record's
parent, then each new child) and is the stable node index downstream.
Parallel edges and self-loops are kept.
"""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from gridflow.errors import InputError
from gridflow.syntax.types import Diagram, StyleClass
from gridflow.types import Direction


@dataclass
class NodeData:
    name: str
    index: int
    style_class_name: str = ""


@dataclass
class EdgeData:
    label: str
    seq: int


class GraphIR:
    """The graph intermediate representation built from a Diagram.

    Wraps a networkx MultiDiGraph and exposes helpers for topology queries.
    """

    def __init__(
        self,
        digraph: nx.MultiDiGraph,
        direction: Direction,
        style_classes: dict[str, StyleClass],
    ) -> None:
        self.digraph = digraph
        self.direction = direction
        self.style_classes = style_classes

    @classmethod
    def from_diagram(cls, diagram: Diagram) -> GraphIR:
        """Build a GraphIR from a Diagram, rejecting malformed input."""
        if not isinstance(diagram.direction, Direction):
            raise InputError(f"unknown flow orientation {diagram.direction!r}; use LR or TD")
        if not diagram.data:
            raise InputError("diagram has no nodes")

        digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        seq = 0
        for name, records in diagram.data.items():
            _ensure_node(digraph, name)
            for record in records:
                if record.parent.name != name:
                    raise InputError(f"edge record {record.parent.name!r} -> {record.child.name!r} filed under {name!r}")
                _ensure_node(digraph, record.child.name, record.child.style_class)
                _set_style_if_unset(digraph, name, record.parent.style_class)
                digraph.add_edge(name, record.child.name, data=EdgeData(label=record.label, seq=seq))
                seq += 1

        return cls(digraph=digraph, direction=diagram.direction, style_classes=dict(diagram.style_classes))

    def node_names(self) -> list[str]:
        return list(self.digraph.nodes)

    def node_data(self, name: str) -> NodeData:
        return self.digraph.nodes[name]["data"]

    def edges(self) -> list[tuple[str, str, EdgeData]]:
        """All edges in record order, parallel edges and self-loops included."""
        edges = [(src, tgt, attrs["data"]) for src, tgt, attrs in self.digraph.edges(data=True)]
        edges.sort(key=lambda e: e[2].seq)
        return edges

    def children(self, name: str) -> list[str]:
        """Edge targets of a node, in record order."""
        out = [(attrs["data"].seq, tgt) for _, tgt, attrs in self.digraph.out_edges(name, data=True)]
        out.sort()
        return [tgt for _, tgt in out]

    def node_count(self) -> int:
        return self.digraph.number_of_nodes()

    def edge_count(self) -> int:
        return self.digraph.number_of_edges()

    def has_self_loops(self) -> bool:
        return nx.number_of_selfloops(self.digraph) > 0


def _ensure_node(digraph: nx.MultiDiGraph, name: str, style_class: str = "") -> None:
    if name not in digraph:
        data = NodeData(name=name, index=digraph.number_of_nodes(), style_class_name=style_class)
        digraph.add_node(name, data=data)
    else:
        _set_style_if_unset(digraph, name, style_class)


def _set_style_if_unset(digraph: nx.MultiDiGraph, name: str, style_class: str) -> None:
    data: NodeData = digraph.nodes[name]["data"]
    if style_class and not data.style_class_name:
        data.style_class_name = style_class
