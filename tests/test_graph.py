"""Tests for gridflow.ir.graph — GraphIR construction and topology queries."""

import networkx as nx
import pytest

from gridflow.errors import InputError
from gridflow.ir.graph import EdgeData, GraphIR, NodeData
from gridflow.syntax.types import Diagram, StyleClass, TextEdge, TextNode
from gridflow.types import Direction


def _diagram(*edges: tuple[str, str], direction: Direction = Direction.LR, nodes: tuple[str, ...] = ()) -> Diagram:
    d = Diagram(direction=direction)
    for name in nodes:
        d.add_node(TextNode(name))
    for parent, child in edges:
        d.add_edge(TextEdge(parent=TextNode(parent), child=TextNode(child)))
    return d


class TestBasicConstruction:
    def test_single_node(self):
        gir = GraphIR.from_diagram(_diagram(nodes=("A",)))
        assert gir.node_count() == 1
        assert gir.edge_count() == 0

    def test_direction_preserved(self):
        gir = GraphIR.from_diagram(_diagram(("A", "B"), direction=Direction.TD))
        assert gir.direction == Direction.TD

    def test_edge_creates_nodes(self):
        gir = GraphIR.from_diagram(_diagram(("A", "B")))
        assert gir.node_count() == 2
        assert gir.edge_count() == 1
        assert isinstance(gir.digraph, nx.MultiDiGraph)

    def test_node_data_stored(self):
        gir = GraphIR.from_diagram(_diagram(("A", "B")))
        data: NodeData = gir.node_data("B")
        assert data.name == "B"
        assert data.index == 1
        assert data.style_class_name == ""

    def test_edge_data_stored(self):
        d = Diagram()
        d.add_edge(TextEdge(parent=TextNode("A"), child=TextNode("B"), label="go"))
        gir = GraphIR.from_diagram(d)
        [(src, tgt, data)] = gir.edges()
        assert (src, tgt) == ("A", "B")
        assert data == EdgeData(label="go", seq=0)

    def test_style_classes_copied(self):
        d = _diagram(("A", "B"))
        d.style_classes["hot"] = StyleClass("hot", {"fill": "red"})
        gir = GraphIR.from_diagram(d)
        assert gir.style_classes["hot"].styles == {"fill": "red"}


class TestOrdering:
    def test_discovery_order(self):
        gir = GraphIR.from_diagram(_diagram(("C", "A"), ("B", "C")))
        assert gir.node_names() == ["C", "A", "B"]
        assert [gir.node_data(n).index for n in gir.node_names()] == [0, 1, 2]

    def test_edges_in_record_order(self):
        gir = GraphIR.from_diagram(_diagram(("A", "C"), ("B", "A"), ("A", "B")))
        assert [(s, t) for s, t, _ in gir.edges()] == [("A", "C"), ("A", "B"), ("B", "A")]

    def test_children_in_record_order(self):
        gir = GraphIR.from_diagram(_diagram(("A", "C"), ("A", "B"), ("A", "C")))
        assert gir.children("A") == ["C", "B", "C"]


class TestMultiEdges:
    def test_parallel_edges_kept(self):
        gir = GraphIR.from_diagram(_diagram(("A", "B"), ("A", "B")))
        assert gir.edge_count() == 2
        assert gir.children("A") == ["B", "B"]

    def test_self_loops(self):
        gir = GraphIR.from_diagram(_diagram(("A", "A")))
        assert gir.has_self_loops()
        assert gir.node_count() == 1
        assert not GraphIR.from_diagram(_diagram(("A", "B"))).has_self_loops()


class TestStyles:
    def test_parent_style_from_first_record_naming_one(self):
        d = Diagram()
        d.add_edge(TextEdge(parent=TextNode("A"), child=TextNode("B")))
        d.add_edge(TextEdge(parent=TextNode("A", "hot"), child=TextNode("C")))
        d.add_edge(TextEdge(parent=TextNode("A", "cold"), child=TextNode("D")))
        gir = GraphIR.from_diagram(d)
        assert gir.node_data("A").style_class_name == "hot"

    def test_child_style(self):
        d = Diagram()
        d.add_edge(TextEdge(parent=TextNode("A"), child=TextNode("B", "warm")))
        assert GraphIR.from_diagram(d).node_data("B").style_class_name == "warm"


class TestRejectedInput:
    def test_empty_diagram(self):
        with pytest.raises(InputError, match="no nodes"):
            GraphIR.from_diagram(Diagram())

    def test_unknown_direction(self):
        d = _diagram(("A", "B"))
        d.direction = "RL"
        with pytest.raises(InputError):
            GraphIR.from_diagram(d)

    def test_record_filed_under_wrong_parent(self):
        d = Diagram()
        d.data["A"] = [TextEdge(parent=TextNode("B"), child=TextNode("C"))]
        with pytest.raises(InputError):
            GraphIR.from_diagram(d)
