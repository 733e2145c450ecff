"""Intermediate representation: GraphIR."""

from gridflow.ir.graph import EdgeData, GraphIR, NodeData

__all__ = [
    "EdgeData",
    "GraphIR",
    "NodeData",
]
