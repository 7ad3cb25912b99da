from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from dotgraph.attributes import Attributes, Styleable
from dotgraph.constants import EdgeType, GraphType, Key
from dotgraph.sink import Sink, SinkWriter, writer_for

if TYPE_CHECKING:
    from dotgraph.graph import Graph
    from dotgraph.node import Node


class Edge(Styleable):
    """Connection from ``tail`` to ``head``, owned by the graph it was created on."""

    __slots__ = ("tail", "head", "graph")

    def __init__(self, tail: Node, head: Node, graph: Graph):
        super().__init__()
        self.tail = tail
        self.head = head
        self.graph = graph

    def edge(self, head: Node) -> Edge:
        """Continue the chain from this edge's head."""
        return self.graph.edge(self.head, head)

    def edge_with_attributes(self, head: Node, attributes: Attributes | Mapping | None) -> Edge:
        return self.graph.edge_with_attributes(self.head, head, attributes)

    def edges_to(self, head: Node) -> list[Edge]:
        return self.graph.find_edges(self.head, head)

    def label(self, text: str) -> Edge:
        self.attributes.set_string(Key.LABEL, text)
        return self

    def solid(self) -> Edge:
        return self._style("solid")

    def bold(self) -> Edge:
        return self._style("bold")

    def dashed(self) -> Edge:
        return self._style("dashed")

    def dotted(self) -> Edge:
        return self._style("dotted")

    def _style(self, style: str) -> Edge:
        self.attributes.set_string(Key.STYLE, style)
        return self

    def glyph(self) -> str:
        if self.graph.root().kind == GraphType.DIRECTED:
            return EdgeType.DIRECTED.value
        return EdgeType.UNDIRECTED.value

    def write_to(self, sink: Sink | SinkWriter) -> int:
        writer = writer_for(sink)
        start = writer.written
        self._write(writer)
        return writer.written - start

    def _write(self, writer: SinkWriter) -> None:
        writer.write(f'"{self.tail.id}"{self.glyph()}"{self.head.id}"')
        self.attributes.write_to(writer)
        writer.write(";")

    def __repr__(self) -> str:
        return f"Edge({self.tail.id!r} {self.glyph()} {self.head.id!r})"
