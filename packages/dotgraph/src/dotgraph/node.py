from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from dotgraph.attributes import Attributes, Styleable
from dotgraph.constants import Key, Shape
from dotgraph.sink import Sink, SinkWriter, writer_for

if TYPE_CHECKING:
    from dotgraph.edge import Edge
    from dotgraph.graph import Graph


class Node(Styleable):
    __slots__ = ("id", "graph")

    def __init__(self, id: str, graph: Graph):
        super().__init__()
        self.id = id
        self.graph = graph

    def edge(self, head: Node) -> Edge:
        return self.graph.edge(self, head)

    def edge_with_attributes(self, head: Node, attributes: Attributes | Mapping | None) -> Edge:
        return self.graph.edge_with_attributes(self, head, attributes)

    def edges_to(self, head: Node) -> list[Edge]:
        return self.graph.find_edges(self, head)

    def label(self, text: str) -> Node:
        self.attributes.set_string(Key.LABEL, text)
        return self

    def box(self) -> Node:
        self.attributes.set_string(Key.SHAPE, Shape.BOX.value)
        return self

    def write_to(self, sink: Sink | SinkWriter) -> int:
        writer = writer_for(sink)
        start = writer.written
        self._write(writer)
        return writer.written - start

    def _write(self, writer: SinkWriter) -> None:
        writer.write(f'"{self.id}"')
        self.attributes.write_to(writer)
        writer.write(";")

    def __repr__(self) -> str:
        return f"Node(id={self.id!r})"
