from __future__ import annotations

import io
import logging
from collections.abc import Callable, Mapping
from typing import Any

from dotgraph.attributes import Attributes, Literal, Styleable
from dotgraph.constants import GENERATED_ID, GraphType, Key
from dotgraph.edge import Edge
from dotgraph.errors import (
    GraphWithoutGeneratorError,
    NonSubgraphWithParentError,
    RootClusterError,
    SubgraphWithoutParentError,
)
from dotgraph.generators import IDGenerator
from dotgraph.node import Node
from dotgraph.options import EdgeInitializer, GraphOptions, NodeInitializer, normalize_cluster_id
from dotgraph.sink import Sink, SinkWriter, writer_for

logger = logging.getLogger(__name__)

_SAME_RANK = Attributes({Key.RANK: Literal("same")})


class Graph(Styleable):
    __slots__ = (
        "id",
        "kind",
        "strict",
        "cluster",
        "generator",
        "parent",
        "node_initializer",
        "edge_initializer",
        "_nodes",
        "_edges",
        "_subgraphs",
        "_anonymous_subgraphs",
        "_same_rank",
    )

    def __init__(self, options: GraphOptions, parent: Graph | None = None):
        if options.kind == GraphType.SUB and parent is None:
            raise SubgraphWithoutParentError()
        if options.kind != GraphType.SUB and parent is not None:
            raise NonSubgraphWithParentError(options.kind.value)
        if options.cluster and parent is None:
            raise RootClusterError()
        if options.generator is None:
            raise GraphWithoutGeneratorError()

        super().__init__()
        self.kind = options.kind
        self.strict = options.strict and options.kind != GraphType.SUB
        self.cluster = options.cluster
        self.generator: IDGenerator = options.generator
        self.parent = parent
        self.node_initializer: NodeInitializer | None = options.node_initializer
        self.edge_initializer: EdgeInitializer | None = options.edge_initializer

        graph_id = options.id
        if graph_id == GENERATED_ID:
            graph_id = normalize_cluster_id(self.generator.next(), options.cluster)
        self.id = graph_id

        self._nodes: dict[str, Node] = {}
        self._edges: dict[str, list[Edge]] = {}
        self._subgraphs: dict[str, Graph] = {}
        self._anonymous_subgraphs: list[Graph] = []
        self._same_rank: dict[str, list[Node]] = {}

    # --- Structure ---

    def root(self) -> Graph:
        graph = self
        while graph.parent is not None:
            graph = graph.parent
        return graph

    def is_strict(self) -> bool:
        return self.strict

    def label(self, text: str) -> Graph:
        self.attributes.set_string(Key.LABEL, text)
        return self

    def subgraph(self, **options: Any) -> Graph:
        """Create a child graph and register it under its final id."""
        base = GraphOptions(kind=GraphType.SUB, generator=self.generator)
        return self.subgraph_with_options(base.copy(**options))

    def subgraph_with_options(self, options: GraphOptions) -> Graph:
        """Create a child from ``options``; the caller's object is not modified.

        The child always uses this graph's generator and inherits its
        initializers where ``options`` leaves them unset.
        """
        options = options.copy(generator=self.generator)
        if options.node_initializer is None:
            options.node_initializer = self.node_initializer
        if options.edge_initializer is None:
            options.edge_initializer = self.edge_initializer
        child = Graph(options, parent=self)
        if not child.id:
            self._anonymous_subgraphs.append(child)
        else:
            if child.id in self._subgraphs:
                logger.warning("subgraph %r replaces an existing subgraph of %r", child.id, self.id)
            self._subgraphs[child.id] = child
        logger.debug("created subgraph %r in %r", child.id, self.id)
        return child

    def find_subgraph(self, id: str) -> Graph | None:
        found = self._subgraphs.get(id)
        if found is None and self.parent is not None:
            return self.parent.find_subgraph(id)
        return found

    def subgraphs(self) -> list[Graph]:
        """Immediate children in output order."""
        return self._anonymous_subgraphs + [self._subgraphs[key] for key in sorted(self._subgraphs)]

    def has_subgraphs(self) -> bool:
        return bool(self._subgraphs or self._anonymous_subgraphs)

    # --- Nodes ---

    def find_node(self, id: str) -> Node | None:
        found = self._nodes.get(id)
        if found is None and self.parent is not None:
            return self.parent.find_node(id)
        return found

    def node(self, id: str = "") -> Node:
        found = self.find_node(id) if id else None
        if found is not None:
            return found
        if not id:
            id = self.generator.next()
        node = Node(id, self)
        if self.node_initializer is not None:
            self.node_initializer(node)
        self._nodes[id] = node
        return node

    def has_nodes(self) -> bool:
        return bool(self._nodes)

    def visit_nodes(self, callback: Callable[[Node], bool | None]) -> bool:
        """Visit local nodes, then descend into subgraphs.

        Returns True once ``callback`` returns a truthy value, which stops the
        whole traversal.
        """
        for key in sorted(self._nodes):
            if callback(self._nodes[key]):
                return True
        for subgraph in self.subgraphs():
            if subgraph.visit_nodes(callback):
                return True
        return False

    def find_node_by_id(self, id: str) -> Node | None:
        found: list[Node] = []

        def match(node: Node) -> bool:
            if node.id == id:
                found.append(node)
                return True
            return False

        self.visit_nodes(match)
        return found[0] if found else None

    def find_nodes(self) -> list[Node]:
        nodes: list[Node] = []
        self.visit_nodes(lambda node: nodes.append(node))
        return nodes

    def add_to_same_rank(self, group: str, *nodes: Node) -> None:
        self._same_rank.setdefault(group, []).extend(nodes)

    def has_same_rank_nodes(self) -> bool:
        return bool(self._same_rank)

    # --- Edges ---

    def edge(self, tail: Node, head: Node) -> Edge:
        return self.edge_with_attributes(tail, head, None)

    def edge_with_attributes(
        self, tail: Node, head: Node, attributes: Attributes | Mapping | None
    ) -> Edge:
        edge = Edge(tail, head, self)
        edge.attributes = Attributes.from_reader(attributes)
        if self.edge_initializer is not None:
            self.edge_initializer(edge)
        self._edges.setdefault(tail.id, []).append(edge)
        return edge

    def find_edges(self, tail: Node, head: Node) -> list[Edge]:
        return [edge for edge in self._edges.get(tail.id, []) if edge.head.id == head.id]

    def has_edges(self) -> bool:
        return bool(self._edges)

    # --- Output ---

    def write_to(self, sink: Sink | SinkWriter) -> int:
        writer = writer_for(sink)
        start = writer.written
        self._write(writer)
        return writer.written - start

    def _write(self, writer: SinkWriter) -> None:
        if self.strict:
            writer.write("strict ")
        writer.write(self.kind.value)
        if self.id:
            writer.write(f' "{self.id}"')
        writer.write(" {")

        if not self.attributes.is_empty():
            writer.write("graph ")
            self.attributes.write_to(writer)
            writer.write(";")

        for subgraph in self.subgraphs():
            subgraph._write(writer)

        for key in sorted(self._nodes):
            self._nodes[key]._write(writer)

        for nodes in self._same_rank.values():
            writer.write("{")
            _SAME_RANK.write_to(writer, bracketed=False)
            for node in nodes:
                node._write(writer)
            writer.write("}")

        for key in sorted(self._edges):
            for edge in self._edges[key]:
                edge._write(writer)

        writer.write("}")

    def to_string(self) -> str:
        buffer = io.BytesIO()
        self.write_to(buffer)
        return buffer.getvalue().decode("utf-8")

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Graph(id={self.id!r}, kind={self.kind.value!r})"


def new_graph_with_options(options: GraphOptions) -> Graph:
    graph = Graph(options)
    logger.debug("created %s graph %r", graph.kind.value, graph.id)
    return graph


def new_graph(**options: Any) -> Graph:
    """Create a root graph; keyword arguments are :class:`GraphOptions` fields."""
    return new_graph_with_options(GraphOptions(**options))
