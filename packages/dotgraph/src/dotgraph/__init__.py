from dotgraph.attributes import HTML, Attributes, Literal, String
from dotgraph.constants import ClusterMode, DirType, EdgeType, GraphType, Key, Shape, Splines
from dotgraph.edge import Edge
from dotgraph.errors import (
    ConfigurationError,
    DotGraphError,
    GraphWithoutGeneratorError,
    NonSubgraphWithParentError,
    RootClusterError,
    SubgraphWithoutParentError,
    TokenizeError,
    WriteError,
)
from dotgraph.generators import IDGenerator, RandomIDGenerator
from dotgraph.graph import Graph, new_graph, new_graph_with_options
from dotgraph.node import Node
from dotgraph.options import GraphOptions

__version__ = "0.1.0"

__all__ = [
    "Attributes",
    "ClusterMode",
    "ConfigurationError",
    "DirType",
    "DotGraphError",
    "Edge",
    "EdgeType",
    "Graph",
    "GraphOptions",
    "GraphType",
    "GraphWithoutGeneratorError",
    "HTML",
    "IDGenerator",
    "Key",
    "Literal",
    "Node",
    "NonSubgraphWithParentError",
    "RandomIDGenerator",
    "RootClusterError",
    "Shape",
    "Splines",
    "String",
    "SubgraphWithoutParentError",
    "TokenizeError",
    "WriteError",
    "new_graph",
    "new_graph_with_options",
]
