from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from dotgraph.constants import CLUSTER_PREFIX, GENERATED_ID, GraphType
from dotgraph.generators import IDGenerator, RandomIDGenerator

if TYPE_CHECKING:
    from dotgraph.edge import Edge
    from dotgraph.node import Node

NodeInitializer = Callable[["Node"], None]
EdgeInitializer = Callable[["Edge"], None]

_UNSET = object()


def normalize_cluster_id(graph_id: str, cluster: bool) -> str:
    if graph_id in ("", GENERATED_ID):
        return graph_id
    if cluster:
        if graph_id.startswith(CLUSTER_PREFIX):
            return graph_id
        return CLUSTER_PREFIX + graph_id
    if graph_id.startswith(CLUSTER_PREFIX):
        return graph_id[len(CLUSTER_PREFIX):]
    return graph_id


class GraphOptions:
    """Construction options for a graph or subgraph.

    ``id`` and ``cluster`` stay consistent: a cluster id always carries the
    ``cluster_`` prefix and a non-cluster id never does, whichever of the two
    is assigned last.
    """

    __slots__ = (
        "_id",
        "_cluster",
        "kind",
        "strict",
        "node_initializer",
        "edge_initializer",
        "generator",
    )

    def __init__(
        self,
        id: str = "",
        kind: GraphType | str = GraphType.DIRECTED,
        strict: bool = False,
        cluster: bool = False,
        node_initializer: NodeInitializer | None = None,
        edge_initializer: EdgeInitializer | None = None,
        generator: IDGenerator | None | object = _UNSET,
    ):
        self._cluster = cluster
        self._id = normalize_cluster_id(id, cluster)
        self.kind = GraphType(kind)
        self.strict = strict
        self.node_initializer = node_initializer
        self.edge_initializer = edge_initializer
        self.generator: IDGenerator | None = (
            RandomIDGenerator() if generator is _UNSET else generator  # type: ignore[assignment]
        )

    @property
    def id(self) -> str:
        """Carries the ``cluster_`` prefix exactly when ``cluster`` is set; a
        prefixed id assigned without ``cluster`` is stripped."""
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        self._id = normalize_cluster_id(value, self._cluster)

    @property
    def cluster(self) -> bool:
        return self._cluster

    @cluster.setter
    def cluster(self, value: bool) -> None:
        self._cluster = value
        self._id = normalize_cluster_id(self._id, value)

    def copy(self, **overrides) -> GraphOptions:
        options = GraphOptions(
            id=self._id,
            kind=self.kind,
            strict=self.strict,
            cluster=self._cluster,
            node_initializer=self.node_initializer,
            edge_initializer=self.edge_initializer,
            generator=self.generator,
        )
        for name, value in overrides.items():
            if name not in ("id", "kind", "strict", "cluster", "node_initializer",
                            "edge_initializer", "generator"):
                raise TypeError(f"unknown graph option {name!r}")
            setattr(options, name, GraphType(value) if name == "kind" else value)
        return options

    def __repr__(self) -> str:
        return (
            f"GraphOptions(id={self._id!r}, kind={self.kind.value!r}, strict={self.strict}, "
            f"cluster={self._cluster})"
        )
