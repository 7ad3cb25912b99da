import logging
from collections.abc import Callable

from dotgraph.constants import Key
from dotgraph.generators import IDGenerator
from dotgraph.graph import Graph, new_graph

logger = logging.getLogger(__name__)


def cluster_sample(generator: IDGenerator | None = None) -> Graph:
    """An outside node chained through the nodes of two clusters and back."""
    options = {} if generator is None else {"generator": generator}
    root = new_graph(**options)
    outside = root.node("Outside")

    logger.debug("creating cluster subgraph A")
    cluster_a = root.subgraph(id="A", cluster=True)
    cluster_a.set_attribute_string(Key.LABEL, "Cluster A")
    one = cluster_a.node("one")
    two = cluster_a.node("two")

    logger.debug("creating cluster subgraph B")
    cluster_b = root.subgraph(id="B", cluster=True)
    cluster_b.set_attribute_string(Key.LABEL, "Cluster B")
    three = cluster_b.node("three")
    four = cluster_b.node("four")

    outside.edge(four).edge(one).edge(two).edge(three).edge(outside)
    return root


def basic_sample(generator: IDGenerator | None = None) -> Graph:
    options = {} if generator is None else {"generator": generator}
    root = new_graph(**options)
    root.node("n1").edge(root.node("n2")).label("uses")
    return root


SAMPLES: dict[str, Callable[..., Graph]] = {
    "cluster": cluster_sample,
    "basic": basic_sample,
}


def build_sample(name: str, generator: IDGenerator | None = None) -> Graph:
    try:
        builder = SAMPLES[name]
    except KeyError:
        raise ValueError(f"Unknown sample {name!r}") from None
    return builder(generator)
