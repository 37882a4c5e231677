from dataclasses import dataclass, replace

from dotgraph.attributes import Attribute


def _freeze(instance, *names: str) -> None:
    for name in names:
        object.__setattr__(instance, name, tuple(getattr(instance, name)))


@dataclass(slots=True, frozen=True)
class StrID:
    value: str


@dataclass(slots=True, frozen=True)
class NumID:
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))


@dataclass(slots=True, frozen=True)
class QuotedID:
    value: str


@dataclass(slots=True, frozen=True)
class HtmlID:
    value: str


GraphID = StrID | NumID | QuotedID | HtmlID


@dataclass(slots=True, frozen=True)
class Node:
    id: int
    attrs: tuple[Attribute, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "attrs")


@dataclass(slots=True, frozen=True)
class Cluster:
    """A named group of nodes and nested clusters, printed as a subgraph.

    Clusters are only ever built programmatically; the parser does not read
    ``subgraph cluster_...`` blocks back in.
    """

    id: str
    attrs: tuple[Attribute, ...] = ()
    nodes: tuple["Node | Cluster", ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "attrs", "nodes")


DotNode = Node | Cluster


@dataclass(slots=True, frozen=True)
class Edge:
    head: int
    tail: int
    attrs: tuple[Attribute, ...] = ()
    directed: bool = True

    def __post_init__(self) -> None:
        _freeze(self, "attrs")


@dataclass(slots=True, frozen=True)
class Graph:
    nodes: tuple[DotNode, ...] = ()
    edges: tuple[Edge, ...] = ()
    graph_attrs: tuple[Attribute, ...] = ()
    strict: bool = False
    directed: bool = True
    graph_id: GraphID | None = None

    def __post_init__(self) -> None:
        _freeze(self, "nodes", "edges", "graph_attrs")


def make_strict(graph: Graph) -> Graph:
    """Return a copy of ``graph`` flagged as strict (no multi-edges)."""
    return replace(graph, strict=True)


def set_id(graph: Graph, graph_id: GraphID) -> Graph:
    return replace(graph, graph_id=graph_id)
