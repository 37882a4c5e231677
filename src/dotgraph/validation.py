from dataclasses import dataclass, field

from dotgraph.attributes import (
    Attribute,
    used_by_clusters,
    used_by_edges,
    used_by_graphs,
    used_by_nodes,
)
from dotgraph.parser.ast import Cluster, DotNode, Edge, Graph, Node


@dataclass(slots=True)
class ValidationResult:
    graph_attrs: list[Attribute] = field(default_factory=list)
    nodes: list[tuple[DotNode, Attribute]] = field(default_factory=list)
    edges: list[tuple[Edge, Attribute]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not (self.graph_attrs or self.nodes or self.edges)

    def messages(self) -> list[str]:
        messages = [f"graph attribute not allowed: {attr.name}" for attr in self.graph_attrs]
        for node, attr in self.nodes:
            if isinstance(node, Cluster):
                messages.append(f"cluster {node.id} attribute not allowed: {attr.name}")
            else:
                messages.append(f"node {node.id} attribute not allowed: {attr.name}")
        for edge, attr in self.edges:
            op = "->" if edge.directed else "--"
            messages.append(
                f"edge {edge.head} {op} {edge.tail} attribute not allowed: {attr.name}"
            )
        return messages


def validate_graph(graph: Graph) -> ValidationResult:
    graph_attrs, nodes, edges = invalid_attributes(graph)
    return ValidationResult(graph_attrs=graph_attrs, nodes=nodes, edges=edges)


def invalid_attributes(
    graph: Graph,
) -> tuple[list[Attribute], list[tuple[DotNode, Attribute]], list[tuple[Edge, Attribute]]]:
    """Every attribute used outside its domain, grouped by the entity carrying it."""
    graph_attrs = [attr for attr in graph.graph_attrs if not used_by_graphs(attr)]
    nodes = [pair for node in graph.nodes for pair in _invalid_node_attributes(node)]
    edges = [
        (edge, attr) for edge in graph.edges for attr in edge.attrs if not used_by_edges(attr)
    ]
    return graph_attrs, nodes, edges


def is_valid_graph(graph: Graph) -> bool:
    return validate_graph(graph).ok


def _invalid_node_attributes(node: DotNode) -> list[tuple[DotNode, Attribute]]:
    if isinstance(node, Node):
        return [(node, attr) for attr in node.attrs if not used_by_nodes(attr)]

    if isinstance(node, Cluster):
        own = [(node, attr) for attr in node.attrs if not used_by_clusters(attr)]
        children = [pair for child in node.nodes for pair in _invalid_node_attributes(child)]
        return own + children

    raise TypeError(f"Unsupported node: {node!r}")
