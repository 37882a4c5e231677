from dotgraph.attributes import (
    Attribute,
    EntityKind,
    used_by_clusters,
    used_by_edges,
    used_by_graphs,
    used_by_nodes,
)
from dotgraph.commands import (
    GraphvizCanvas,
    GraphvizCommand,
    GraphvizOutput,
    command_for,
    run_graphviz,
)
from dotgraph.config import RendererConfig
from dotgraph.errors import ConfigurationError, DotgraphError, DotParseError, InvalidGraphError
from dotgraph.parser.ast import (
    Cluster,
    Edge,
    Graph,
    HtmlID,
    Node,
    NumID,
    QuotedID,
    StrID,
    make_strict,
    set_id,
)
from dotgraph.parser.parser import parse_dot
from dotgraph.printer import print_dot
from dotgraph.runner import render
from dotgraph.validation import ValidationResult, invalid_attributes, is_valid_graph, validate_graph

__all__ = [
    "Attribute",
    "Cluster",
    "ConfigurationError",
    "DotParseError",
    "DotgraphError",
    "Edge",
    "EntityKind",
    "Graph",
    "GraphvizCanvas",
    "GraphvizCommand",
    "GraphvizOutput",
    "HtmlID",
    "InvalidGraphError",
    "Node",
    "NumID",
    "QuotedID",
    "RendererConfig",
    "StrID",
    "ValidationResult",
    "command_for",
    "invalid_attributes",
    "is_valid_graph",
    "make_strict",
    "parse_dot",
    "print_dot",
    "render",
    "run_graphviz",
    "set_id",
    "used_by_clusters",
    "used_by_edges",
    "used_by_graphs",
    "used_by_nodes",
    "validate_graph",
]
