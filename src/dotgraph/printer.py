"""Deterministic DOT rendering of a ``Graph``.

The output is what ``parse_dot`` reads back, except for clusters, which are
emitted as ``subgraph cluster_<id>`` blocks that the parser does not accept.
"""

import re
from collections.abc import Iterable

from dotgraph.attributes import Attribute, is_quoted
from dotgraph.parser.ast import (
    Cluster,
    DotNode,
    Edge,
    Graph,
    GraphID,
    HtmlID,
    Node,
    NumID,
    QuotedID,
    StrID,
)
from dotgraph.parser.parser import (
    DIRECTED_EDGE,
    DIRECTED_KEYWORD,
    UNDIRECTED_EDGE,
    UNDIRECTED_KEYWORD,
)

_BARE_VALUE = re.compile(r"[^\W\d]\w*|-?(?:\.\d+|\d+(?:\.\d*)?)(?:[eE][-+]?\d+)?")
_KEYWORDS = {"node", "edge", "graph", "digraph", "subgraph", "strict"}
_ESCAPE = re.compile(r'(\\*)("|\Z)')


def quote(text: str) -> str:
    """Double-quote ``text``; backslashes before a quote or the end are doubled."""
    return '"' + _ESCAPE.sub(_escape, text) + '"'


def _escape(match: re.Match) -> str:
    return match.group(1) * 2 + ('\\"' if match.group(2) else "")


def print_graph_id(graph_id: GraphID) -> str:
    if isinstance(graph_id, StrID):
        return graph_id.value
    if isinstance(graph_id, NumID):
        return repr(graph_id.value)
    if isinstance(graph_id, QuotedID):
        return quote(graph_id.value)
    if isinstance(graph_id, HtmlID):
        return f"<{graph_id.value}>"
    raise TypeError(f"Unsupported graph id: {graph_id!r}")


def print_value(attr: Attribute) -> str:
    value = attr.value
    if (
        not is_quoted(attr.name)
        and _BARE_VALUE.fullmatch(value)
        and value.lower() not in _KEYWORDS
    ):
        return value
    return quote(value)


def print_attributes(attrs: Iterable[Attribute]) -> str:
    return "[" + ",".join(f"{attr.name}={print_value(attr)}" for attr in attrs) + "]"


def print_node(node: DotNode) -> list[str]:
    """Lines for a node or cluster, without the indentation of its parent."""
    if isinstance(node, Node):
        if not node.attrs:
            return [f"{node.id};"]
        return [f"{node.id} {print_attributes(node.attrs)};"]

    if isinstance(node, Cluster):
        inner: list[str] = []
        if node.attrs:
            inner.append(f"{UNDIRECTED_KEYWORD} {print_attributes(node.attrs)};")
        for child in node.nodes:
            inner.extend(print_node(child))
        return [f"subgraph cluster_{node.id} {{", *_indent(inner), "}"]

    raise TypeError(f"Unsupported node: {node!r}")


def print_edge(edge: Edge) -> str:
    op = DIRECTED_EDGE if edge.directed else UNDIRECTED_EDGE
    line = f"{edge.head} {op} {edge.tail}"
    if edge.attrs:
        line += f" {print_attributes(edge.attrs)}"
    return line + ";"


def print_dot(graph: Graph) -> str:
    header = DIRECTED_KEYWORD if graph.directed else UNDIRECTED_KEYWORD
    if graph.strict:
        header = "strict " + header
    if graph.graph_id is not None:
        header += " " + print_graph_id(graph.graph_id)

    body: list[str] = []
    if graph.graph_attrs:
        body.append(f"{UNDIRECTED_KEYWORD} {print_attributes(graph.graph_attrs)};")
    for node in graph.nodes:
        body.extend(print_node(node))
    body.extend(print_edge(edge) for edge in graph.edges)

    lines = [header + " {", *_indent(body), "}"]
    return "\n".join(lines) + "\n"


def _indent(lines: list[str]) -> list[str]:
    return ["\t" + line for line in lines]
