"""Grammar for the DOT subset produced by ``dotgraph.printer``.

Only plain integer nodes and single edges are read back. ``node`` and ``edge``
default statements are skipped rather than applied, and ``subgraph cluster_``
blocks are printed but never parsed.
"""

import logging
import re

from dotgraph.attributes import Attribute
from dotgraph.parser.ast import Edge, Graph, HtmlID, Node, NumID, QuotedID, StrID
from dotgraph.parser.combinators import (
    ParseFailure,
    Parser,
    ParseState,
    blank,
    end_of_input,
    literal,
    many,
    many1,
    one_of,
    optional,
    optional_whitespace,
    pattern,
    sep_by1,
    sequence,
    skip_to_newline,
    whitespace,
)

logger = logging.getLogger(__name__)

DIRECTED_KEYWORD = "digraph"
UNDIRECTED_KEYWORD = "graph"
DIRECTED_EDGE = "->"
UNDIRECTED_EDGE = "--"
_ESCAPED = re.compile(r'(\\*)("|\Z)')


def _unquote(token: str) -> str:
    return _ESCAPED.sub(_unescape, token[1:-1])


def _unescape(match: re.Match) -> str:
    backslashes = match.group(1)
    return backslashes[: len(backslashes) // 2] + match.group(2)


def _read_html(state: ParseState, index: int) -> tuple[str, int]:
    source = state.source
    if not source.startswith("<", index):
        raise ParseFailure(index, "'<'")
    depth = 0
    position = index
    while position < len(source):
        char = source[position]
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
            if depth == 0:
                return source[index + 1 : position], position + 1
        position += 1
    raise ParseFailure(position, "'>'")


identifier = pattern(r"[^\W\d]\w*", "identifier")
number = pattern(r"-?(?:\.\d+|\d+(?:\.\d*)?)(?:[eE][-+]?\d+)?", "number")
quoted_string = pattern(r'(?s)"(?:[^"\\]|\\.)*"', "quoted string").map(_unquote)
html_string: Parser[str] = Parser(_read_html)

graph_id = one_of(
    identifier.map(StrID),
    number.map(NumID),
    quoted_string.map(QuotedID),
    html_string.map(HtmlID),
).named("Not a valid GraphID")

attribute = sequence(
    identifier,
    optional_whitespace,
    literal("="),
    optional_whitespace,
    one_of(quoted_string, identifier, number),
).map(lambda parts: Attribute(parts[0], parts[4])).named("Not a valid Attribute")

attribute_list = literal("[").then(
    sequence(
        optional_whitespace,
        sep_by1(attribute, sequence(optional_whitespace, literal(","), optional_whitespace)),
        optional_whitespace,
        literal("]"),
    )
    .map(lambda parts: tuple(parts[1]))
    .named("Not a valid AttributeList")
)

node_id = pattern(r"-?\d+", "node id").map(int)
edge_op = one_of(literal(DIRECTED_EDGE), literal(UNDIRECTED_EDGE))
_trailing_attrs = optional(whitespace.then(attribute_list), ())

node_statement = (
    sequence(blank.then(node_id), _trailing_attrs, literal(";"))
    .discard(skip_to_newline)
    .map(lambda parts: Node(id=parts[0], attrs=parts[1]))
    .named("Not a valid DotNode")
)

edge_statement = (
    sequence(
        blank.then(node_id),
        whitespace.then(edge_op),
        whitespace.then(node_id),
        _trailing_attrs,
        literal(";"),
    )
    .discard(skip_to_newline)
    .map(
        lambda parts: Edge(
            head=parts[0],
            tail=parts[2],
            attrs=parts[3],
            directed=parts[1] == DIRECTED_EDGE,
        )
    )
    .named("Not a valid DotEdge")
)

_default_statement = (
    blank.then(one_of(literal("edge"), literal("node"))).then(skip_to_newline).map(lambda _: ())
)
_graph_statement = (
    blank.then(literal(UNDIRECTED_KEYWORD))
    .then(whitespace)
    .then(attribute_list)
    .discard(skip_to_newline)
)
attribute_statements = many(one_of(_default_statement, _graph_statement)).map(
    lambda groups: tuple(attr for group in groups for attr in group)
)

_strict = optional(literal("strict").discard(whitespace).map(lambda _: True), False)
_graph_type = one_of(literal(DIRECTED_KEYWORD), literal(UNDIRECTED_KEYWORD))


def _build_graph(parts: tuple) -> Graph:
    strict, kind, name, graph_attrs, nodes, edges = parts
    return Graph(
        nodes=nodes,
        edges=edges,
        graph_attrs=graph_attrs,
        strict=strict,
        directed=kind == DIRECTED_KEYWORD,
        graph_id=name,
    )


dot_graph = (
    sequence(
        blank.then(_strict),
        _graph_type,
        optional(whitespace.then(graph_id)).discard(whitespace).discard(literal("{")),
        skip_to_newline.then(attribute_statements),
        many1(node_statement),
        many1(edge_statement),
    )
    .discard(blank)
    .discard(literal("}"))
    .discard(blank)
    .discard(end_of_input())
    .map(_build_graph)
    .named("Not a valid DotGraph")
)


def parse_dot(source: str) -> Graph:
    graph = dot_graph.parse(source)
    logger.debug(
        "parsed %s with %d nodes and %d edges",
        DIRECTED_KEYWORD if graph.directed else UNDIRECTED_KEYWORD,
        len(graph.nodes),
        len(graph.edges),
    )
    return graph
