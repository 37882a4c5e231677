import pytest

from dotgraph.attributes import Attribute
from dotgraph.errors import DotParseError
from dotgraph.parser.ast import Edge, Graph, HtmlID, Node, NumID, QuotedID, StrID
from dotgraph.parser.parser import attribute_list, graph_id, parse_dot


def test_parser_reads_minimal_digraph():
    graph = parse_dot("digraph {\n\t1 [color=red];\n\t1 -> 2;\n}\n")

    assert isinstance(graph, Graph)
    assert graph.directed
    assert not graph.strict
    assert graph.graph_id is None
    assert graph.graph_attrs == ()
    assert graph.nodes == (Node(id=1, attrs=(Attribute("color", "red"),)),)
    assert graph.edges == (Edge(head=1, tail=2, attrs=(), directed=True),)


def test_parser_supports_header_graph_attributes_and_undirected_edges():
    dot = """strict graph G {
\tgraph [label="Flow", rankdir=LR];
\t1;
\t2 [shape=box, label="two"];
\t1 -- 2 [weight=3];
\t2 -- 3;
}
"""

    graph = parse_dot(dot)

    assert graph.strict
    assert not graph.directed
    assert graph.graph_id == StrID("G")
    assert graph.graph_attrs == (Attribute("label", "Flow"), Attribute("rankdir", "LR"))
    assert graph.nodes == (
        Node(id=1),
        Node(id=2, attrs=(Attribute("shape", "box"), Attribute("label", "two"))),
    )
    assert graph.edges == (
        Edge(head=1, tail=2, attrs=(Attribute("weight", "3"),), directed=False),
        Edge(head=2, tail=3, directed=False),
    )


def test_parser_discards_node_and_edge_defaults():
    dot = """digraph {
\tnode [shape=box];
\tedge [color=gray];
\tgraph [rankdir=LR];
\tgraph [bgcolor=white];
\t1;
\t1 -> 2;
}
"""

    graph = parse_dot(dot)

    assert graph.graph_attrs == (Attribute("rankdir", "LR"), Attribute("bgcolor", "white"))
    assert graph.nodes == (Node(id=1),)
    assert graph.edges == (Edge(head=1, tail=2),)


def test_parser_keeps_duplicate_nodes_and_undeclared_endpoints():
    dot = "digraph {\n\t1;\n\t1 [color=blue];\n\t-4 -> 7;\n\t7 -- 1;\n}\n"

    graph = parse_dot(dot)

    assert graph.nodes == (Node(id=1), Node(id=1, attrs=(Attribute("color", "blue"),)))
    assert graph.edges == (Edge(head=-4, tail=7), Edge(head=7, tail=1, directed=False))


def test_parser_tolerates_blank_lines_and_trailing_text():
    dot = "\ndigraph {  // comment\n\n\t1; // first\n\n\t1 -> 2;\n\n}\n\n"

    graph = parse_dot(dot)

    assert graph.nodes == (Node(id=1),)
    assert graph.edges == (Edge(head=1, tail=2),)


def test_parser_unescapes_quoted_values():
    graph = parse_dot('digraph {\n\t1 [label="say \\"hi\\"", color="#ff0000"];\n\t1 -> 2;\n}\n')

    assert graph.nodes[0].attrs == (
        Attribute("label", 'say "hi"'),
        Attribute("color", "#ff0000"),
    )


def test_graph_id_variants():
    assert graph_id.parse("G1") == StrID("G1")
    assert graph_id.parse("-2.5") == NumID(-2.5)
    assert graph_id.parse('"my \\"graph\\""') == QuotedID('my "graph"')
    assert graph_id.parse("<<b>bold</b>>") == HtmlID("<b>bold</b>")


def test_parser_reads_each_graph_id_in_header():
    body = " {\n\t1;\n\t1 -> 2;\n}\n"

    assert parse_dot("digraph 3" + body).graph_id == NumID(3.0)
    assert parse_dot('digraph "a b"' + body).graph_id == QuotedID("a b")
    assert parse_dot("digraph <x>" + body).graph_id == HtmlID("x")


def test_attribute_list_allows_spaces_around_separators():
    assert attribute_list.parse("[ color = red , fontsize=12 ]") == (
        Attribute("color", "red"),
        Attribute("fontsize", "12"),
    )


def test_parser_requires_closing_brace():
    with pytest.raises(DotParseError, match="expected '}'") as excinfo:
        parse_dot("digraph {\n\t1;\n\t1 -> 2;\n")

    assert excinfo.value.found == "end of input"
    assert excinfo.value.context == ["Not a valid DotGraph"]


def test_parser_requires_at_least_one_node():
    with pytest.raises(DotParseError) as excinfo:
        parse_dot("digraph {\n\t1 -> 2;\n}\n")

    error = excinfo.value
    assert error.line == 2
    assert error.column == 3
    assert error.expected == "';'"
    assert error.context == ["Not a valid DotNode", "Not a valid DotGraph"]
    assert str(error) == (
        "line 2, column 3: expected ';', found ' '\nNot a valid DotNode\nNot a valid DotGraph"
    )


def test_parser_requires_at_least_one_edge():
    with pytest.raises(DotParseError) as excinfo:
        parse_dot("digraph {\n\t1;\n}\n")

    assert excinfo.value.context == ["Not a valid DotEdge", "Not a valid DotGraph"]


def test_parser_rejects_unknown_graph_keyword():
    with pytest.raises(DotParseError, match="Not a valid DotGraph"):
        parse_dot("Digraph {\n\t1;\n\t1 -> 2;\n}\n")


def test_parse_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_dot("")


def test_parser_does_not_read_clusters():
    dot = "digraph {\n\tsubgraph cluster_a {\n\t\t1;\n\t}\n\t1 -> 2;\n}\n"

    with pytest.raises(DotParseError):
        parse_dot(dot)


@pytest.mark.parametrize(
    "dot, line, column, expected, context",
    [
        (
            "digraph {\n\t1 [color=];\n\t1 -> 2;\n}\n",
            2,
            11,
            "quoted string or identifier or number",
            ["Not a valid Attribute", "Not a valid AttributeList", "Not a valid DotNode"],
        ),
        (
            "digraph {\n\tgraph [rankdir=];\n\t1;\n\t1 -> 2;\n}\n",
            2,
            17,
            "quoted string or identifier or number",
            ["Not a valid Attribute", "Not a valid AttributeList"],
        ),
        (
            "digraph {\n\t1;\n\t1 -> 2 [color=red;\n}\n",
            3,
            19,
            "']'",
            ["Not a valid AttributeList", "Not a valid DotEdge"],
        ),
    ],
)
def test_parser_reports_bad_attribute_where_it_occurs(dot, line, column, expected, context):
    with pytest.raises(DotParseError) as excinfo:
        parse_dot(dot)

    error = excinfo.value
    assert (error.line, error.column) == (line, column)
    assert error.expected == expected
    assert error.context == [*context, "Not a valid DotGraph"]


def test_parser_unescapes_backslashes_before_quotes():
    graph = parse_dot('digraph {\n\t1 [label="C:\\dir\\\\", xlabel="a\\\\\\"b"];\n\t1 -> 2;\n}\n')

    assert graph.nodes[0].attrs == (
        Attribute("label", "C:\\dir\\"),
        Attribute("xlabel", 'a\\"b'),
    )
