from pathlib import Path

from dotgraph.commands import GraphvizCommand, GraphvizOutput, command_for, run_graphviz_command
from dotgraph.config import RendererConfig
from dotgraph.errors import InvalidGraphError
from dotgraph.parser.parser import parse_dot
from dotgraph.validation import validate_graph


def render(
    dot_source: str,
    output: GraphvizOutput,
    path: str | Path,
    command: GraphvizCommand | None = None,
    config: RendererConfig | None = None,
    check_attributes: bool = True,
) -> bool:
    graph = parse_dot(dot_source)

    if check_attributes:
        validation = validate_graph(graph)
        if not validation.ok:
            raise InvalidGraphError(
                "Invalid graph: " + "; ".join(validation.messages()), result=validation
            )

    return run_graphviz_command(command or command_for(graph), graph, output, path, config)
