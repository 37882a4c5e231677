"""Run the Graphviz layout programs on a ``Graph``.

The graph is printed with ``print_dot`` and piped to ``<command> -T<format>``.
Which formats work depends on how Graphviz was built; ``dot -T?`` lists them.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import threading
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import IO, TypeVar

from dotgraph.config import RendererConfig
from dotgraph.parser.ast import Graph
from dotgraph.printer import print_dot

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GraphvizCommand(str, Enum):
    DOT = "dot"  # hierarchical, best for directed graphs
    NEATO = "neato"  # symmetric, best for undirected graphs
    TWOPI = "twopi"  # radial
    CIRCO = "circo"  # circular
    FDP = "fdp"  # spring model


DIR_COMMAND = GraphvizCommand.DOT
UNDIR_COMMAND = GraphvizCommand.NEATO


def command_for(graph: Graph) -> GraphvizCommand:
    return DIR_COMMAND if graph.directed else UNDIR_COMMAND


class GraphvizOutput(str, Enum):
    BMP = "bmp"
    CANON = "canon"
    DOT = "dot"
    XDOT = "xdot"
    EPS = "eps"
    FIG = "fig"
    GD = "gd"
    GD2 = "gd2"
    GIF = "gif"
    ICO = "ico"
    IMAP = "imap"
    CMAPX = "cmapx"
    IMAP_NP = "imap_np"
    CMAPX_NP = "cmapx_np"
    JPEG = "jpeg"
    PDF = "pdf"
    PLAIN = "plain"
    PLAIN_EXT = "plain-ext"
    PNG = "png"
    PS = "ps"
    PS2 = "ps2"
    SVG = "svg"
    SVGZ = "svgz"
    TIFF = "tiff"
    VML = "vml"
    VMLZ = "vmlz"
    VRML = "vrml"
    WBMP = "wbmp"

    @property
    def default_extension(self) -> str:
        return _EXTENSIONS.get(self, self.value)


_EXTENSIONS = {
    GraphvizOutput.CANON: "dot",
    GraphvizOutput.XDOT: "dot",
    GraphvizOutput.IMAP: "map",
    GraphvizOutput.CMAPX: "map",
    GraphvizOutput.IMAP_NP: "map",
    GraphvizOutput.CMAPX_NP: "map",
    GraphvizOutput.JPEG: "jpg",
    GraphvizOutput.PLAIN: "txt",
    GraphvizOutput.PLAIN_EXT: "txt",
    GraphvizOutput.PS2: "ps",
    GraphvizOutput.TIFF: "tif",
}


class GraphvizCanvas(str, Enum):
    """Formats that open a window instead of producing output."""

    GTK = "gtk"
    XLIB = "xlib"


def run_graphviz(
    graph: Graph,
    output: GraphvizOutput,
    path: str | Path,
    config: RendererConfig | None = None,
) -> bool:
    """Render with the default command for the graph's directedness."""
    return run_graphviz_command(command_for(graph), graph, output, path, config)


def run_graphviz_command(
    command: GraphvizCommand,
    graph: Graph,
    output: GraphvizOutput,
    path: str | Path,
    config: RendererConfig | None = None,
) -> bool:
    """Render to ``path``; the file extension is not checked."""
    try:
        handle = Path(path).open("wb")
    except OSError as exc:
        logger.warning("could not open %s for writing: %s", path, exc)
        return False

    def copy(stream: IO[bytes]) -> bool:
        shutil.copyfileobj(stream, handle)
        return True

    with handle:
        result = graphviz_with_handle(command, graph, output, copy, config)
    return result is not None


def add_extension(
    action: Callable[[GraphvizOutput, Path], T],
    output: GraphvizOutput,
    path: str | Path,
) -> T:
    return action(output, Path(f"{path}.{output.default_extension}"))


def run_graphviz_canvas(
    command: GraphvizCommand,
    graph: Graph,
    canvas: GraphvizCanvas,
    config: RendererConfig | None = None,
) -> bool:
    return _run_renderer(command, graph, canvas.value, _discard, config) is not None


def graphviz_with_handle(
    command: GraphvizCommand,
    graph: Graph,
    output: GraphvizOutput,
    consumer: Callable[[IO[bytes]], T],
    config: RendererConfig | None = None,
) -> T | None:
    """Pass the renderer's stdout to ``consumer``.

    Returns the consumer's result, or ``None`` when the renderer cannot be
    started, exits with a non-zero status or runs past the configured timeout.
    """
    return _run_renderer(command, graph, output.value, consumer, config)


def _run_renderer(
    command: GraphvizCommand,
    graph: Graph,
    result_format: str,
    consumer: Callable[[IO[bytes]], T],
    config: RendererConfig | None,
) -> T | None:
    config = config or RendererConfig()
    argv = [config.executable(command.value), f"-T{result_format}"]
    logger.debug("running %s", " ".join(argv))

    try:
        process = subprocess.Popen(
            argv,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as exc:
        logger.warning("could not start %s: %s", argv[0], exc)
        return None

    stderr_chunks: list[bytes] = []
    writer = threading.Thread(
        target=_feed, args=(process.stdin, print_dot(graph).encode("utf-8")), daemon=True
    )
    reader = threading.Thread(target=_drain, args=(process.stderr, stderr_chunks), daemon=True)
    writer.start()
    reader.start()

    timed_out = threading.Event()
    timer = None
    if config.timeout is not None:

        def expire() -> None:
            timed_out.set()
            process.kill()

        timer = threading.Timer(config.timeout, expire)
        timer.start()

    try:
        result = consumer(process.stdout)
        process.stdout.read()
        exit_code = process.wait()
    except BaseException:
        process.kill()
        process.wait()
        raise
    finally:
        if timer is not None:
            timer.cancel()
        writer.join()
        reader.join()
        process.stdout.close()

    stderr = b"".join(stderr_chunks).decode("utf-8", errors="replace").strip()
    if stderr:
        logger.warning("%s: %s", argv[0], stderr)

    if exit_code != 0 and timed_out.is_set():
        logger.warning("%s timed out after %s seconds", argv[0], config.timeout)
        return None
    if exit_code != 0:
        logger.warning("%s exited with status %d", argv[0], exit_code)
        return None
    return result


def _feed(stream: IO[bytes], data: bytes) -> None:
    try:
        stream.write(data)
    except BrokenPipeError:
        logger.debug("renderer closed its input early")
    finally:
        try:
            stream.close()
        except BrokenPipeError:
            logger.debug("renderer closed its input early")


def _drain(stream: IO[bytes], chunks: list[bytes]) -> None:
    try:
        chunks.append(stream.read())
    finally:
        stream.close()


def _discard(stream: IO[bytes]) -> bool:
    stream.read()
    return True
