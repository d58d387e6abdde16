"""Reading, writing and rendering graphs.

Plain-text interchange layout::

    <dimension> <numNodes> <numEdges>
    <id> <coord_1> ... <coord_dim> <cost>        (numNodes lines)
    <fromId> <toId> <cost> <bidirectional:0|1>   (numEdges lines)

Blank lines are ignored. Numeric fields that look like integers are read as
``int``; anything else numeric becomes ``float``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Tuple, Union

from wgraph.graph.model import Graph, Node, NodeNotFoundError
from wgraph.logging import get_logger
from wgraph.types.base import Cost

LOGGER = get_logger(__name__)

PathLike = Union[str, Path]


class GraphFormatError(ValueError):
    """Raised when graph text does not follow the interchange layout."""

    def __init__(self, message: str, line_no: int = 0) -> None:
        self.line_no = line_no
        if line_no:
            message = f"line {line_no}: {message}"
        super().__init__(message)


def _number(token: str, line_no: int) -> Cost:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        raise GraphFormatError(f"expected a number, got '{token}'", line_no) from None


def _integer(token: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise GraphFormatError(f"expected an integer, got '{token}'", line_no) from None


def _flag(token: str, line_no: int) -> bool:
    if token not in ("0", "1"):
        raise GraphFormatError(
            f"bidirectional flag must be 0 or 1, got '{token}'", line_no
        )
    return token == "1"


def _rows(lines: Iterable[str]) -> Iterator[Tuple[int, List[str]]]:
    for line_no, line in enumerate(lines, start=1):
        tokens = line.split()
        if tokens:
            yield line_no, tokens


def parse_graph(lines: Iterable[str]) -> Graph:
    """Build a graph from lines in the interchange layout.

    Args:
        lines: Text lines (with or without trailing newlines).

    Returns:
        The parsed graph.

    Raises:
        GraphFormatError: On malformed, missing or extra lines, duplicate node
            ids, or edges referencing unknown nodes.
    """
    rows = _rows(lines)
    try:
        line_no, header = next(rows)
    except StopIteration:
        raise GraphFormatError("missing header line") from None
    if len(header) != 3:
        raise GraphFormatError("header must be '<dimension> <nodes> <edges>'", line_no)
    dim, num_nodes, num_edges = (_integer(t, line_no) for t in header)
    if min(dim, num_nodes, num_edges) < 0:
        raise GraphFormatError("header values must be non-negative", line_no)

    graph = Graph()
    for _ in range(num_nodes):
        line_no, tokens = next(rows, (line_no, []))
        if not tokens:
            raise GraphFormatError(f"expected {num_nodes} node lines", line_no)
        if len(tokens) != dim + 2:
            raise GraphFormatError(
                f"node line needs id, {dim} coordinates and a cost", line_no
            )
        node = Node(
            _integer(tokens[0], line_no),
            tuple(float(_number(t, line_no)) for t in tokens[1:-1]),
            _number(tokens[-1], line_no),
        )
        if not graph.add_node(node):
            raise GraphFormatError(f"duplicate node id {node.id}", line_no)

    for _ in range(num_edges):
        line_no, tokens = next(rows, (line_no, []))
        if not tokens:
            raise GraphFormatError(f"expected {num_edges} edge lines", line_no)
        if len(tokens) != 4:
            raise GraphFormatError("edge line needs from, to, cost and flag", line_no)
        try:
            graph.add_edge(
                _integer(tokens[0], line_no),
                _integer(tokens[1], line_no),
                _number(tokens[2], line_no),
                _flag(tokens[3], line_no),
            )
        except NodeNotFoundError as exc:
            raise GraphFormatError(str(exc), line_no) from exc

    extra = next(rows, None)
    if extra is not None:
        raise GraphFormatError("unexpected content after the last edge", extra[0])
    return graph


def read_graph(path: PathLike) -> Graph:
    """Read a graph file in the interchange layout."""
    with open(path, "r", encoding="utf-8") as fh:
        graph = parse_graph(fh)
    LOGGER.debug("Loaded %r from %s", graph, path)
    return graph


def format_graph(graph: Graph) -> str:
    """Render a graph in the interchange layout.

    The dimension is taken from the first node; all nodes must share it.

    Raises:
        ValueError: If nodes have different coordinate dimensions.
    """
    nodes = graph.get_nodes()
    dims = {len(node.coords) for node in nodes}
    if len(dims) > 1:
        raise ValueError(f"Nodes have mixed coordinate dimensions: {sorted(dims)}")
    dim = dims.pop() if dims else 0

    lines = [f"{dim} {graph.num_nodes} {graph.num_edges}"]
    for node in nodes:
        lines.append(" ".join(str(v) for v in (node.id, *node.coords, node.cost)))
    for edge in graph.get_edges():
        lines.append(
            f"{edge.source} {edge.target} {edge.cost} {int(edge.bidirectional)}"
        )
    return "\n".join(lines) + "\n"


def write_graph(graph: Graph, path: PathLike) -> None:
    """Write a graph file in the interchange layout."""
    Path(path).write_text(format_graph(graph), encoding="utf-8")
    LOGGER.debug("Wrote %r to %s", graph, path)


def draw_graph(graph: Graph) -> List[str]:
    """Return one ``"<from> <-> <to> cost: <cost>"`` line per edge.

    Directed-only edges use ``->``.
    """
    return [
        f"{e.source} {'<->' if e.bidirectional else '->'} {e.target} cost: {e.cost}"
        for e in graph.get_edges()
    ]


def graph_to_node_link(graph: Graph) -> Dict[str, Any]:
    """Convert a graph into a JSON-friendly node-link dict.

    Layout::

        {
            "nodes": [{"id": 0, "coords": [x, y], "cost": 0}, ...],
            "links": [
                {"source": 0, "target": 1, "cost": 4, "bidirectional": true},
                ...
            ],
        }

    ``source``/``target`` hold node ids, not positions.
    """
    return {
        "nodes": [
            {"id": node.id, "coords": list(node.coords), "cost": node.cost}
            for node in graph.get_nodes()
        ],
        "links": [
            {
                "source": edge.source,
                "target": edge.target,
                "cost": edge.cost,
                "bidirectional": edge.bidirectional,
            }
            for edge in graph.get_edges()
        ],
    }


def node_link_to_graph(data: Dict[str, Any]) -> Graph:
    """Rebuild a graph from `graph_to_node_link` output.

    Missing ``coords``/``cost`` default to ``()``/``0``; a missing
    ``bidirectional`` defaults to True.

    Raises:
        ValueError: On duplicate node ids.
        NodeNotFoundError: If a link references an unknown node.
    """
    return Graph.from_records(
        (
            (node["id"], node.get("coords", ()), node.get("cost", 0))
            for node in data.get("nodes", [])
        ),
        (
            (
                link["source"],
                link["target"],
                link.get("cost", 0),
                link.get("bidirectional", True),
            )
            for link in data.get("links", [])
        ),
    )
