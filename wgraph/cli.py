"""Command-line interface for wgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from wgraph.algorithms import (
    dijkstra,
    floyd_warshall_table,
    is_connected,
    is_direct,
    kruskal,
    prim,
)
from wgraph.builder import GraphBuilder
from wgraph.config import BuilderConfig, load_builder_config
from wgraph.graph.io import draw_graph, graph_to_node_link, read_graph, write_graph
from wgraph.graph.model import Graph
from wgraph.logging import get_logger, log_duration, set_global_log_level

logger = get_logger(__name__)


def _format_table(headers: List[str], rows: List[List[str]], min_width: int = 4) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = [
        max(max(len(str(row[i])) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in rows)
    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return cost formatted with up to three decimals, or ``-`` for None.

    Examples:
        None -> "-"; 10.0 -> "10"; 1234.5678 -> "1,234.568".
    """
    if value is None:
        return "-"
    s = f"{float(value):,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _emit(graph: Graph, as_json: bool) -> None:
    if as_json:
        print(json.dumps(graph_to_node_link(graph), indent=2))
        return
    for line in draw_graph(graph):
        print(line)


def _load(path: Path) -> Graph:
    logger.info(f"Loading graph from: {path}")
    with log_duration(logger, "Graph loading"):
        return read_graph(path)


def _generate(args: argparse.Namespace) -> Graph:
    config = load_builder_config(args.config) if args.config else BuilderConfig()
    builder = GraphBuilder(config)
    if args.seed is not None:
        builder.set_seed(args.seed)
    if args.nodes is not None:
        builder.set_num_nodes(args.nodes)
    if args.edges is not None:
        builder.set_num_edges(args.edges)

    with log_duration(logger, "Graph creation"):
        graph = builder.build()
    if graph is None:
        raise ValueError("builder could not satisfy the requested node/edge counts")

    if args.output:
        write_graph(graph, args.output)
        logger.info(f"Graph written to: {args.output}")
    return graph


def _show(graph: Graph) -> None:
    print(f"   Nodes: {graph.num_nodes:,}")
    print(f"   Edges: {graph.num_edges:,}")
    print(f"   Has directed-only edges: {is_direct(graph)}")
    print(f"   Connected: {is_connected(graph)}")
    print(f"   Total edge cost: {_format_cost(graph.total_cost())}")


def _apsp(graph: Graph) -> bool:
    table = floyd_warshall_table(graph)
    if table is None:
        return False
    rows = [
        [str(i), str(j), _format_cost(table.cost(i, j))]
        for i in table.node_ids
        for j in table.node_ids
        if i != j
    ]
    print(_format_table(["from", "to", "cost"], rows))
    return True


def _run(args: argparse.Namespace) -> None:
    if args.command == "generate":
        _emit(_generate(args), args.json)
        return

    graph = _load(args.graph)
    if args.command == "show":
        _show(graph)
        return
    if args.command == "apsp":
        if not _apsp(graph):
            print("Negative path cost found; all-pairs result rejected")
            sys.exit(1)
        return

    with log_duration(logger, f"{args.command} computation"):
        if args.command == "mst":
            result = kruskal(graph) if args.algorithm == "kruskal" else prim(graph)
        else:
            result = dijkstra(graph, args.source, args.target)

    if result is None:
        reason = (
            "Graph not connected or not undirected"
            if args.command == "mst"
            else f"Node {args.target} is unreachable from {args.source}"
        )
        print(reason)
        sys.exit(1)
    _emit(result, args.json)
    print(f"Total cost: {_format_cost(result.total_cost())}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``wgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="wgraph",
        description=(
            "Generate weighted graphs and run spanning-tree "
            "and shortest-path algorithms."
        ),
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{generate,show,mst,sp,apsp}",
        help="Available commands",
    )

    gen_parser = subparsers.add_parser("generate", help="Generate a random graph")
    gen_parser.add_argument(
        "--config", "-c", type=Path, default=None, help="Builder config YAML"
    )
    gen_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    gen_parser.add_argument("--nodes", type=int, default=None, help="Number of nodes")
    gen_parser.add_argument("--edges", type=int, default=None, help="Number of edges")
    gen_parser.add_argument(
        "--output", "-o", type=Path, default=None, help="Write the graph to this file"
    )

    show_parser = subparsers.add_parser("show", help="Summarize a graph file")

    mst_parser = subparsers.add_parser("mst", help="Minimum spanning tree")
    mst_parser.add_argument(
        "--algorithm",
        "-a",
        choices=("kruskal", "prim"),
        default="kruskal",
        help="Spanning tree algorithm (default: kruskal)",
    )

    sp_parser = subparsers.add_parser("sp", help="Shortest path between two nodes")
    apsp_parser = subparsers.add_parser("apsp", help="All-pairs shortest path costs")

    for p in (show_parser, mst_parser, sp_parser, apsp_parser):
        p.add_argument("graph", type=Path, help="Path to a graph file")
    sp_parser.add_argument("source", type=int, help="Source node id")
    sp_parser.add_argument("target", type=int, help="Target node id")

    for p in (gen_parser, mst_parser, sp_parser):
        p.add_argument(
            "--json", action="store_true", help="Print the result as node-link JSON"
        )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        _run(args)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
        print(f"❌ ERROR: File not found: {e.filename}")
        sys.exit(1)
    except (OSError, ValueError, KeyError) as e:
        logger.error(f"Failed to run {args.command}: {type(e).__name__}: {e}")
        print(f"❌ ERROR: {type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
