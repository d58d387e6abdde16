"""wgraph: weighted graphs, spanning trees and shortest paths.

Primary API:
    Graph, Node, Edge - append-only weighted graph model
    kruskal(), prim() - minimum spanning trees
    dijkstra() - shortest path between two nodes
    floyd_warshall(), floyd_warshall_table() - all-pairs shortest paths
    make_direct(), is_connected(), is_direct(), strip_redundant_edges() - topology
    GraphBuilder - seeded random graph generation
    read_graph(), write_graph() - plain-text interchange format

Example:
    from wgraph import Graph, Node, kruskal, dijkstra

    g = Graph()
    for i in range(3):
        g.add_node(Node(i))
    g.add_edge(0, 1, 4)
    g.add_edge(1, 2, 1)

    tree = kruskal(g)
    path = dijkstra(g, 0, 2)
"""

from __future__ import annotations

from wgraph import logging
from wgraph._version import __version__
from wgraph.algorithms import (
    AllPairsTable,
    PredecessorGraph,
    dijkstra,
    floyd_warshall,
    floyd_warshall_table,
    is_connected,
    is_direct,
    kruskal,
    make_direct,
    prim,
    strip_redundant_edges,
)
from wgraph.builder import GraphBuilder
from wgraph.config import BuilderConfig, load_builder_config
from wgraph.graph.convert import from_networkx, to_networkx
from wgraph.graph.io import GraphFormatError, parse_graph, read_graph, write_graph
from wgraph.graph.model import Edge, Graph, Node, NodeNotFoundError
from wgraph.types.base import Cost, DirectMode

__all__ = [
    "__version__",
    # Model
    "Graph",
    "Node",
    "Edge",
    "NodeNotFoundError",
    "Cost",
    # Topology
    "is_direct",
    "make_direct",
    "is_connected",
    "strip_redundant_edges",
    # Algorithms
    "kruskal",
    "prim",
    "dijkstra",
    "floyd_warshall",
    "floyd_warshall_table",
    "AllPairsTable",
    "PredecessorGraph",
    # Construction and IO
    "GraphBuilder",
    "BuilderConfig",
    "DirectMode",
    "load_builder_config",
    "parse_graph",
    "read_graph",
    "write_graph",
    "GraphFormatError",
    "from_networkx",
    "to_networkx",
    "logging",
]
