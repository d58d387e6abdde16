"""Graph algorithms: topology transforms, spanning trees and shortest paths."""

from wgraph.algorithms.shortest_path import (
    AllPairsTable,
    PredecessorGraph,
    dijkstra,
    floyd_warshall,
    floyd_warshall_table,
)
from wgraph.algorithms.spanning_tree import kruskal, prim
from wgraph.algorithms.topology import (
    is_connected,
    is_direct,
    make_direct,
    strip_redundant_edges,
)

__all__ = [
    "AllPairsTable",
    "PredecessorGraph",
    "dijkstra",
    "floyd_warshall",
    "floyd_warshall_table",
    "is_connected",
    "is_direct",
    "kruskal",
    "make_direct",
    "prim",
    "strip_redundant_edges",
]
