"""Minimum spanning trees (Kruskal and Prim).

Both functions return a new `Graph` holding the tree, or None when no
spanning tree exists for the input.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from operator import attrgetter
from typing import Dict, List, Optional, Set, Tuple

from wgraph.algorithms.topology import is_connected, is_direct, make_direct
from wgraph.algorithms.union_find import DisjointSet
from wgraph.graph.model import Edge, Graph, NodeID
from wgraph.logging import get_logger
from wgraph.types.base import Cost

LOGGER = get_logger(__name__)


def kruskal(graph: Graph) -> Optional[Graph]:
    """Compute a minimum spanning tree with Kruskal's algorithm.

    Edges are scanned in ascending cost order (stable, so equal costs keep
    storage order). An edge is accepted when its endpoints lie in different
    components of a `DisjointSet`; scanning stops after ``V - 1`` accepted
    edges.

    The tree always contains every node of the input. A single node yields a
    tree with zero edges and an empty graph yields an empty graph.

    Args:
        graph: Undirected input graph (no directed-only edges).

    Returns:
        The spanning tree, or None if the graph holds a directed-only edge or
        is disconnected.
    """
    if graph.num_nodes > 0 and is_direct(graph):
        LOGGER.debug("Kruskal: graph contains directed-only edges")
        return None

    target = graph.num_nodes - 1
    tree = Graph()
    for node in graph.get_nodes():
        tree.add_node(node)
    if target <= 0:
        return tree

    components = DisjointSet(node.id for node in graph.get_nodes())
    accepted = 0
    for edge in sorted(graph.get_edges(), key=attrgetter("cost")):
        if components.union(edge.source, edge.target):
            tree.add_edge(edge.source, edge.target, edge.cost, edge.bidirectional)
            accepted += 1
            if accepted == target:
                return tree

    LOGGER.debug(
        "Kruskal: graph is disconnected (%d of %d edges accepted)", accepted, target
    )
    return None


def prim(graph: Graph) -> Optional[Graph]:
    """Compute a minimum spanning tree with Prim's algorithm.

    Works on `make_direct(graph)` so that bidirectional edges can be crossed
    from either side. Starting from the first inserted node, the cheapest
    frontier edge into a node outside the tree is taken until ``V - 1`` edges
    have been added or the frontier is exhausted.

    Args:
        graph: Input graph.

    Returns:
        The spanning tree, or None if the symmetrized graph is disconnected.
    """
    nodes = graph.get_nodes()
    if not nodes:
        return Graph()
    if not is_connected(graph):
        LOGGER.debug("Prim: graph is disconnected")
        return None

    directed = make_direct(graph)
    target = len(nodes) - 1
    tree = Graph()

    in_tree: Set[NodeID] = set()
    # Cheapest known edge cost into each node; absent means unreached.
    best: Dict[NodeID, Cost] = {}
    frontier: List[Tuple[Cost, int, Edge]] = []
    seq = count()

    def _grow(node_id: NodeID) -> None:
        in_tree.add(node_id)
        tree.add_node(directed.get_node(node_id))
        for edge in directed.out_edges(node_id):
            if edge.target in in_tree:
                continue
            if edge.target not in best or edge.cost < best[edge.target]:
                best[edge.target] = edge.cost
                heappush(frontier, (edge.cost, next(seq), edge))

    _grow(nodes[0].id)
    added = 0
    while added < target and frontier:
        _, _, edge = heappop(frontier)
        if edge.target in in_tree:
            continue
        _grow(edge.target)
        tree.add_edge(edge.source, edge.target, edge.cost, edge.bidirectional)
        added += 1

    if added < target:
        LOGGER.debug("Prim: only %d of %d edges added", added, target)
        return None
    return tree
