"""Topology queries and transforms.

None of these functions modify their input; transforms return a new `Graph`.
"""

from __future__ import annotations

from collections import Counter, deque
from typing import Dict, Set

from wgraph.graph.model import Edge, Graph, NodeID
from wgraph.logging import get_logger

LOGGER = get_logger(__name__)


def is_direct(graph: Graph) -> bool:
    """Return True if the graph holds at least one directed-only edge.

    This does not mean every edge is directed: a single edge with
    ``bidirectional=False`` is enough.
    """
    return any(not edge.bidirectional for edge in graph.get_edges())


def _with_nodes_of(graph: Graph) -> Graph:
    result = Graph()
    for node in graph.get_nodes():
        result.add_node(node)
    return result


def make_direct(graph: Graph) -> Graph:
    """Symmetrize bidirectional edges.

    Every bidirectional edge ``u -> v`` (``u != v``) gets a reverse
    ``v -> u`` with the same cost, unless a stored reverse record with the same
    cost and flag is available to pair with it. Pairing is done per record, so
    a graph that is already symmetric comes back unchanged and parallel edges
    keep their multiplicity. Directed-only edges and self-loops pass through.

    Args:
        graph: Input graph.

    Returns:
        A new graph in which each bidirectional edge is reachable from both
        endpoints' adjacency.
    """
    result = _with_nodes_of(graph)
    edges = graph.get_edges()
    unpaired = Counter(edge for edge in edges if edge.bidirectional)

    for edge in edges:
        result.add_edge(edge.source, edge.target, edge.cost, edge.bidirectional)

    for edge in edges:
        if not edge.bidirectional or edge.source == edge.target:
            continue
        mirror = edge.reversed()
        if unpaired[mirror] > 0:
            unpaired[mirror] -= 1
            continue
        result.add_edge(mirror.source, mirror.target, mirror.cost, True)

    return result


def is_connected(graph: Graph, symmetrize: bool = True) -> bool:
    """Check whether every node is reachable from the first inserted node.

    Breadth-first traversal over outgoing adjacency. With ``symmetrize=True``
    (the default) traversal runs over `make_direct(graph)`, so bidirectional
    edges count in both directions. With ``symmetrize=False`` only the stored
    adjacency is followed.

    Empty and single-node graphs are connected.
    """
    nodes = graph.get_nodes()
    if len(nodes) <= 1:
        return True

    walk = make_direct(graph) if symmetrize else graph
    start = nodes[0].id
    visited: Set[NodeID] = {start}
    queue = deque([start])
    while queue and len(visited) < len(nodes):
        node_id = queue.popleft()
        for edge in walk.out_edges(node_id):
            if edge.target not in visited:
                visited.add(edge.target)
                queue.append(edge.target)

    return len(visited) == len(nodes)


def strip_redundant_edges(graph: Graph, take_min: bool = True) -> Graph:
    """Collapse parallel edges that share an origin and a destination.

    For each origin, among the edges to the same destination keep the cheapest
    one (``take_min=True``) or the most expensive one. When costs tie, the edge
    stored first wins.

    Args:
        graph: Input graph.
        take_min: Keep the minimum-cost edge if True, else the maximum-cost one.

    Returns:
        A new graph with the same nodes and at most one edge per ordered pair.
    """
    result = _with_nodes_of(graph)
    for node in graph.get_nodes():
        best: Dict[NodeID, Edge] = {}
        for edge in graph.out_edges(node.id):
            kept = best.get(edge.target)
            if kept is None or (edge < kept if take_min else edge > kept):
                best[edge.target] = edge
        for edge in best.values():
            result.add_edge(edge.source, edge.target, edge.cost, edge.bidirectional)
    return result
