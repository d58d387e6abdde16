"""Shortest paths: Dijkstra (single pair) and Floyd-Warshall (all pairs).

Both algorithms run over the symmetrized graph (`make_direct`), so a
bidirectional edge can be crossed either way. Unreached distances are kept as
``None`` rather than a large numeric stand-in, so no sum can overflow into a
spurious "shorter" path.

Notes:
    Dijkstra does not support negative edge costs; its result is undefined if
    any are present. Floyd-Warshall tolerates negative edges during relaxation
    but rejects the whole result if any computed cost is negative. That guard
    is a heuristic, not a negative-cycle detector.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Set, Tuple

from wgraph.algorithms.topology import make_direct, strip_redundant_edges
from wgraph.graph.model import Edge, Graph, NodeID, NodeNotFoundError
from wgraph.logging import get_logger
from wgraph.types.base import Cost

LOGGER = get_logger(__name__)

Pair = Tuple[NodeID, NodeID]


def _path_graph(source: Graph, path_edges: List[Edge], start: NodeID) -> Graph:
    """Build a graph holding ``start`` plus the nodes and edges of a path."""
    path = Graph()
    path.add_node(source.get_node(start))
    for edge in path_edges:
        path.add_node(source.get_node(edge.target))
        path.add_edge(edge.source, edge.target, edge.cost, edge.bidirectional)
    return path


def dijkstra(graph: Graph, source: NodeID, target: NodeID) -> Optional[Graph]:
    """Find a cheapest path from ``source`` to ``target``.

    The frontier is a heap of ``(distance via edge, seq, edge)``. The cheapest
    entry whose destination is not yet settled is settled and its outgoing
    edges relaxed. The search stops as soon as ``target`` is settled.

    Args:
        graph: Input graph. Edge costs must be non-negative.
        source: Start node id.
        target: End node id.

    Returns:
        A graph with exactly the path's nodes and edges (a single node when
        ``source == target``), or None if ``target`` is unreachable.

    Raises:
        NodeNotFoundError: If ``source`` or ``target`` is not in the graph.
    """
    if not graph.has_node(source):
        raise NodeNotFoundError(source)
    if not graph.has_node(target):
        raise NodeNotFoundError(target)
    if any(edge.cost < 0 for edge in graph.get_edges()):
        LOGGER.warning("Dijkstra: negative edge costs present; result is undefined")

    directed = make_direct(graph)
    dist: Dict[NodeID, Cost] = {source: 0}
    pred: Dict[NodeID, Edge] = {}
    settled: Set[NodeID] = set()
    frontier: List[Tuple[Cost, int, Edge]] = []
    seq = count()

    def _relax(node_id: NodeID) -> None:
        settled.add(node_id)
        base = dist[node_id]
        for edge in directed.out_edges(node_id):
            if edge.target in settled:
                continue
            candidate = base + edge.cost
            if edge.target not in dist or candidate < dist[edge.target]:
                dist[edge.target] = candidate
                heappush(frontier, (candidate, next(seq), edge))

    _relax(source)
    while target not in settled and frontier:
        cost, _, edge = heappop(frontier)
        if edge.target in settled or cost > dist[edge.target]:
            continue
        pred[edge.target] = edge
        _relax(edge.target)

    if target not in settled:
        LOGGER.debug("Dijkstra: node %s is unreachable from %s", target, source)
        return None

    path_edges: List[Edge] = []
    node_id = target
    while node_id != source:
        edge = pred[node_id]
        path_edges.append(edge)
        node_id = edge.source
    path_edges.reverse()
    return _path_graph(directed, path_edges, source)


@dataclass
class AllPairsTable:
    """Cost and predecessor matrices produced by Floyd-Warshall.

    ``costs[(i, j)]`` is the cheapest known cost from ``i`` to ``j`` or None if
    ``j`` is unreachable. ``predecessors[(i, j)]`` is the last edge on that
    path, ending at ``j``. Following predecessors back to ``i`` rebuilds the
    path (see `path`).

    Attributes:
        graph: The symmetrized, stripped graph the table was computed on.
        node_ids: Node ids in iteration order.
        costs: Pairwise costs.
        predecessors: Pairwise last-hop edges.
    """

    graph: Graph
    node_ids: List[NodeID] = field(default_factory=list)
    costs: Dict[Pair, Optional[Cost]] = field(default_factory=dict)
    predecessors: Dict[Pair, Optional[Edge]] = field(default_factory=dict)

    def _check(self, source: NodeID, target: NodeID) -> None:
        for node_id in (source, target):
            if not self.graph.has_node(node_id):
                raise NodeNotFoundError(node_id)

    def cost(self, source: NodeID, target: NodeID) -> Optional[Cost]:
        """Return the shortest-path cost, or None if unreachable."""
        self._check(source, target)
        return self.costs[(source, target)]

    def predecessor(self, source: NodeID, target: NodeID) -> Optional[Edge]:
        """Return the last edge on the path, or None for unreachable/self pairs."""
        self._check(source, target)
        return self.predecessors[(source, target)]

    def path(self, source: NodeID, target: NodeID) -> Optional[Graph]:
        """Rebuild the path from ``source`` to ``target`` as a graph.

        Returns:
            The path graph (a single node when ``source == target``), or None
            if ``target`` is unreachable.
        """
        if self.cost(source, target) is None:
            return None
        path_edges: List[Edge] = []
        node_id = target
        while node_id != source:
            edge = self.predecessors[(source, node_id)]
            if edge is None or len(path_edges) >= len(self.node_ids):
                raise RuntimeError(
                    f"Broken predecessor chain from {source} to {target}."
                )
            path_edges.append(edge)
            node_id = edge.source
        path_edges.reverse()
        return _path_graph(self.graph, path_edges, source)


def floyd_warshall_table(graph: Graph) -> Optional[AllPairsTable]:
    """Run Floyd-Warshall and return the cost/predecessor matrices.

    The graph is symmetrized and reduced to the cheapest edge per ordered pair
    first. Relaxation runs over intermediate node ``h``, source ``i`` and
    destination ``j``; a strictly cheaper ``i -> h -> j`` replaces the entry
    and inherits ``predecessor(h, j)``.

    Returns:
        The table, or None if any resulting cost is negative.
    """
    reduced = strip_redundant_edges(make_direct(graph), take_min=True)
    ids = [node.id for node in reduced.get_nodes()]
    table = AllPairsTable(graph=reduced, node_ids=ids)
    costs = table.costs
    pred = table.predecessors

    for i in ids:
        for j in ids:
            costs[(i, j)] = 0 if i == j else None
            pred[(i, j)] = None
        for edge in reduced.out_edges(i):
            if edge.source == edge.target:
                if edge.cost < 0:
                    costs[(i, i)] = edge.cost
                    pred[(i, i)] = edge
                continue
            costs[(i, edge.target)] = edge.cost
            pred[(i, edge.target)] = edge

    for h in ids:
        for i in ids:
            cost_ih = costs[(i, h)]
            if cost_ih is None:
                continue
            for j in ids:
                cost_hj = costs[(h, j)]
                if cost_hj is None:
                    continue
                current = costs[(i, j)]
                candidate = cost_ih + cost_hj
                if current is None or candidate < current:
                    costs[(i, j)] = candidate
                    pred[(i, j)] = pred[(h, j)]

    if any(c is not None and c < 0 for c in costs.values()):
        LOGGER.debug("Floyd-Warshall: negative path cost found, result rejected")
        return None
    return table


class PredecessorGraph(Graph):
    """Graph of Floyd-Warshall predecessor steps.

    Holds one edge per reachable ordered pair ``(i, j)``, ``i != j``: the last
    hop of a cheapest ``i -> j`` path, with that hop's own cost and flag. The
    same hop may serve several pairs and is then stored once per pair. Use
    `step` to look up the edge of a pair; following ``step(i, x).source`` from
    ``x = j`` back to ``i`` rebuilds the path.
    """

    def __init__(self) -> None:
        super().__init__()
        self._steps: Dict[Pair, int] = {}

    def add_step(self, source: NodeID, target: NodeID, edge: Edge) -> Edge:
        """Append ``edge`` as the predecessor step of ``(source, target)``."""
        stored = self.add_edge(edge.source, edge.target, edge.cost, edge.bidirectional)
        self._steps[(source, target)] = self.num_edges - 1
        return stored

    def step(self, source: NodeID, target: NodeID) -> Optional[Edge]:
        """Return the predecessor step, or None for unreachable/self pairs.

        Raises:
            NodeNotFoundError: If either node is not in the graph.
        """
        for node_id in (source, target):
            if not self.has_node(node_id):
                raise NodeNotFoundError(node_id)
        index = self._steps.get((source, target))
        return None if index is None else self._edges[index]

    def pairs(self) -> List[Pair]:
        """Ordered pairs that have a step, in insertion order."""
        return list(self._steps)


def floyd_warshall(graph: Graph) -> Optional[PredecessorGraph]:
    """All-pairs shortest paths as a graph of predecessor steps.

    The result has the input's nodes and, for every ordered pair ``i != j``
    where ``j`` is reachable from ``i``, the best-known predecessor edge of
    that pair (sources in node order, then targets in node order).
    Unreachable pairs get no edge. Rebuilding a full path from the steps is
    left to the caller; `AllPairsTable.path` does it from the table.

    Returns:
        The step graph, or None if the negative-cost guard rejects the result.
    """
    table = floyd_warshall_table(graph)
    if table is None:
        return None

    result = PredecessorGraph()
    for node in graph.get_nodes():
        result.add_node(node)
    for i in table.node_ids:
        for j in table.node_ids:
            edge = table.predecessors[(i, j)]
            if i != j and edge is not None:
                result.add_step(i, j, edge)
    return result
