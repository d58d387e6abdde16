"""Weighted graph with append-only nodes and edges.

`Graph` stores every edge once, in a flat arena. Each node's outgoing
adjacency is a list of indices into that arena, so the global edge sequence and
the per-origin view share the same `Edge` records.

An edge flagged ``bidirectional`` is still stored only on its origin. Making it
reachable from the destination is an explicit transform
(`wgraph.algorithms.topology.make_direct`), not a property of storage.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from wgraph.logging import get_logger
from wgraph.types.base import Cost

LOGGER = get_logger(__name__)

NodeID = int
NodeRecord = Tuple[NodeID, Sequence[float], Cost]
EdgeRecord = Tuple[NodeID, NodeID, Cost, bool]


class NodeNotFoundError(KeyError):
    """Raised when an operation references a node id absent from the graph."""

    def __init__(self, node_id: NodeID) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Node '{self.node_id}' does not exist."


@dataclass(frozen=True)
class Node:
    """A graph node.

    Attributes:
        id: Unique integer identifier.
        coords: Spatial coordinates of arbitrary, fixed dimension.
        cost: Scalar weight attached to the node.
    """

    id: NodeID
    coords: Tuple[float, ...] = ()
    cost: Cost = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", tuple(self.coords))


@dataclass(frozen=True)
class Edge:
    """A weighted edge from ``source`` to ``target``.

    Equality and hashing cover all four fields. Ordering (``<``, ``<=``,
    ``>``, ``>=``) compares ``cost`` only; stable sorts therefore keep
    storage order among equal costs.

    Attributes:
        source: Origin node id.
        target: Destination node id.
        cost: Edge cost.
        bidirectional: Whether the edge may be traversed target -> source.
    """

    source: NodeID
    target: NodeID
    cost: Cost = 0
    bidirectional: bool = True

    def __lt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.cost < other.cost

    def __gt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.cost > other.cost

    def __le__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.cost <= other.cost

    def __ge__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.cost >= other.cost

    def reversed(self) -> Edge:
        """Return the mirrored edge with the same cost and flag."""
        return Edge(self.target, self.source, self.cost, self.bidirectional)


class Graph:
    """Append-only weighted multigraph.

    Rules:
      - Node ids are unique; `add_node` refuses duplicates and returns False.
      - `add_edge` requires both endpoints and raises `NodeNotFoundError`
        otherwise.
      - Nodes and edges are never updated or removed. Transforms build a new
        graph from the old one.
    """

    def __init__(self) -> None:
        self._nodes: Dict[NodeID, Node] = {}
        self._edges: List[Edge] = []
        self._adj: Dict[NodeID, List[int]] = {}

    @classmethod
    def from_records(
        cls, nodes: Iterable[NodeRecord], edges: Iterable[EdgeRecord] = ()
    ) -> Graph:
        """Build a graph from plain node and edge records.

        Args:
            nodes: ``(id, coords, cost)`` tuples.
            edges: ``(source, target, cost, bidirectional)`` tuples.

        Returns:
            The populated graph.

        Raises:
            ValueError: If two node records share an id.
            NodeNotFoundError: If an edge references an unknown node.
        """
        graph = cls()
        for node_id, coords, cost in nodes:
            if not graph.add_node(Node(node_id, tuple(coords), cost)):
                raise ValueError(f"Duplicate node id '{node_id}' in node records.")
        for source, target, cost, bidirectional in edges:
            graph.add_edge(source, target, cost, bool(bidirectional))
        return graph

    @property
    def num_nodes(self) -> int:
        return len(self._nodes)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._nodes.values()))

    def __repr__(self) -> str:
        return f"Graph(num_nodes={self.num_nodes}, num_edges={self.num_edges})"

    def add_node(self, node: Node) -> bool:
        """Insert a node unless its id is already present.

        Args:
            node: Node to insert.

        Returns:
            True if inserted, False if a node with the same id exists.
        """
        if node.id in self._nodes:
            LOGGER.debug("Rejected duplicate node id %s", node.id)
            return False
        self._nodes[node.id] = node
        self._adj[node.id] = []
        return True

    def add_edge(
        self,
        source: NodeID,
        target: NodeID,
        cost: Cost = 0,
        bidirectional: bool = True,
    ) -> Edge:
        """Append an edge and register it on the origin's adjacency.

        The destination's adjacency is left untouched even when
        ``bidirectional`` is True.

        Args:
            source: Origin node id. Must exist.
            target: Destination node id. Must exist.
            cost: Edge cost.
            bidirectional: Edge direction flag.

        Returns:
            The stored edge.

        Raises:
            NodeNotFoundError: If either endpoint is missing.
        """
        if source not in self._nodes:
            raise NodeNotFoundError(source)
        if target not in self._nodes:
            raise NodeNotFoundError(target)

        edge = Edge(source, target, cost, bidirectional)
        self._adj[source].append(len(self._edges))
        self._edges.append(edge)
        return edge

    def has_node(self, node_id: NodeID) -> bool:
        return node_id in self._nodes

    def get_node(self, node_id: NodeID) -> Node:
        """Return the node with the given id.

        Raises:
            NodeNotFoundError: If no such node exists.
        """
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    def get_nodes(self) -> List[Node]:
        """Return a snapshot list of all nodes in insertion order."""
        return list(self._nodes.values())

    def get_edges(self) -> Tuple[Edge, ...]:
        """Return all edges in insertion order."""
        return tuple(self._edges)

    def out_edges(self, node_id: NodeID) -> List[Edge]:
        """Return the edges stored on ``node_id`` as origin.

        Raises:
            NodeNotFoundError: If no such node exists.
        """
        try:
            indices = self._adj[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None
        return [self._edges[i] for i in indices]

    def total_cost(self) -> Cost:
        """Sum of all edge costs."""
        return sum(edge.cost for edge in self._edges)

    def copy(self) -> Graph:
        """Return an independent copy with the same nodes and edges."""
        clone = Graph()
        clone._nodes = dict(self._nodes)
        clone._edges = list(self._edges)
        clone._adj = {node_id: list(idx) for node_id, idx in self._adj.items()}
        return clone
