"""Conversion between `Graph` and NetworkX graphs.

`to_networkx` keeps the stored direction of every edge: a bidirectional edge
becomes a single ``u -> v`` NetworkX edge carrying ``bidirectional=True``.
Call `make_direct` first for a graph where both directions are explicit.
"""

from __future__ import annotations

from typing import Union

import networkx as nx

from wgraph.graph.model import Graph, Node
from wgraph.types.base import Cost

NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """Convert a graph to a NetworkX ``MultiDiGraph``.

    Node attributes: ``coords``, ``cost``. Edge attributes: ``cost``,
    ``bidirectional``. Edge keys follow storage order per node pair.
    """
    nx_graph = nx.MultiDiGraph()
    for node in graph.get_nodes():
        nx_graph.add_node(node.id, coords=node.coords, cost=node.cost)
    for edge in graph.get_edges():
        nx_graph.add_edge(
            edge.source,
            edge.target,
            cost=edge.cost,
            bidirectional=edge.bidirectional,
        )
    return nx_graph


def from_networkx(
    nx_graph: NxGraph,
    *,
    cost_attr: str = "cost",
    default_cost: Cost = 1,
) -> Graph:
    """Convert a NetworkX graph to a `Graph`.

    Edges of undirected NetworkX graphs become bidirectional edges. For
    directed graphs the ``bidirectional`` edge attribute is honoured when
    present and defaults to False.

    Args:
        nx_graph: Any NetworkX graph with integer node labels.
        cost_attr: Edge attribute holding the cost.
        default_cost: Cost used when the attribute is missing.

    Returns:
        The converted graph.

    Raises:
        TypeError: If ``nx_graph`` is not a NetworkX graph or a node label is
            not an integer.
    """
    if not isinstance(nx_graph, nx.Graph):
        raise TypeError(f"Expected a NetworkX graph, got {type(nx_graph).__name__}")

    directed = nx_graph.is_directed()
    graph = Graph()
    for node_id, data in nx_graph.nodes(data=True):
        if not isinstance(node_id, int) or isinstance(node_id, bool):
            raise TypeError(f"Node labels must be integers, got {node_id!r}")
        coords = tuple(data.get("coords", ()))
        graph.add_node(Node(node_id, coords, data.get("cost", 0)))

    for u, v, data in nx_graph.edges(data=True):
        bidirectional = bool(data.get("bidirectional", False)) if directed else True
        graph.add_edge(u, v, data.get(cost_attr, default_cost), bidirectional)
    return graph
