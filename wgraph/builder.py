"""Random graph generation with an injected random state.

`GraphBuilder` never touches the global ``random`` module. Pass a
``random.Random`` for full control, or set ``seed`` in the config to get the
same graph from every `build` call.

Usage:
    graph = GraphBuilder(rng=random.Random(7)).set_num_nodes(5).set_num_edges(7).build()
"""

from __future__ import annotations

import random
from dataclasses import replace
from typing import List, Optional

from wgraph.config import BUILDER_CONFIG, BuilderConfig
from wgraph.graph.model import Graph, Node
from wgraph.logging import get_logger
from wgraph.types.base import Cost, DirectMode

LOGGER = get_logger(__name__)


def _is_int(value: Cost) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def random_cost(rng: random.Random, low: Cost, high: Cost) -> Cost:
    """Draw a cost in ``[low, high]``.

    Integers when both limits are integers, uniform floats otherwise.
    """
    if _is_int(low) and _is_int(high):
        return rng.randint(int(low), int(high))
    return rng.uniform(low, high)


class GraphBuilder:
    """Fluent builder for random weighted graphs.

    Attributes:
        config: Private copy of the builder parameters; setters edit it.
    """

    def __init__(
        self,
        config: Optional[BuilderConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = replace(config if config is not None else BUILDER_CONFIG)
        self._rng = rng

    def set_num_nodes(self, value: int) -> GraphBuilder:
        self.config.num_nodes = value
        return self

    def set_num_edges(self, value: int) -> GraphBuilder:
        self.config.num_edges = value
        return self

    def set_dimension(self, value: int) -> GraphBuilder:
        self.config.dimension = value
        return self

    def set_connected(self, value: bool) -> GraphBuilder:
        self.config.connected = value
        return self

    def set_direct_mode(self, value: DirectMode) -> GraphBuilder:
        self.config.direct_mode = value
        return self

    def set_weighted_nodes(self, value: bool) -> GraphBuilder:
        self.config.weighted_nodes = value
        return self

    def set_weighted_edges(self, value: bool) -> GraphBuilder:
        self.config.weighted_edges = value
        return self

    def set_edge_cost_limits(self, low: Cost, high: Cost) -> GraphBuilder:
        self.config.min_edge_cost, self.config.max_edge_cost = low, high
        return self

    def set_node_cost_limits(self, low: Cost, high: Cost) -> GraphBuilder:
        self.config.min_node_cost, self.config.max_node_cost = low, high
        return self

    def set_seed(self, value: Optional[int]) -> GraphBuilder:
        self.config.seed = value
        return self

    def _bidirectional(self, rng: random.Random) -> bool:
        mode = self.config.direct_mode
        if mode == DirectMode.ALL_DIRECT:
            return False
        if mode == DirectMode.ALL_BIDIRECTIONAL:
            return True
        return rng.random() < 0.5

    def _edge_cost(self, rng: random.Random) -> Cost:
        if not self.config.weighted_edges:
            return 1
        return random_cost(rng, *self.config.edge_cost_limits)

    def build(self) -> Optional[Graph]:
        """Generate a graph.

        Nodes get ids ``0..num_nodes-1`` and uniform random coordinates. In
        connected mode a random walk first links every node (``num_nodes - 1``
        edges), then the remaining edges join random endpoints (self-loops and
        parallel edges included).

        Returns:
            The graph, or None if the requested edge count cannot make a
            connected graph or edges were requested without any nodes.

        Raises:
            ValueError: If the config holds invalid values.
        """
        cfg = self.config
        cfg.validate()
        rng = self._rng if self._rng is not None else random.Random(cfg.seed)

        if cfg.connected and cfg.num_edges < cfg.num_nodes - 1:
            LOGGER.debug(
                "Cannot connect %d nodes with %d edges", cfg.num_nodes, cfg.num_edges
            )
            return None
        if cfg.num_nodes == 0 and cfg.num_edges > 0:
            LOGGER.debug("Cannot place %d edges without nodes", cfg.num_edges)
            return None

        graph = Graph()
        for node_id in range(cfg.num_nodes):
            coords = tuple(
                rng.uniform(cfg.coord_min, cfg.coord_max) for _ in range(cfg.dimension)
            )
            cost = random_cost(rng, *cfg.node_cost_limits) if cfg.weighted_nodes else 0
            graph.add_node(Node(node_id, coords, cost))

        if cfg.connected and cfg.num_nodes > 1:
            unvisited: List[int] = list(range(1, cfg.num_nodes))
            current = 0
            while unvisited:
                nxt = unvisited.pop(rng.randrange(len(unvisited)))
                cost = self._edge_cost(rng)
                graph.add_edge(current, nxt, cost, self._bidirectional(rng))
                current = nxt

        while graph.num_edges < cfg.num_edges:
            source = rng.randrange(cfg.num_nodes)
            target = rng.randrange(cfg.num_nodes)
            cost = self._edge_cost(rng)
            graph.add_edge(source, target, cost, self._bidirectional(rng))

        LOGGER.debug("Built %r", graph)
        return graph
