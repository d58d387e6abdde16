import pytest

from wgraph.graph.model import Graph, Node


def _graph(num_nodes, edges):
    g = Graph()
    for node_id in range(num_nodes):
        g.add_node(Node(node_id, (float(node_id), 0.0)))
    for source, target, cost, bidirectional in edges:
        g.add_edge(source, target, cost, bidirectional)
    return g


@pytest.fixture
def diamond():
    # All edges bidirectional:
    #
    #        [4]
    #    0 ─────── 1 ─────── 3
    #    │       ╱    [5]    │
    # [1]│  [2]╱             │[8]
    #    │   ╱               │
    #    2 ──────────────────┘
    #
    # MST: 0-2, 2-1, 1-3 (cost 8). Shortest 0->3: 0-2-1-3 (cost 8).
    return _graph(
        4,
        [
            (0, 1, 4, True),
            (0, 2, 1, True),
            (2, 1, 2, True),
            (1, 3, 5, True),
            (2, 3, 8, True),
        ],
    )


@pytest.fixture
def line3():
    # 0 <-> 1 <-> 2 with parallel 1-2 edges of cost 1, 3 and 7.
    return _graph(
        3,
        [
            (0, 1, 1, True),
            (1, 2, 3, True),
            (1, 2, 1, True),
            (1, 2, 7, True),
        ],
    )


@pytest.fixture
def two_islands():
    # {0, 1} and {2, 3} with no edge between them.
    return _graph(4, [(0, 1, 2, True), (2, 3, 5, True)])


@pytest.fixture
def one_way():
    # 0 -> 1 -> 2 directed-only, plus 0 <-> 2 bidirectional.
    return _graph(3, [(0, 1, 1, False), (1, 2, 1, False), (0, 2, 5, True)])


@pytest.fixture
def single():
    return _graph(1, [])
