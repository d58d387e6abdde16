import pytest

from wgraph.algorithms.spanning_tree import kruskal, prim
from wgraph.algorithms.topology import is_connected
from wgraph.graph.model import Edge, Graph, Node

MST_ALGORITHMS = [kruskal, prim]


def _pairs(tree):
    return {frozenset((e.source, e.target)) for e in tree.get_edges()}


@pytest.mark.parametrize("mst", MST_ALGORITHMS)
class TestCommon:
    def test_diamond(self, mst, diamond):
        tree = mst(diamond)
        assert tree is not None
        assert tree.total_cost() == 8
        assert tree.num_edges == 3
        assert tree.num_nodes == 4
        assert _pairs(tree) == {
            frozenset((0, 2)),
            frozenset((1, 2)),
            frozenset((1, 3)),
        }

    def test_result_is_spanning_and_connected(self, mst, diamond):
        tree = mst(diamond)
        assert {n.id for n in tree.get_nodes()} == {0, 1, 2, 3}
        assert is_connected(tree)

    def test_disconnected_returns_none(self, mst, two_islands):
        assert mst(two_islands) is None

    def test_single_node(self, mst, single):
        tree = mst(single)
        assert tree is not None
        assert [n.id for n in tree.get_nodes()] == [0]
        assert tree.num_edges == 0

    def test_empty_graph(self, mst):
        tree = mst(Graph())
        assert tree is not None
        assert tree.num_nodes == 0

    def test_parallel_edges_pick_cheapest(self, mst, line3):
        tree = mst(line3)
        assert tree.total_cost() == 2

    def test_input_unchanged(self, mst, diamond):
        before = diamond.get_edges()
        mst(diamond)
        assert diamond.get_edges() == before

    def test_node_attributes_preserved(self, mst, diamond):
        tree = mst(diamond)
        assert tree.get_node(3) == diamond.get_node(3)


class TestKruskal:
    def test_rejects_directed_edges(self, one_way):
        assert kruskal(one_way) is None

    def test_keeps_original_endpoints(self, diamond):
        tree = kruskal(diamond)
        assert tree.get_edges() == (
            Edge(0, 2, 1, True),
            Edge(2, 1, 2, True),
            Edge(1, 3, 5, True),
        )

    def test_self_loops_ignored(self):
        g = Graph()
        g.add_node(Node(0))
        g.add_node(Node(1))
        g.add_edge(0, 0, 0)
        g.add_edge(0, 1, 3)
        tree = kruskal(g)
        assert tree.get_edges() == (Edge(0, 1, 3, True),)

    def test_tie_takes_first_stored(self):
        g = Graph()
        for i in range(3):
            g.add_node(Node(i))
        g.add_edge(0, 1, 1)
        g.add_edge(1, 2, 1)
        g.add_edge(0, 2, 1)
        assert kruskal(g).get_edges() == (Edge(0, 1, 1), Edge(1, 2, 1))


class TestPrim:
    def test_crosses_edges_stored_on_other_endpoint(self):
        # Every edge is stored on the higher id; node 0 has no stored adjacency.
        g = Graph()
        for i in range(3):
            g.add_node(Node(i))
        g.add_edge(1, 0, 2)
        g.add_edge(2, 0, 1)
        g.add_edge(2, 1, 5)
        tree = prim(g)
        assert tree is not None
        assert tree.total_cost() == 3

    def test_starts_from_first_node(self, diamond):
        tree = prim(diamond)
        assert tree.get_nodes()[0].id == 0
        assert tree.get_edges()[0] == Edge(0, 2, 1, True)

    def test_directed_edge_unreachable_from_start(self):
        g = Graph()
        g.add_node(Node(0))
        g.add_node(Node(1))
        g.add_edge(1, 0, 1, False)
        assert prim(g) is None
