import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from cayleynet.builders._protocols import JoinableGraph, VertexAddable
from cayleynet.builders.unordered import IndexedNeighborGraphBuilder, NeighborGraphBuilder
from cayleynet.core._helpers import BuildState, VertexNotFoundError


class TestNeighborGraphBuilder(unittest.TestCase):
    def setUp(self):
        self.b = NeighborGraphBuilder()

    def test_join_creates_endpoints(self):
        self.assertTrue(self.b.join("a", "b"))
        g = self.b.graph
        self.assertTrue(g.contains_vertex("a"))
        self.assertTrue(g.has_edge("a", "b"))
        self.assertTrue(g.has_edge("b", "a"))
        self.assertEqual(g.vertex_count(), 2)
        self.assertEqual(g.edge_count(), 2)

    def test_duplicate_edge_rejected(self):
        self.b.join("a", "b")
        self.assertFalse(self.b.join("a", "b"))
        self.assertFalse(self.b.join("b", "a"))
        self.assertEqual(self.b.graph.edge_count(), 2)

    def test_add_vertex(self):
        self.assertTrue(self.b.add_vertex("solo"))
        self.assertFalse(self.b.add_vertex("solo"))
        self.assertEqual(self.b.graph.neighbors_of("solo"), frozenset())

    def test_has_edge_with_absent_source(self):
        self.assertFalse(self.b.graph.has_edge("nope", "a"))

    def test_neighbors_of_missing_raises(self):
        with self.assertRaises(VertexNotFoundError):
            self.b.graph.neighbors_of("nope")

    def test_finish_freezes(self):
        self.b.join("a", "b")
        g = self.b.finish()
        self.assertIs(g.state, BuildState.FINISHED)
        self.assertTrue(g.is_finished)
        self.assertFalse(self.b.join("a", "c"))
        self.assertFalse(self.b.add_vertex("c"))
        self.assertFalse(g.contains_vertex("c"))
        # finishing again is harmless
        self.assertIs(self.b.finish(), g)

    def test_degree_defaults_to_minus_one(self):
        g = self.b.graph
        self.assertFalse(g.is_regular)
        self.assertEqual(g.degree, -1)

    def test_regular_edge_count_after_finish(self):
        b = NeighborGraphBuilder(degree=2)
        for u, v in [(0, 1), (1, 2), (2, 0)]:
            b.join(u, v)
        g = b.finish()
        self.assertTrue(g.is_regular)
        self.assertEqual(g.edge_count(), 3 * 2)

    def test_capabilities(self):
        self.assertIsInstance(self.b, JoinableGraph)
        self.assertIsInstance(self.b, VertexAddable)


class TestIndexedNeighborGraphBuilder(unittest.TestCase):
    def test_indices_follow_first_appearance(self):
        b = IndexedNeighborGraphBuilder()
        b.join("c", "a")
        b.join("a", "b")
        g = b.graph
        self.assertEqual([g.index_of(v) for v in ("c", "a", "b")], [1, 2, 3])
        self.assertEqual(g.element_at(3), "b")
        self.assertEqual(g.elements_in_range(1, 2), ["c", "a"])

    def test_finish_sorts_neighbor_lists(self):
        b = IndexedNeighborGraphBuilder()
        b.add_vertex("hub")
        for v in ("p", "q", "r"):
            b.add_vertex(v)
        b.join("hub", "r")
        b.join("hub", "p")
        b.join("hub", "q")
        self.assertEqual(b.graph.neighbors_of("hub"), ("r", "p", "q"))
        g = b.finish()
        self.assertEqual(g.neighbors_of("hub"), ("p", "q", "r"))

    def test_self_loop_listed_once(self):
        b = IndexedNeighborGraphBuilder()
        self.assertTrue(b.join("v", "v"))
        self.assertEqual(b.graph.neighbors_of("v"), ("v",))
        self.assertFalse(b.join("v", "v"))


if __name__ == "__main__":
    unittest.main()
