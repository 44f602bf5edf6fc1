import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from simplegraphs.core import Edge, dst, src
from simplegraphs.core.edge import as_edge


class TestEdge(unittest.TestCase):
    def test_ordered_pair_equality(self):
        self.assertEqual(Edge(1, 2), Edge(1, 2))
        self.assertNotEqual(Edge(1, 2), Edge(2, 1))
        self.assertEqual(len({Edge(1, 2), Edge(1, 2), Edge(2, 1)}), 2)

    def test_accessors_and_reverse(self):
        e = Edge(3, 5)
        self.assertEqual(src(e), 3)
        self.assertEqual(dst(e), 5)
        self.assertEqual(e.reverse(), Edge(5, 3))
        self.assertEqual(Edge(5, 3).canonical(), e)
        self.assertEqual(e.canonical(), e)

    def test_str(self):
        self.assertEqual(str(Edge(1, 2)), "edge 1 - 2")

    def test_is_self_loop(self):
        self.assertTrue(Edge(4, 4).is_self_loop())
        self.assertFalse(Edge(4, 5).is_self_loop())
        self.assertFalse(Edge(5, 4).canonical().is_self_loop())

    def test_immutable(self):
        e = Edge(1, 2)
        with self.assertRaises(AttributeError):
            e.src = 4

    def test_as_edge_call_forms(self):
        self.assertEqual(as_edge(1, 2), Edge(1, 2))
        self.assertEqual(as_edge(Edge(1, 2)), Edge(1, 2))
        self.assertEqual(as_edge((4, 3)), Edge(4, 3))
        with self.assertRaises(TypeError):
            as_edge(1.5, 2)


if __name__ == "__main__":
    unittest.main()
