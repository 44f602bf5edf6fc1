import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import numpy as np
import scipy.sparse as sp

from simplegraphs.core import (
    BoundsError,
    DefaultDistance,
    DiGraph,
    Edge,
    Graph,
    MissingEdgeError,
    SparseDiGraph,
    SparseGraph,
)


def _assert_sparse_consistent(tc, g):
    """Edge set, matrix cells and both adjacency reads agree."""
    tc.assertEqual(g.ne, len(g.edges()))
    cells = sum(1 if g.is_directed() or e.is_self_loop() else 2 for e in g.edges())
    tc.assertEqual(g.weights().count_nonzero(), cells)
    for u, v in g.edges():
        tc.assertTrue(g.has_edge(u, v))
        tc.assertNotEqual(g.weight(u, v), 0)
        tc.assertIn(v, g.fadj(u))
        tc.assertIn(u, g.badj(v))
    for u in g.vertices():
        for v in g.fadj(u):
            tc.assertTrue(g.has_edge(u, v))


class TestSparseConstruction(unittest.TestCase):
    def test_empty(self):
        g = SparseGraph(3)
        self.assertEqual(g.nv, 3)
        self.assertEqual(g.ne, 0)
        self.assertEqual(list(g.vertices()), [1, 2, 3])
        self.assertEqual(g.dtype, np.float64)
        self.assertEqual(g.fadj(), [[], [], []])

    def test_from_graph_default_weights(self):
        h = Graph(4)
        h.add_edge(1, 2)
        h.add_edge(3, 2)
        g = SparseGraph.from_graph(h)
        self.assertEqual(g.nv, 4)
        self.assertEqual(g.edges(), h.edges())
        self.assertEqual(g.dtype, np.float64)
        self.assertEqual(g.weight(1, 2), 1.0)
        self.assertEqual(g.weight(2, 3), 1.0)
        self.assertEqual(g.fadj(2), [1, 3])
        self.assertTrue(g.issubset(h) and h.issubset(g))

    def test_from_graph_weight_matrix(self):
        h = DiGraph(3)
        h.add_edge(1, 2)
        h.add_edge(2, 3)
        w = np.arange(1.0, 17.0).reshape(4, 4)  # larger than needed
        g = SparseDiGraph.from_graph(h, w)
        self.assertIsInstance(g, SparseDiGraph)
        self.assertEqual(g.weight(1, 2), w[0, 1])
        self.assertEqual(g.weight(2, 3), w[1, 2])
        self.assertEqual(g.weight(2, 1), 0)
        self.assertEqual(g.ne, 2)

    def test_from_graph_sparse_weights(self):
        h = Graph(2)
        h.add_edge(1, 2)
        w = sp.csr_matrix(np.array([[0.0, 2.5], [2.5, 0.0]]))
        g = SparseGraph.from_graph(h, w)
        self.assertEqual(g.weight(2, 1), 2.5)

    def test_from_graph_does_not_alias(self):
        h = Graph(3)
        h.add_edge(1, 2)
        g = SparseGraph.from_graph(h)
        h.add_edge(2, 3)
        self.assertEqual(g.ne, 1)
        g.add_edge(1, 3)
        self.assertEqual(h.ne, 2)
        self.assertFalse(h.has_edge(1, 3))

    def test_from_graph_rejects_zero_weight_on_edge(self):
        h = DiGraph(2)
        h.add_edge(1, 2)
        with self.assertRaises(ValueError):
            SparseDiGraph.from_graph(h, np.zeros((2, 2)))

    def test_from_graph_rejects_asymmetric_weights(self):
        h = Graph(2)
        h.add_edge(1, 2)
        with self.assertRaises(ValueError):
            SparseGraph.from_graph(h, np.array([[1.0, 2.0], [3.0, 1.0]]))

    def test_from_graph_directedness_must_match(self):
        with self.assertRaises(TypeError):
            SparseGraph.from_graph(DiGraph(2))
        with self.assertRaises(TypeError):
            SparseDiGraph.from_graph(Graph(2))

    def test_from_graph_rejects_weights_truncated_to_zero(self):
        h = Graph(2)
        h.add_edge(1, 2)
        with self.assertRaises(ValueError):
            SparseGraph.from_graph(h, np.full((2, 2), 0.5), dtype=np.int64)

    def test_from_graph_integer_dtype(self):
        h = DiGraph(3)
        h.add_edge(1, 2)
        h.add_edge(3, 1)
        g = SparseDiGraph.from_graph(h, np.full((3, 3), 2.7), dtype=np.int64)
        self.assertEqual(g.dtype, np.int64)
        self.assertEqual(g.weight(1, 2), 2)
        self.assertEqual(g.weight(3, 1), 2)
        _assert_sparse_consistent(self, g)

    def test_from_graph_rejects_nan_weight(self):
        h = DiGraph(2)
        h.add_edge(1, 2)
        w = np.array([[1.0, np.nan], [1.0, 1.0]])
        with self.assertRaises(ValueError):
            SparseDiGraph.from_graph(h, w)

    def test_from_graph_ignores_nan_off_the_edges(self):
        h = DiGraph(2)
        h.add_edge(1, 2)
        w = np.array([[np.nan, 4.0], [np.nan, np.nan]])
        g = SparseDiGraph.from_graph(h, w)
        self.assertEqual(g.weight(1, 2), 4.0)
        _assert_sparse_consistent(self, g)


class TestSparseMutation(unittest.TestCase):
    def test_weight_overwrite(self):
        g = SparseGraph(3)
        g.add_edge(1, 2, weight=3.0)
        g.add_edge(1, 2, weight=7.0)
        self.assertEqual(g.ne, 1)
        self.assertEqual(g.edges(), {Edge(1, 2)})
        self.assertEqual(g.weight(1, 2), 7.0)
        self.assertEqual(g.weight(2, 1), 7.0)

    def test_reverse_readd_overwrites_undirected(self):
        g = SparseGraph(3)
        g.add_edge(1, 2, weight=3.0)
        self.assertEqual(g.add_edge(2, 1, weight=4.0), Edge(1, 2))
        self.assertEqual(g.ne, 1)
        self.assertEqual(g.weight(1, 2), 4.0)

    def test_directed_sets_one_cell(self):
        g = SparseDiGraph(3)
        g.add_edge(1, 2, weight=2.0)
        self.assertTrue(g.has_edge(1, 2))
        self.assertFalse(g.has_edge(2, 1))
        self.assertEqual(g.fadj(1), [2])
        self.assertEqual(g.badj(2), [1])
        self.assertEqual(g.badj(1), [])
        self.assertEqual(g.in_edges(2), [Edge(1, 2)])

    def test_undirected_symmetric_matrix(self):
        g = SparseGraph(3)
        g.add_edge(3, 1, weight=2.0)
        g.add_edge(2, 2)
        m = g.weights()
        self.assertEqual((m != m.T).nnz, 0)
        self.assertEqual(g.fadj(1), [3])
        self.assertEqual(g.badj(3), [1])
        self.assertEqual(g.fadj(2), [2])
        self.assertTrue(g.has_self_loop())

    def test_default_weight_is_one(self):
        g = SparseDiGraph(2, dtype=np.int64)
        g.add_edge(1, 2)
        self.assertEqual(g.weight(1, 2), 1)
        self.assertEqual(g.dtype, np.int64)

    def test_zero_weight_rejected(self):
        g = SparseGraph(2)
        with self.assertRaises(ValueError):
            g.add_edge(1, 2, weight=0)
        self.assertEqual(g.ne, 0)

    def test_weight_truncated_to_zero_rejected(self):
        g = SparseDiGraph(2, dtype=np.int64)
        with self.assertRaises(ValueError):
            g.add_edge(1, 2, weight=0.5)
        self.assertEqual(g.ne, 0)
        self.assertFalse(g.has_edge(1, 2))
        self.assertEqual(g.fadj(1), [])
        self.assertEqual(g.badj(2), [])
        _assert_sparse_consistent(self, g)

    def test_failed_overwrite_keeps_old_weight(self):
        g = SparseGraph(2, dtype=np.int32)
        g.add_edge(1, 2, weight=3)
        with self.assertRaises(ValueError):
            g.add_edge(2, 1, weight=-0.9)
        self.assertEqual(g.weight(1, 2), 3)
        self.assertEqual(g.weight(2, 1), 3)
        _assert_sparse_consistent(self, g)

    def test_fractional_weight_cast_to_integer_dtype(self):
        g = SparseGraph(3, dtype=np.int64)
        g.add_edge(1, 2, weight=2.7)
        g.add_edge(3, 3, weight=-1.5)
        self.assertEqual(g.weight(2, 1), 2)
        self.assertEqual(g.weight(3, 3), -1)
        self.assertEqual(g.fadj(3), [3])
        _assert_sparse_consistent(self, g)

    def test_nan_weight_rejected(self):
        g = SparseDiGraph(2)
        with self.assertRaises(ValueError):
            g.add_edge(1, 2, weight=float("nan"))
        h = SparseDiGraph(2, dtype=np.int64)
        with self.assertRaises(ValueError):
            h.add_edge(1, 2, weight=float("nan"))
        self.assertEqual(g.ne + h.ne, 0)
        _assert_sparse_consistent(self, g)
        _assert_sparse_consistent(self, h)

    def test_bounds(self):
        g = SparseGraph(2)
        with self.assertRaises(BoundsError):
            g.add_edge(1, 3)
        with self.assertRaises(BoundsError):
            g.weight(0, 1)
        self.assertFalse(g.has_edge(1, 3))

    def test_rem_edge(self):
        g = SparseGraph(3)
        g.add_edge(1, 2, weight=2.0)
        g.add_edge(2, 3)
        g.rem_edge(2, 1)
        self.assertFalse(g.has_edge(1, 2))
        self.assertFalse(g.has_edge(2, 1))
        self.assertEqual(g.ne, 1)
        self.assertEqual(g.weights().nnz, 2)
        self.assertEqual(g.fadj(2), [3])

    def test_rem_missing_edge(self):
        g = SparseDiGraph(3)
        g.add_edge(1, 2)
        with self.assertRaises(MissingEdgeError):
            g.rem_edge(2, 1)
        with self.assertRaises(MissingEdgeError):
            g.rem_edge(5, 6)
        self.assertTrue(g.has_edge(1, 2))

    def test_add_vertex_resizes(self):
        g = SparseDiGraph(2)
        g.add_edge(1, 2, weight=5.0)
        self.assertEqual(g.add_vertex(), 3)
        self.assertEqual(g.add_vertices(2), 5)
        self.assertEqual(g.weights().shape, (5, 5))
        g.add_edge(5, 1)
        self.assertEqual(g.badj(1), [5])
        self.assertEqual(g.weight(1, 2), 5.0)

    def test_adjacency_reflects_mutation(self):
        g = SparseDiGraph(3)
        g.add_edge(1, 2)
        self.assertEqual(g.fadj(1), [2])
        g.add_edge(1, 3)
        self.assertEqual(g.fadj(1), [2, 3])
        g.rem_edge(1, 2)
        self.assertEqual(g.fadj(1), [3])
        self.assertEqual(g.badj(2), [])


class TestSparseCopyAndEquality(unittest.TestCase):
    def test_copy_independent(self):
        g = SparseGraph(3)
        g.add_edge(1, 2, weight=3.0)
        h = g.copy()
        self.assertEqual(h, g)
        h.add_edge(1, 2, weight=9.0)
        h.add_edge(2, 3)
        self.assertEqual(g.weight(1, 2), 3.0)
        self.assertFalse(g.has_edge(2, 3))
        self.assertNotEqual(h, g)

    def test_equality_compares_weights(self):
        g = SparseGraph(2)
        g.add_edge(1, 2, weight=1.0)
        h = SparseGraph(2)
        h.add_edge(1, 2, weight=2.0)
        self.assertNotEqual(g, h)
        h.add_edge(1, 2, weight=1.0)
        self.assertEqual(g, h)

    def test_copy_equal_with_integer_weights(self):
        g = SparseDiGraph(3, dtype=np.int16)
        g.add_edge(1, 2, weight=7.9)
        g.add_edge(2, 3)
        h = g.copy()
        self.assertEqual(h, g)
        self.assertEqual(h.dtype, np.int16)
        _assert_sparse_consistent(self, h)


class TestDefaultDistance(unittest.TestCase):
    def test_slices(self):
        d = DefaultDistance(4)
        self.assertEqual(d.shape, (4, 4))
        block = d[:2, :3]
        self.assertEqual(block.shape, (2, 3))
        self.assertTrue((block == 1).all())
        self.assertEqual(d[1:, 0].shape, (3,))

    def test_scalar(self):
        d = DefaultDistance(3)
        self.assertEqual(d[2, 0], 1)
        with self.assertRaises(IndexError):
            d[3, 0]

    def test_unsized(self):
        d = DefaultDistance()
        self.assertEqual(d[:5, :5].shape, (5, 5))
        with self.assertRaises(ValueError):
            d[:, :2]


if __name__ == "__main__":
    unittest.main()
