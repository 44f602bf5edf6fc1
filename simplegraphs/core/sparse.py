import logging
import operator

import numpy as np
import scipy.sparse as sp

from ..linalg import adjacency_matrix
from .base import SimpleGraph
from .edge import as_edge
from .errors import MissingEdgeError

logger = logging.getLogger(__name__)

DEFAULT_DTYPE = np.float64


class DefaultDistance:
    """Weight source that is 1 everywhere.

    Behaves like an ``nv x nv`` array of ones for indexing purposes without
    allocating it until sliced::

        >>> DefaultDistance(4)[:2, :3].shape
        (2, 3)

    Parameters
    ----------
    nv : int, optional
        Logical size. When None, slices must carry an explicit stop.

    """

    def __init__(self, nv=None):
        self.nv = nv

    @property
    def shape(self):
        return (self.nv, self.nv)

    def _extent(self, key):
        if isinstance(key, slice):
            if self.nv is None:
                if key.stop is None:
                    raise ValueError("slicing an unsized DefaultDistance needs an explicit stop")
                return len(range(*key.indices(key.stop)))
            return len(range(*key.indices(self.nv)))
        i = operator.index(key)
        if self.nv is not None and not -self.nv <= i < self.nv:
            raise IndexError(f"index {i} out of range for size {self.nv}")
        return None

    def __getitem__(self, key):
        if not isinstance(key, tuple):
            key = (key, slice(None))
        if len(key) != 2:
            raise IndexError("DefaultDistance is two-dimensional")
        shape = tuple(n for n in map(self._extent, key) if n is not None)
        if not shape:
            return 1
        return np.ones(shape, dtype=np.int64)

    def __repr__(self):
        return f"DefaultDistance({self.nv})"


class MatrixCache:
    """Cache of compressed (CSR/CSC) copies of a sparse graph's weight matrix.

    The graph keeps its weights in a DOK (Dictionary Of Keys) matrix, which is
    cheap to assign into; row and column extraction go through these
    compressed copies, rebuilt lazily whenever the graph's version changes.
    """

    def __init__(self, graph):
        self._G = graph
        self._csr = None
        self._csc = None
        self._csr_version = None
        self._csc_version = None

    @property
    def csr(self):
        """CSR (Compressed Sparse Row) copy, built on first access."""
        if self._csr is None or self._csr_version != self._G._version:
            self._csr = self._G._matrix.tocsr()
            self._csr.sort_indices()
            self._csr_version = self._G._version
        return self._csr

    @property
    def csc(self):
        """CSC (Compressed Sparse Column) copy, built on first access."""
        if self._csc is None or self._csc_version != self._G._version:
            self._csc = self._G._matrix.tocsc()
            self._csc.sort_indices()
            self._csc_version = self._G._version
        return self._csc


def _compressed_slice(m, i):
    """Return the 1-based vertex ids stored in compressed row/column ``i`` of ``m``."""
    lo, hi = m.indptr[i], m.indptr[i + 1]
    return (m.indices[lo:hi] + 1).tolist()


class _SparseMatrixGraph(SimpleGraph):
    """Graph stored as a sparse ``nv x nv`` weight matrix.

    A nonzero cell ``(u, v)`` (row ``u - 1``, column ``v - 1``) is an edge of
    weight ``m[u - 1, v - 1]``. The edge set is kept next to the matrix so that
    ``edges()`` and ``ne`` do not have to scan it.

    Unlike adjacency-list graphs, adding an edge that already exists is not an
    error: the cell is reassigned and the new weight replaces the old one.

    Parameters
    ----------
    n : int, optional
        Initial number of vertices.
    dtype : numpy dtype, optional
        Weight type (default ``float64``).

    """

    def __init__(self, n=0, dtype=DEFAULT_DTYPE):
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self._edges = set()
        self._matrix = sp.dok_matrix((n, n), dtype=dtype)
        self._version = 0
        self._cache = MatrixCache(self)

    @classmethod
    def from_graph(cls, g, weights=None, dtype=None):
        """Build a sparse graph from an existing graph and a weight source.

        The weight matrix is the element-wise product of ``adjacency_matrix(g)``
        and ``weights[:nv, :nv]``.

        Parameters
        ----------
        g : SimpleGraph
            Graph with the same directedness as ``cls``.
        weights : array-like | scipy.sparse matrix | DefaultDistance, optional
            Zero-based weight source; entry ``[u - 1, v - 1]`` weighs edge
            ``(u, v)``. Defaults to 1 everywhere.
        dtype : numpy dtype, optional
            Weight type. Defaults to ``float64`` for the default weights and to
            the product's type otherwise.

        Raises
        ------
        TypeError
            If ``g`` and ``cls`` differ in directedness.
        ValueError
            If an edge gets a NaN weight or a weight that is zero once cast to
            ``dtype``, or (undirected) the weights are not symmetric on the
            edges.

        """
        if g.is_directed() != cls.directed:
            raise TypeError(f"cannot build {cls.__name__} from {type(g).__name__}")
        n = g.nv
        if weights is None:
            weights = DefaultDistance(n)
            if dtype is None:
                dtype = DEFAULT_DTYPE

        adj = adjacency_matrix(g)
        w = weights[:n, :n]
        if not sp.issparse(w):
            w = np.asarray(w)
        m = sp.csr_matrix(adj.multiply(w))
        if np.isnan(m.data).any():
            raise ValueError("weights must not be NaN on an edge")
        if dtype is not None:
            m = m.astype(dtype)
        # after the cast, so weights truncated to 0 count as missing
        m.eliminate_zeros()

        if m.nnz != adj.nnz:
            raise ValueError("weights must be nonzero on every edge")
        if not cls.directed and (m != m.T).nnz:
            raise ValueError(f"weights for {cls.__name__} must be symmetric on its edges")

        graph = cls(n, dtype=m.dtype)
        graph._matrix = m.todok()
        graph._edges = set(g.edges())
        logger.debug(
            "Built %s with %d vertices and %d edges from %s",
            cls.__name__, n, len(graph._edges), type(g).__name__,
        )
        return graph

    @property
    def nv(self):
        return self._matrix.shape[0]

    @property
    def dtype(self):
        return self._matrix.dtype

    def fadj(self, v=None):
        """Destinations of the edges leaving ``v``, read from row ``v - 1``.

        Materialized in O(degree) as a new, sorted list.
        """
        csr = self._cache.csr
        if v is None:
            return [_compressed_slice(csr, i) for i in range(self.nv)]
        self._check_vertex(v)
        return _compressed_slice(csr, v - 1)

    def badj(self, v=None):
        """Sources of the edges arriving at ``v``, read from column ``v - 1``."""
        csc = self._cache.csc
        if v is None:
            return [_compressed_slice(csc, i) for i in range(self.nv)]
        self._check_vertex(v)
        return _compressed_slice(csc, v - 1)

    def has_edge(self, u, v=None):
        e = as_edge(u, v)
        if not (self.has_vertex(e.src) and self.has_vertex(e.dst)):
            return False
        return self._matrix.get((e.src - 1, e.dst - 1), 0) != 0

    def weight(self, u, v=None):
        """Weight of the edge ``u -> v`` (0 if there is no such edge)."""
        e = as_edge(u, v)
        self._check_vertex(e.src)
        self._check_vertex(e.dst)
        return self._matrix.get((e.src - 1, e.dst - 1), self.dtype.type(0))

    def weights(self):
        """Return a CSR copy of the weight matrix."""
        return self._cache.csr.copy()

    def add_vertex(self):
        n = self.nv + 1
        self._matrix.resize((n, n))
        self._touch()
        return n

    def add_edge(self, u, v=None, weight=None):
        """Add an edge, or overwrite the weight of an existing one.

        Parameters
        ----------
        u : int | Edge
            Source vertex, or a whole edge when ``v`` is omitted.
        v : int, optional
            Destination vertex.
        weight : number, optional
            Edge weight; defaults to 1. It is cast to the graph's dtype first,
            and the cast value must be nonzero and not NaN.

        Returns
        -------
        Edge
            The edge as stored (canonical order for undirected graphs).

        Raises
        ------
        BoundsError
            If either endpoint is not a vertex of the graph.
        ValueError
            If ``weight`` is NaN or casts to zero.

        """
        e = as_edge(u, v)
        self._check_vertex(e.src)
        self._check_vertex(e.dst)
        w = self.dtype.type(1 if weight is None else weight)
        if w == 0 or np.isnan(w):
            raise ValueError(f"weight {weight!r} of {e} is not a nonzero {self.dtype}")
        return self._unsafe_add_edge(e, w)

    def rem_edge(self, u, v=None):
        """Remove an edge and clear its matrix cell(s).

        Raises
        ------
        MissingEdgeError
            If the edge is not in the graph.

        """
        e = as_edge(u, v)
        key = self._canonical(e)
        if key not in self._edges:
            raise MissingEdgeError(e)
        s, d = key
        self._matrix[s - 1, d - 1] = 0
        if not self.directed:
            self._matrix[d - 1, s - 1] = 0
        self._edges.remove(key)
        self._touch()
        return key

    def _unsafe_add_edge(self, e, weight):
        s, d = e
        self._matrix[s - 1, d - 1] = weight
        if not self.directed:
            self._matrix[d - 1, s - 1] = weight
        key = self._canonical(e)
        self._edges.add(key)
        self._touch()
        return key

    def _touch(self):
        self._version += 1

    def copy(self):
        g = type(self)(0, dtype=self.dtype)
        g._matrix = self._matrix.copy()
        g._edges = set(self._edges)
        return g

    def __eq__(self, other):
        eq = super().__eq__(other)
        if eq is not True:
            return eq
        return (self._cache.csr != other._cache.csr).nnz == 0


class SparseGraph(_SparseMatrixGraph):
    """An undirected graph backed by a symmetric sparse weight matrix."""

    directed = False


class SparseDiGraph(_SparseMatrixGraph):
    """A directed graph backed by a sparse weight matrix."""

    directed = True
