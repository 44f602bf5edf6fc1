import operator

from .base import SimpleGraph
from .edge import as_edge
from .errors import DuplicateEdgeError, MissingEdgeError


class _AdjacencyListGraph(SimpleGraph):
    """Graph storing adjacency explicitly as per-vertex lists.

    Storage is an edge set plus two parallel lists of lists: ``_fadjlist[v - 1]``
    holds the destinations of the edges leaving ``v`` and ``_badjlist[v - 1]``
    the sources of the edges arriving at ``v``. New neighbors are appended, so
    adjacency lists are in insertion order.

    Parameters
    ----------
    n : int, optional
        Initial number of vertices.

    """

    def __init__(self, n=0):
        n = operator.index(n)
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self._nv = n
        self._edges = set()
        self._fadjlist = [[] for _ in range(n)]  # [src]: (dst, dst, dst)
        self._badjlist = [[] for _ in range(n)]  # [dst]: (src, src, src)

    @property
    def nv(self):
        return self._nv

    def fadj(self, v=None):
        """Forward adjacency of ``v``, or of every vertex when ``v`` is None.

        The per-vertex list is the graph's own storage (O(1) access); treat it as
        read-only. The whole-graph form returns fresh lists.
        """
        if v is None:
            return [list(a) for a in self._fadjlist]
        self._check_vertex(v)
        return self._fadjlist[v - 1]

    def badj(self, v=None):
        """Backward adjacency of ``v``, or of every vertex when ``v`` is None.

        Same ownership rules as :meth:`fadj`.
        """
        if v is None:
            return [list(a) for a in self._badjlist]
        self._check_vertex(v)
        return self._badjlist[v - 1]

    def has_edge(self, u, v=None):
        return self._edge_key(u, v) in self._edges

    def add_vertex(self):
        self._nv += 1
        self._fadjlist.append([])
        self._badjlist.append([])
        return self._nv

    def add_edge(self, u, v=None):
        """Add a new edge to the graph.

        Parameters
        ----------
        u : int | Edge
            Source vertex, or a whole edge when ``v`` is omitted.
        v : int, optional
            Destination vertex.

        Returns
        -------
        Edge
            The edge as stored (canonical order for undirected graphs).

        Raises
        ------
        BoundsError
            If either endpoint is not a vertex of the graph.
        DuplicateEdgeError
            If the edge is already in the graph.

        """
        e = as_edge(u, v)
        self._check_vertex(e.src)
        self._check_vertex(e.dst)
        if self.has_edge(e):
            raise DuplicateEdgeError(e)
        return self._unsafe_add_edge(e)

    def rem_edge(self, u, v=None):
        """Remove an edge from the graph.

        Raises
        ------
        MissingEdgeError
            If the edge is not in the graph. Nothing is modified in that case.

        """
        e = as_edge(u, v)
        key = self._canonical(e)
        if key not in self._edges:
            raise MissingEdgeError(e)
        self._unsafe_rem_edge(key)
        return key

    def copy(self):
        g = type(self)()
        g._nv = self._nv
        g._edges = set(self._edges)
        g._fadjlist = [list(a) for a in self._fadjlist]
        g._badjlist = [list(a) for a in self._badjlist]
        return g


class Graph(_AdjacencyListGraph):
    """An undirected graph.

    Each edge is recorded in both endpoints' adjacency lists, so for every
    vertex the forward and backward lists hold the same neighbors. A self-loop
    appears once in its vertex's lists.

    Examples
    --------
    >>> g = Graph(3)
    >>> g.add_edge(2, 1)
    Edge(src=1, dst=2)
    >>> g.has_edge(2, 1), g.ne
    (True, 1)

    """

    directed = False

    def _unsafe_add_edge(self, e):
        e = e.canonical()
        s, d = e
        self._fadjlist[s - 1].append(d)
        self._badjlist[d - 1].append(s)
        if s != d:
            self._fadjlist[d - 1].append(s)
            self._badjlist[s - 1].append(d)
        self._edges.add(e)
        return e

    def _unsafe_rem_edge(self, e):
        s, d = e
        self._fadjlist[s - 1].remove(d)
        self._badjlist[d - 1].remove(s)
        if s != d:
            self._fadjlist[d - 1].remove(s)
            self._badjlist[s - 1].remove(d)
        self._edges.remove(e)


class DiGraph(_AdjacencyListGraph):
    """A directed graph."""

    directed = True

    def _unsafe_add_edge(self, e):
        s, d = e
        self._fadjlist[s - 1].append(d)
        self._badjlist[d - 1].append(s)
        self._edges.add(e)
        return e

    def _unsafe_rem_edge(self, e):
        s, d = e
        self._fadjlist[s - 1].remove(d)
        self._badjlist[d - 1].remove(s)
        self._edges.remove(e)
