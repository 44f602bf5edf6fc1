from abc import ABC, abstractmethod
from numbers import Integral

from .edge import Edge, EdgeType, as_edge
from .errors import BoundsError


class SimpleGraph(ABC):
    """Storage contract shared by every graph representation.

    Vertices are the contiguous integer range ``1..nv``. Concrete classes
    provide the storage-specific pieces (vertex count, edge set, forward and
    backward adjacency, mutation); everything else here, and every function in
    :mod:`simplegraphs.core.degrees`, is written against that contract only.

    Notes
    -----
    - Undirected graphs store each edge once, smallest endpoint first
      (``Edge(2, 1)`` is stored as ``Edge(1, 2)``).
    - Graphs compare equal when they are the same concrete type with the same
      vertices and edges. They are mutable and therefore unhashable.

    """

    directed = False

    # Storage contract

    @property
    @abstractmethod
    def nv(self):
        """Number of vertices."""

    @abstractmethod
    def fadj(self, v=None):
        """Destinations of the edges leaving ``v`` (all vertices if ``v`` is None)."""

    @abstractmethod
    def badj(self, v=None):
        """Sources of the edges arriving at ``v`` (all vertices if ``v`` is None)."""

    @abstractmethod
    def has_edge(self, u, v=None):
        """Return True if the graph has an edge from ``u`` to ``v``."""

    @abstractmethod
    def add_vertex(self):
        """Append one vertex and return its id."""

    @abstractmethod
    def add_edge(self, u, v=None):
        """Insert the edge ``u -> v``."""

    @abstractmethod
    def rem_edge(self, u, v=None):
        """Remove the edge ``u -> v``."""

    @abstractmethod
    def copy(self):
        """Return a deep copy owning independent storage."""

    # Derived queries

    @property
    def ne(self):
        """Number of edges."""
        return len(self._edges)

    @property
    def num_vertices(self):
        return self.nv

    @property
    def num_edges(self):
        return self.ne

    def __len__(self):
        return self.nv

    def vertices(self):
        """Return the vertices of the graph as ``range(1, nv + 1)``."""
        return range(1, self.nv + 1)

    def edges(self):
        """Return the edges of the graph.

        Returns
        -------
        frozenset[Edge]
            A snapshot; mutating the graph afterwards does not change it.

        """
        return frozenset(self._edges)

    def is_directed(self):
        return self.directed

    @property
    def edge_type(self):
        return EdgeType.DIRECTED if self.directed else EdgeType.UNDIRECTED

    def has_vertex(self, v):
        """Return True if ``v`` is a vertex of the graph."""
        return isinstance(v, Integral) and 1 <= v <= self.nv

    def in_edges(self, v):
        """Return a list of the edges that arrive at vertex ``v``."""
        return [Edge(x, v) for x in self.badj(v)]

    def out_edges(self, v):
        """Return a list of the edges that emanate from vertex ``v``."""
        return [Edge(v, x) for x in self.fadj(v)]

    def add_vertices(self, n):
        """Add ``n`` new vertices and return the new vertex count."""
        for _ in range(n):
            self.add_vertex()
        return self.nv

    def issubset(self, other):
        """Return True if the vertices and edges of this graph are contained in ``other``.

        Vertex containment compares the range bounds, not individual vertices.
        An empty vertex range is contained in any range.

        Parameters
        ----------
        other : SimpleGraph
            Graph of the same directedness.

        Returns
        -------
        bool

        """
        if not isinstance(other, SimpleGraph) or other.directed != self.directed:
            raise TypeError(
                f"cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        # both ranges start at 1, so bounds containment is an upper-bound test
        if self.nv > other.nv:
            return False
        return self._edges <= other._edges

    def has_self_loop(self):
        """Return True if any vertex has an edge to itself."""
        return any(e.is_self_loop() for e in self._edges)

    # Internal helpers

    def _canonical(self, e):
        return e if self.directed else e.canonical()

    def _edge_key(self, u, v=None):
        return self._canonical(as_edge(u, v))

    def _check_vertex(self, v):
        if not self.has_vertex(v):
            raise BoundsError(v, self.nv)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.nv == other.nv and self._edges == other._edges

    __hash__ = None

    def __repr__(self):
        kind = "directed" if self.directed else "undirected"
        return f"{type(self).__name__}({{{self.nv}, {self.ne}}} {kind} graph)"
