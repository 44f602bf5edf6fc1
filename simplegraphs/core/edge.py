import operator
from enum import Enum
from typing import NamedTuple


class EdgeType(Enum):
    DIRECTED = "DIRECTED"
    UNDIRECTED = "UNDIRECTED"


class Edge(NamedTuple):
    """A single edge between two vertices of a graph.

    Edges are immutable ordered pairs: ``Edge(1, 2) != Edge(2, 1)``. Undirected
    graphs decide which of the two orders they store (see ``canonical``).
    """

    src: int
    dst: int

    def reverse(self):
        """Return the edge with source and destination swapped."""
        return Edge(self.dst, self.src)

    def canonical(self):
        """Return the edge with the smaller endpoint first."""
        return self if self.src <= self.dst else self.reverse()

    def is_self_loop(self):
        return self.src == self.dst

    def __str__(self):
        return f"edge {self.src} - {self.dst}"


def src(e):
    """Return the source of an edge."""
    return e.src


def dst(e):
    """Return the destination of an edge."""
    return e.dst


def as_edge(u, v=None):
    """Normalize ``(u, v)`` / ``(Edge,)`` / ``((u, v),)`` call forms to an Edge."""
    if v is None:
        if isinstance(u, Edge):
            return u
        u, v = u
    return Edge(operator.index(u), operator.index(v))
