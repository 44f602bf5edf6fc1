"""Structured errors raised by graph mutation and lookup."""


class GraphError(Exception):
    """Base class for graph structure violations."""


class BoundsError(GraphError, IndexError):
    """A vertex identifier lies outside the current vertex range."""

    def __init__(self, vertex, nv):
        self.vertex = vertex
        self.nv = nv
        super().__init__(f"vertex {vertex!r} is not in the vertex range 1:{nv}")


class DuplicateEdgeError(GraphError, ValueError):
    """``add_edge`` on an adjacency-list graph for an edge already present."""

    def __init__(self, edge):
        self.edge = edge
        super().__init__(f"{edge} already in graph")


class MissingEdgeError(GraphError, KeyError):
    """``rem_edge`` for an edge that is not in the graph."""

    def __init__(self, edge):
        self.edge = edge
        super().__init__(f"{edge} not in graph")

    def __str__(self):
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])
