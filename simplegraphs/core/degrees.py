"""Degree and neighbor queries.

Every function here uses only the public graph contract (``vertices``,
``fadj``, ``badj``, ``is_directed``), so it works unchanged on adjacency-list
and sparse-matrix graphs.

Degree functions take an optional vertex argument: a single vertex gives a
single number, an iterable of vertices gives a list in the same order, and
None (the default) means all vertices.
"""

import operator
from numbers import Integral

import numpy as np


def _batch(f, g, v):
    if isinstance(v, Integral):
        return f(g, v)
    vs = g.vertices() if v is None else v
    return [f(g, x) for x in vs]


def _indegree(g, v):
    return len(g.badj(v))


def _outdegree(g, v):
    return len(g.fadj(v))


def _degree(g, v):
    if g.is_directed():
        return _indegree(g, v) + _outdegree(g, v)
    # undirected edges already sit in both endpoints' forward lists
    return _outdegree(g, v)


def indegree(g, v=None):
    """Number of edges which end at vertex ``v``."""
    return _batch(_indegree, g, v)


def outdegree(g, v=None):
    """Number of edges which start at vertex ``v``."""
    return _batch(_outdegree, g, v)


def degree(g, v=None):
    """Number of edges incident to ``v``.

    For directed graphs this is ``indegree + outdegree``. For undirected graphs
    it is the size of the vertex's adjacency list, so a self-loop counts once.
    """
    return _batch(_degree, g, v)


def _noalloc_extreme(f, comparison, g):
    """Extreme value of ``f(g, v)`` over all vertices, without gathering them all.

    A value replaces the running extreme only if ``comparison(value, extreme)``
    holds, so ties keep the earlier value.
    """
    value = None
    for v in g.vertices():
        fv = f(g, v)
        if value is None or comparison(fv, value):
            value = fv
    if value is None:
        raise ValueError("extreme degree of a graph with no vertices")
    return value


def max_outdegree(g):
    """Return the maximum ``outdegree`` of vertices in ``g``."""
    return _noalloc_extreme(_outdegree, operator.gt, g)


def min_outdegree(g):
    """Return the minimum ``outdegree`` of vertices in ``g``."""
    return _noalloc_extreme(_outdegree, operator.lt, g)


def max_indegree(g):
    """Return the maximum ``indegree`` of vertices in ``g``."""
    return _noalloc_extreme(_indegree, operator.gt, g)


def min_indegree(g):
    """Return the minimum ``indegree`` of vertices in ``g``."""
    return _noalloc_extreme(_indegree, operator.lt, g)


def max_degree(g):
    """Return the maximum ``degree`` of vertices in ``g``."""
    return _noalloc_extreme(_degree, operator.gt, g)


def min_degree(g):
    """Return the minimum ``degree`` of vertices in ``g``."""
    return _noalloc_extreme(_degree, operator.lt, g)


def degree_histogram(g):
    """Histogram of degree values across all vertices of ``g``.

    Returns
    -------
    numpy.ndarray
        ``hist[k]`` is the number of vertices of degree ``k``. There is one
        bucket for each degree ``0 .. nv - 1``, extended only if some vertex
        has a larger degree (self-loops, or in+out degree on directed graphs),
        so ``hist.sum() == nv`` always.

    """
    degrees = np.asarray(degree(g), dtype=np.intp)
    return np.bincount(degrees, minlength=g.nv)


def in_neighbors(g, v):
    """Return a list of all neighbors connected to vertex ``v`` by an incoming edge."""
    return list(g.badj(v))


def out_neighbors(g, v):
    """Return a list of all neighbors connected to vertex ``v`` by an outgoing edge."""
    return list(g.fadj(v))


def neighbors(g, v):
    """Return a list of all neighbors of vertex ``v`` in ``g``.

    For directed graphs this is ``out_neighbors(g, v)``; use
    :func:`in_neighbors` for the other direction.
    """
    return out_neighbors(g, v)


def common_neighbors(g, u, v):
    """Return the set of neighbors shared by vertices ``u`` and ``v``."""
    return set(neighbors(g, u)).intersection(neighbors(g, v))
