"""Matrix views of graphs built on the public adjacency contract."""

import numpy as np
import scipy.sparse as sp

_DIRECTIONS = {"out", "in", "both"}


def adjacency_matrix(g, dir="out", dtype=np.int64):
    """Sparse adjacency matrix of ``g``.

    Row/column ``i`` corresponds to vertex ``i + 1``.

    Parameters
    ----------
    g : SimpleGraph
    dir : {"out", "in", "both"}
        ``"out"`` puts a 1 at ``(u, v)`` for every ``v`` in ``fadj(u)``; ``"in"``
        uses ``badj`` instead; ``"both"`` the union of the two.
    dtype : numpy dtype, optional

    Returns
    -------
    scipy.sparse.csr_matrix
        ``nv x nv`` matrix with sorted column indices.

    """
    if dir not in _DIRECTIONS:
        raise ValueError(f"dir must be one of {sorted(_DIRECTIONS)}, got {dir!r}")

    rows, cols = [], []
    for v in g.vertices():
        if dir == "out":
            nbrs = g.fadj(v)
        elif dir == "in":
            nbrs = g.badj(v)
        else:
            nbrs = set(g.fadj(v)).union(g.badj(v))
        for x in nbrs:
            rows.append(v - 1)
            cols.append(x - 1)

    n = g.nv
    data = np.ones(len(rows), dtype=dtype)
    ij = (np.asarray(rows, dtype=np.intp), np.asarray(cols, dtype=np.intp))
    m = sp.csr_matrix((data, ij), shape=(n, n), dtype=dtype)
    m.sort_indices()
    return m
