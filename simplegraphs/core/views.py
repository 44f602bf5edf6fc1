"""Polars DataFrame views of a graph's edges and vertices."""

import polars as pl

from .degrees import degree, indegree, outdegree


def edges_view(g):
    """Build a Polars DF [DataFrame] of the edges of ``g``.

    Parameters
    ----------
    g : SimpleGraph

    Returns
    -------
    polars.DataFrame
        Columns ``src`` and ``dst`` (Int64), one row per stored edge, sorted.
        Graphs exposing ``weight(u, v)`` get an extra ``weight`` (Float64)
        column.

    """
    weighted = callable(getattr(g, "weight", None))
    schema = {"src": pl.Int64, "dst": pl.Int64}
    if weighted:
        schema["weight"] = pl.Float64

    edges = sorted(g.edges())
    cols = {
        "src": [e.src for e in edges],
        "dst": [e.dst for e in edges],
    }
    if weighted:
        cols["weight"] = [float(g.weight(e)) for e in edges]
    return pl.DataFrame(cols, schema=schema)


def vertices_view(g):
    """Build a Polars DF of per-vertex degrees.

    Returns
    -------
    polars.DataFrame
        Columns ``vertex``, ``indegree``, ``outdegree``, ``degree`` (Int64).

    """
    vs = list(g.vertices())
    return pl.DataFrame(
        {
            "vertex": vs,
            "indegree": indegree(g, vs),
            "outdegree": outdegree(g, vs),
            "degree": degree(g, vs),
        },
        schema={
            "vertex": pl.Int64,
            "indegree": pl.Int64,
            "outdegree": pl.Int64,
            "degree": pl.Int64,
        },
    )
