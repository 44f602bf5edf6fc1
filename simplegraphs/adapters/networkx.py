try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install simplegraphs[networkx]"
    ) from e

import logging
import warnings

import numpy as np

from ..core import DiGraph, Graph, SparseDiGraph, SparseGraph

logger = logging.getLogger(__name__)


def to_nx(g, weight="weight"):
    """Export a graph to NetworkX.

    Parameters
    ----------
    g : SimpleGraph
        Source graph.
    weight : str
        Edge attribute receiving the weight of sparse-graph edges.

    Returns
    -------
    networkx.Graph | networkx.DiGraph
        Nodes are the integer vertex ids ``1..nv``.

    """
    G = nx.DiGraph() if g.is_directed() else nx.Graph()
    G.add_nodes_from(g.vertices())
    weighted = callable(getattr(g, "weight", None))
    for e in sorted(g.edges()):
        if weighted:
            G.add_edge(e.src, e.dst, **{weight: np.asarray(g.weight(e)).item()})
        else:
            G.add_edge(e.src, e.dst)
    logger.debug("Exported %r to %s", g, type(G).__name__)
    return G


def from_nx(G, sparse=False, weight="weight"):
    """Import a NetworkX graph.

    Nodes are numbered ``1..n`` in ``G.nodes`` iteration order.

    Parameters
    ----------
    G : networkx.Graph | networkx.DiGraph
        Multigraphs are rejected.
    sparse : bool
        Build a :class:`SparseGraph`/:class:`SparseDiGraph` carrying the
        ``weight`` attribute (default 1) instead of an unweighted
        :class:`Graph`/:class:`DiGraph`.
    weight : str
        Edge attribute holding the weight.

    Returns
    -------
    tuple[SimpleGraph, dict]
        The graph and the mapping ``{node: vertex_id}``.

    """
    if G.is_multigraph():
        raise ValueError("multigraphs cannot be imported: parallel edges are not supported")

    directed = G.is_directed()
    if sparse:
        cls = SparseDiGraph if directed else SparseGraph
    else:
        cls = DiGraph if directed else Graph

    index = {node: i for i, node in enumerate(G.nodes, start=1)}
    g = cls(len(index))
    dropped = 0
    for u, v, data in G.edges(data=True):
        w = data.get(weight)
        if sparse:
            g.add_edge(index[u], index[v], weight=w)
        else:
            if w is not None and w != 1:
                dropped += 1
            g.add_edge(index[u], index[v])
    if dropped:
        warnings.warn(
            f"{dropped} edge weight(s) dropped importing into unweighted {cls.__name__}; "
            "pass sparse=True to keep them",
            stacklevel=2,
        )
    logger.debug("Imported %s as %r", type(G).__name__, g)
    return g, index
