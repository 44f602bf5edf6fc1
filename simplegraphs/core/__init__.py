from .adjlist import DiGraph, Graph
from .base import SimpleGraph
from .degrees import (
    common_neighbors,
    degree,
    degree_histogram,
    in_neighbors,
    indegree,
    max_degree,
    max_indegree,
    max_outdegree,
    min_degree,
    min_indegree,
    min_outdegree,
    neighbors,
    out_neighbors,
    outdegree,
)
from .edge import Edge, EdgeType, dst, src
from .errors import BoundsError, DuplicateEdgeError, GraphError, MissingEdgeError
from .sparse import DefaultDistance, SparseDiGraph, SparseGraph
from .views import edges_view, vertices_view

__all__ = [
    "BoundsError",
    "DefaultDistance",
    "DiGraph",
    "DuplicateEdgeError",
    "Edge",
    "EdgeType",
    "Graph",
    "GraphError",
    "MissingEdgeError",
    "SimpleGraph",
    "SparseDiGraph",
    "SparseGraph",
    "common_neighbors",
    "degree",
    "degree_histogram",
    "dst",
    "edges_view",
    "in_neighbors",
    "indegree",
    "max_degree",
    "max_indegree",
    "max_outdegree",
    "min_degree",
    "min_indegree",
    "min_outdegree",
    "neighbors",
    "out_neighbors",
    "outdegree",
    "src",
    "vertices_view",
]
