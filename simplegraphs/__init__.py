# simplegraphs/__init__.py
"""simplegraphs: adjacency-list and sparse-matrix graphs behind one contract."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "core": "simplegraphs.core",
    "adapters": "simplegraphs.adapters",
    "linalg": "simplegraphs.linalg",
    "degrees": "simplegraphs.core.degrees",
    "networkx": "simplegraphs.adapters.networkx",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core types
    "Edge": ("simplegraphs.core.edge", "Edge"),
    "Graph": ("simplegraphs.core.adjlist", "Graph"),
    "DiGraph": ("simplegraphs.core.adjlist", "DiGraph"),
    "SparseGraph": ("simplegraphs.core.sparse", "SparseGraph"),
    "SparseDiGraph": ("simplegraphs.core.sparse", "SparseDiGraph"),
    "DefaultDistance": ("simplegraphs.core.sparse", "DefaultDistance"),

    # Errors
    "BoundsError": ("simplegraphs.core.errors", "BoundsError"),
    "DuplicateEdgeError": ("simplegraphs.core.errors", "DuplicateEdgeError"),
    "MissingEdgeError": ("simplegraphs.core.errors", "MissingEdgeError"),

    # Linear algebra
    "adjacency_matrix": ("simplegraphs.linalg", "adjacency_matrix"),

    # NetworkX adapter (optional dependency)
    "to_nx": ("simplegraphs.adapters.networkx", "to_nx"),
    "from_nx": ("simplegraphs.adapters.networkx", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("simplegraphs")
except PackageNotFoundError:
    __version__ = "0.0.0"
