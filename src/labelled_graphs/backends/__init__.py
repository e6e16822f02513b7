"""
labelled_graphs.backends
========================

Dense-index graph engines wrapped by LabelledGraph.

- GraphBackend   : protocol every backing graph satisfies.
- PropertyStore  : protocol for backends that store properties.
- SimpleGraph / SimpleDiGraph : python-graphblas adjacency graphs.
- MetaGraph / MetaDiGraph     : the same plus a property store.
"""

from __future__ import annotations

from .base import GraphBackend, PropertyKey, PropertyStore
from .simple import SimpleGraph, SimpleDiGraph, path_graph, path_digraph
from .meta import MetaGraph, MetaDiGraph

# Names accepted by BackendSettings.
BACKENDS: dict[str, type] = {
    "SimpleGraph": SimpleGraph,
    "SimpleDiGraph": SimpleDiGraph,
    "MetaGraph": MetaGraph,
    "MetaDiGraph": MetaDiGraph,
}

__all__ = [
    "BACKENDS",
    "GraphBackend",
    "PropertyKey",
    "PropertyStore",
    "SimpleGraph",
    "SimpleDiGraph",
    "MetaGraph",
    "MetaDiGraph",
    "path_graph",
    "path_digraph",
]
