"""
labelled_graphs
===============

Graphs whose vertices carry arbitrary hashable labels, layered over
dense-index graph backends.

Public API:

- LabelledGraph   : labelled view over an (undirected by default) backend.
- LabelledDiGraph : same, defaulting to (and requiring) a directed backend.
- LabelledEdge    : ordered label pair.
- LabelRegistry   : label <-> index mapping used by LabelledGraph.
- SimpleGraph, SimpleDiGraph, MetaGraph, MetaDiGraph : bundled backends.
"""

try:
    from ._version import version as __version__  # populated by setuptools-scm
except ModuleNotFoundError:
    __version__ = "0.0.0"

from .backends import (
    GraphBackend,
    MetaDiGraph,
    MetaGraph,
    PropertyStore,
    SimpleDiGraph,
    SimpleGraph,
    path_digraph,
    path_graph,
)
from .config import ConfigError, configure_logging, get_settings
from .edge import LabelledEdge
from .errors import (
    ArityMismatch,
    BackendContractError,
    DuplicateLabel,
    LabelledGraphError,
    UnknownLabel,
)
from .graph import LabelledDiGraph, LabelledGraph
from .registry import LabelRegistry

__all__ = [
    "__version__",
    "ArityMismatch",
    "BackendContractError",
    "ConfigError",
    "DuplicateLabel",
    "GraphBackend",
    "LabelRegistry",
    "LabelledDiGraph",
    "LabelledEdge",
    "LabelledGraph",
    "LabelledGraphError",
    "MetaDiGraph",
    "MetaGraph",
    "PropertyStore",
    "SimpleDiGraph",
    "SimpleGraph",
    "UnknownLabel",
    "configure_logging",
    "get_settings",
    "path_digraph",
    "path_graph",
]
