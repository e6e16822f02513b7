from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, Hashable, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from .backends.base import GraphBackend
from .config import get_settings, resolve_backend
from .edge import LabelledEdge
from .errors import BackendContractError, DuplicateLabel
from .properties import PropertyDelegationMixin
from .registry import LabelRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)
L = TypeVar("L", bound="LabelledGraph[Any]")

_NO_LABEL: Any = object()


class LabelledGraph(PropertyDelegationMixin, Generic[T]):
    """
    Graph whose vertices are identified by arbitrary hashable labels.

    Storage and traversal are delegated to a dense-index backend
    (see :mod:`labelled_graphs.backends`); this class keeps a
    :class:`LabelRegistry` in lockstep with it and translates labels to
    indices on the way in and back to labels on the way out.

    Structure:
      - registry: labels in index order + reverse map label -> index.
      - backend : owned GraphBackend, vertex i <-> registry label i.

    The backend passed to the constructor is copied, so nothing outside
    this object can grow it behind the registry's back.
    """

    __slots__ = ("_registry", "_graph")

    # key into BackendSettings used when no backend is given
    _default_kind: ClassVar[str] = "undirected"

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(self, labels: Iterable[T], graph: Optional[GraphBackend] = None) -> None:
        """
        Parameters
        ----------
        labels:
            One distinct label per backend vertex, in index order.
        graph:
            Backing graph. Defaults to an edgeless instance of the configured
            default backend with ``len(labels)`` vertices.

        Raises ArityMismatch if the label count differs from the vertex count
        and DuplicateLabel if a label repeats.
        """
        labels = list(labels)
        if graph is None:
            graph = self.default_backend()(len(labels))
        else:
            graph = graph.copy()
        self._attach(labels, graph)

    def _attach(self, labels: List[T], graph: GraphBackend) -> None:
        self._check_backend(graph)
        self._registry: LabelRegistry[T] = LabelRegistry(labels, graph.num_vertices())
        self._graph: GraphBackend = graph
        logger.debug(
            "%s created with %d vertices on %s",
            type(self).__name__,
            len(labels),
            type(graph).__name__,
        )

    @classmethod
    def _adopt(cls: type[L], labels: List[Any], graph: GraphBackend) -> L:
        """Wrap a freshly built backend without copying it."""
        obj = cls.__new__(cls)
        obj._attach(labels, graph)
        return obj

    @classmethod
    def empty(cls: type[L], labels: Iterable[Any], backend: Optional[type] = None) -> L:
        """Labelled graph over ``labels`` with no edges, on ``backend`` (a class)."""
        labels = list(labels)
        backend = backend or cls.default_backend()
        return cls._adopt(labels, backend(len(labels)))

    @classmethod
    def default_backend(cls) -> type:
        name = getattr(get_settings().backends, cls._default_kind)
        return resolve_backend(name, directed=cls._default_kind == "directed")

    @classmethod
    def _check_backend(cls, graph: GraphBackend) -> None:
        pass

    # ------------------------------------------------------------------ #
    # Vertices
    # ------------------------------------------------------------------ #
    def vertex_count(self) -> int:
        return len(self._registry)

    def vertices(self) -> List[T]:
        """Labels in insertion order (construction order, then additions)."""
        return self._registry.labels

    def has_vertex(self, label: Any) -> bool:
        return label in self._registry

    def index_of(self, label: T) -> int:
        """Backend index of ``label``; raises UnknownLabel."""
        return self._registry.index_of(label)

    def label_of(self, index: int) -> T:
        return self._registry.label_of(index)

    # ------------------------------------------------------------------ #
    # Edges
    # ------------------------------------------------------------------ #
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def edges(self) -> List[LabelledEdge[T]]:
        """Backend edges in backend order, endpoints mapped to labels."""
        label_of = self._registry.label_of
        return [LabelledEdge(label_of(i), label_of(j)) for i, j in self._graph.edges()]

    def has_edge(self, src: Any, dst: Any = _NO_LABEL) -> bool:
        """
        has_edge(src, dst) or has_edge(LabelledEdge)

        Unregistered endpoints give False rather than an error.
        """
        src, dst = _endpoints(src, dst)
        if not (self.has_vertex(src) and self.has_vertex(dst)):
            return False
        index_of = self._registry.index_of
        return self._graph.has_edge(index_of(src), index_of(dst))

    # ------------------------------------------------------------------ #
    # Neighbourhoods
    # ------------------------------------------------------------------ #
    def out_neighbors(self, label: T) -> List[T]:
        index = self._registry.index_of(label)
        return self._registry.labels_of(self._graph.out_neighbors(index))

    def in_neighbors(self, label: T) -> List[T]:
        index = self._registry.index_of(label)
        return self._registry.labels_of(self._graph.in_neighbors(index))

    neighbors = out_neighbors

    def all_neighbors(self, label: T) -> Set[T]:
        return set(self.out_neighbors(label)) | set(self.in_neighbors(label))

    def is_directed(self) -> bool:
        return type(self._graph).directed

    # ------------------------------------------------------------------ #
    # Mutations
    # ------------------------------------------------------------------ #
    def add_edge(self, src: Any, dst: Any = _NO_LABEL) -> bool:
        """
        add_edge(src, dst) or add_edge(LabelledEdge)

        Returns the backend's result (False for an already present edge).
        Raises UnknownLabel if an endpoint is not registered.
        """
        src, dst = _endpoints(src, dst)
        index_of = self._registry.index_of
        i, j = index_of(src), index_of(dst)
        added = self._graph.add_edge(i, j)
        logger.debug("add_edge %r -> %r (%d -> %d): %s", src, dst, i, j, added)
        return added

    def add_vertex(self, label: T) -> int:
        """
        Append a vertex labelled ``label`` and return its index.

        Raises DuplicateLabel if ``label`` is already present. If growing the
        backend fails the registry is left untouched. Raises
        BackendContractError if the backend hands out an index other than the
        next free one; the label is not registered in that case.
        """
        self._registry.check_new([label])
        expected = len(self._registry)
        index = self._graph.add_vertex()
        if index != expected:
            raise BackendContractError(expected, index)
        self._registry.append(label)
        logger.debug("add_vertex %r -> %d", label, index)
        return index

    def add_vertices(self, labels: Iterable[T]) -> List[int]:
        """
        Append vertices for all ``labels`` in order, or none of them.

        The whole batch is checked for duplicates (against the graph and
        within itself) first. Growth happens on a copy of the backend that
        replaces the current one only once every vertex was added.
        """
        labels = list(labels)
        self._registry.check_new(labels)
        if not labels:
            return []

        graph = self._graph.copy()
        indices = []
        for expected in range(len(self._registry), len(self._registry) + len(labels)):
            index = graph.add_vertex()
            if index != expected:
                raise BackendContractError(expected, index)
            indices.append(index)

        self._graph = graph
        for label in labels:
            self._registry.append(label)
        logger.debug("add_vertices %d labels -> %d..%d", len(labels), indices[0], indices[-1])
        return indices

    # ------------------------------------------------------------------ #
    # Derived graphs
    # ------------------------------------------------------------------ #
    def induced_subgraph(self: L, labels: Iterable[T]) -> Tuple[L, List[T]]:
        """
        Subgraph on ``labels`` with every edge between them.

        Returns a new, independent graph of the same class whose vertices are
        ``labels`` in the given order, plus that label list.
        Raises UnknownLabel for unregistered labels.
        """
        labels = list(labels)
        indices = self._registry.indices_of(labels)
        if len(set(indices)) != len(indices):
            seen: Set[int] = set()
            for label, index in zip(labels, indices):
                if index in seen:
                    raise DuplicateLabel(label)
                seen.add(index)

        sub, _vmap = self._graph.induced_subgraph(indices)
        logger.debug("induced_subgraph on %d of %d vertices", len(labels), self.vertex_count())
        return type(self)._adopt(labels, sub), list(labels)

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    @property
    def backend(self) -> GraphBackend:
        """Independent copy of the backing graph; changes to it do not reach this object."""
        return self._graph.copy()

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, label: object) -> bool:
        return label in self._registry

    def __iter__(self) -> Iterator[T]:
        return iter(self._registry)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(num_vertices={self.vertex_count()}, "
            f"num_edges={self.edge_count()}, "
            f"backend={type(self._graph).__name__})"
        )


class LabelledDiGraph(LabelledGraph[T]):
    """LabelledGraph whose backend is required to be directed."""

    __slots__ = ()

    _default_kind: ClassVar[str] = "directed"

    @classmethod
    def _check_backend(cls, graph: GraphBackend) -> None:
        if not type(graph).directed:
            raise TypeError(
                f"{cls.__name__} requires a directed backend, got {type(graph).__name__}"
            )


def _endpoints(src: Any, dst: Any) -> Tuple[Any, Any]:
    if dst is _NO_LABEL:
        if not isinstance(src, LabelledEdge):
            raise TypeError("expected (src, dst) labels or a LabelledEdge")
        return src.src, src.dst
    return src, dst
