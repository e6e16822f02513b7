from __future__ import annotations

"""Capability protocols for dense-index backing graphs."""

from typing import Any, ClassVar, Iterator, List, Mapping, Protocol, Sequence, Tuple, TypeVar, Union, runtime_checkable

# () -> graph, (i,) -> vertex, (i, j) -> edge
PropertyKey = Union[Tuple[()], Tuple[int], Tuple[int, int]]

B = TypeVar("B", bound="GraphBackend")


class GraphBackend(Protocol):
    """
    Protocol for graphs whose vertices are the dense indices 0..n-1.

    Vertices can only be appended; the index of a new vertex equals the
    vertex count before it was added.
    """

    directed: ClassVar[bool]

    def num_vertices(self) -> int:
        """Return the number of vertices."""

    def num_edges(self) -> int:
        """Return the number of edges (undirected edges count once)."""

    def add_vertex(self) -> int:
        """Append one vertex and return its index."""

    def add_edge(self, src: int, dst: int) -> bool:
        """Insert an edge; return False if it exists or an endpoint is invalid."""

    def has_edge(self, src: int, dst: int) -> bool:
        """Return whether the edge ``src -> dst`` is present."""

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield ``(src, dst)`` index pairs."""

    def out_neighbors(self, vertex: int) -> List[int]:
        """Return indices reachable over one outgoing edge, ascending."""

    def in_neighbors(self, vertex: int) -> List[int]:
        """Return indices with an edge into ``vertex``, ascending."""

    def induced_subgraph(self: B, vertices: Sequence[int]) -> Tuple[B, List[int]]:
        """
        Return the subgraph over ``vertices`` (re-indexed in the given order)
        and the mapping from new to old indices.
        """

    def copy(self: B) -> B:
        """Return an independent copy."""


@runtime_checkable
class PropertyStore(Protocol):
    """Protocol for backends carrying per-graph/vertex/edge properties."""

    def get_prop(self, key: PropertyKey, prop: str) -> Any:
        """Return a single property; raises KeyError if absent."""

    def set_prop(self, key: PropertyKey, prop: str, value: Any) -> None:
        """Set a single property."""

    def props(self, key: PropertyKey) -> dict[str, Any]:
        """Return a copy of all properties of the subject."""

    def set_props(self, key: PropertyKey, values: Mapping[str, Any]) -> None:
        """Merge ``values`` into the subject's properties (new keys win)."""

    def has_prop(self, key: PropertyKey, prop: str) -> bool:
        """Return whether the subject has property ``prop``."""
