from __future__ import annotations

"""Dense-index graphs with a per-subject property store."""

import copy
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from graphblas import Matrix

from .base import PropertyKey
from .simple import SimpleDiGraph, SimpleGraph


class _PropertyMixin:
    """
    Property storage for graph, vertices and edges.

    Properties are plain ``str -> value`` mappings per subject. ``set_props``
    overwrites the given keys and leaves all other keys untouched. Undirected
    edge keys are stored as ``(min, max)``.
    """

    __slots__ = ()

    _graph_props: Dict[str, Any]
    _vertex_props: Dict[int, Dict[str, Any]]
    _edge_props: Dict[Tuple[int, int], Dict[str, Any]]

    def __init__(self, num_vertices: int = 0, *, adjacency: Optional[Matrix] = None) -> None:
        super().__init__(num_vertices, adjacency=adjacency)  # type: ignore[call-arg]
        self._graph_props = {}
        self._vertex_props = {}
        self._edge_props = {}

    # ------------------------------------------------------------------ #
    # Subject resolution
    # ------------------------------------------------------------------ #
    def _edge_key(self, src: int, dst: int) -> Tuple[int, int]:
        src, dst = int(src), int(dst)
        if not self.directed and src > dst:  # type: ignore[attr-defined]
            return dst, src
        return src, dst

    def _bag(self, key: PropertyKey, *, create: bool) -> Dict[str, Any]:
        if len(key) == 0:
            return self._graph_props

        if len(key) == 1:
            (vertex,) = key
            if not self.has_vertex(vertex):  # type: ignore[attr-defined]
                raise KeyError(f"no vertex {vertex}")
            if create:
                return self._vertex_props.setdefault(int(vertex), {})
            return self._vertex_props.get(int(vertex), {})

        if len(key) == 2:
            src, dst = key
            if not self.has_edge(src, dst):  # type: ignore[attr-defined]
                raise KeyError(f"no edge ({src}, {dst})")
            edge_key = self._edge_key(src, dst)
            if create:
                return self._edge_props.setdefault(edge_key, {})
            return self._edge_props.get(edge_key, {})

        raise ValueError(f"property key must have 0, 1 or 2 elements, got {key!r}")

    # ------------------------------------------------------------------ #
    # PropertyStore
    # ------------------------------------------------------------------ #
    def get_prop(self, key: PropertyKey, prop: str) -> Any:
        bag = self._bag(key, create=False)
        try:
            return bag[prop]
        except KeyError:
            raise KeyError(f"property {prop!r} not set on {key!r}") from None

    def set_prop(self, key: PropertyKey, prop: str, value: Any) -> None:
        self._bag(key, create=True)[prop] = value

    def props(self, key: PropertyKey) -> Dict[str, Any]:
        return dict(self._bag(key, create=False))

    def set_props(self, key: PropertyKey, values: Mapping[str, Any]) -> None:
        self._bag(key, create=True).update(values)

    def has_prop(self, key: PropertyKey, prop: str) -> bool:
        return prop in self._bag(key, create=False)

    # ------------------------------------------------------------------ #
    # Derived graphs carry their properties along
    # ------------------------------------------------------------------ #
    def induced_subgraph(self, vertices: Sequence[int]):  # type: ignore[no-untyped-def]
        sub, vmap = super().induced_subgraph(vertices)  # type: ignore[misc]
        new_index = {old: new for new, old in enumerate(vmap)}

        sub._graph_props = copy.deepcopy(self._graph_props)
        for old, bag in self._vertex_props.items():
            if old in new_index:
                sub._vertex_props[new_index[old]] = copy.deepcopy(bag)
        for (src, dst), bag in self._edge_props.items():
            if src in new_index and dst in new_index:
                sub._edge_props[sub._edge_key(new_index[src], new_index[dst])] = copy.deepcopy(bag)
        return sub, vmap

    def copy(self):  # type: ignore[no-untyped-def]
        dup = super().copy()  # type: ignore[misc]
        dup._graph_props = copy.deepcopy(self._graph_props)
        dup._vertex_props = copy.deepcopy(self._vertex_props)
        dup._edge_props = copy.deepcopy(self._edge_props)
        return dup


class MetaGraph(_PropertyMixin, SimpleGraph):
    """Undirected dense-index graph with properties."""

    __slots__ = ("_graph_props", "_vertex_props", "_edge_props")


class MetaDiGraph(_PropertyMixin, SimpleDiGraph):
    """Directed dense-index graph with properties."""

    __slots__ = ("_graph_props", "_vertex_props", "_edge_props")

