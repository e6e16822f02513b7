from __future__ import annotations

"""In-memory backends used to observe how LabelledGraph drives its backend."""

from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Set, Tuple


class FakeBackend:
    """
    Pure-Python dense-index graph.

    ``fail_after``: number of further add_vertex calls that succeed before
    one raises RuntimeError (None = never fail). Copies inherit the budget.
    """

    directed = True

    def __init__(self, n: int = 0, *, fail_after: Optional[int] = None) -> None:
        self.n = n
        self.adj: Set[Tuple[int, int]] = set()
        self.fail_after = fail_after

    def num_vertices(self) -> int:
        return self.n

    def num_edges(self) -> int:
        return len(self.adj)

    def add_vertex(self) -> int:
        if self.fail_after is not None:
            if self.fail_after == 0:
                raise RuntimeError("backend refused to grow")
            self.fail_after -= 1
        self.n += 1
        return self.n - 1

    def add_edge(self, src: int, dst: int) -> bool:
        if (src, dst) in self.adj or not (0 <= src < self.n and 0 <= dst < self.n):
            return False
        self.adj.add((src, dst))
        return True

    def has_edge(self, src: int, dst: int) -> bool:
        return (src, dst) in self.adj

    def edges(self) -> Iterator[Tuple[int, int]]:
        yield from sorted(self.adj)

    def out_neighbors(self, vertex: int) -> List[int]:
        return sorted(j for i, j in self.adj if i == vertex)

    def in_neighbors(self, vertex: int) -> List[int]:
        return sorted(i for i, j in self.adj if j == vertex)

    def induced_subgraph(self, vertices: Sequence[int]):
        vmap = list(vertices)
        new_index = {old: new for new, old in enumerate(vmap)}
        sub = type(self)(len(vmap))
        for i, j in self.adj:
            if i in new_index and j in new_index:
                sub.adj.add((new_index[i], new_index[j]))
        return sub, vmap

    def copy(self) -> "FakeBackend":
        dup = type(self)(self.n, fail_after=self.fail_after)
        dup.adj = set(self.adj)
        return dup


class RecordingStore(FakeBackend):
    """FakeBackend with a property store that records every call it gets."""

    def __init__(self, n: int = 0, *, fail_after: Optional[int] = None) -> None:
        super().__init__(n, fail_after=fail_after)
        self.calls: List[Tuple[Any, ...]] = []
        self.values: Dict[Tuple[Any, ...], Dict[str, Any]] = {}

    def get_prop(self, key, prop):
        self.calls.append(("get_prop", key, prop))
        return self.values[key][prop]

    def set_prop(self, key, prop, value):
        self.calls.append(("set_prop", key, prop, value))
        self.values.setdefault(key, {})[prop] = value

    def props(self, key):
        self.calls.append(("props", key))
        return dict(self.values.get(key, {}))

    def set_props(self, key, values: Mapping[str, Any]):
        self.calls.append(("set_props", key, dict(values)))
        self.values.setdefault(key, {}).update(values)

    def has_prop(self, key, prop):
        self.calls.append(("has_prop", key, prop))
        return prop in self.values.get(key, {})


class SkippingBackend(FakeBackend):
    """Backend that skips an index on every add_vertex call."""

    def add_vertex(self) -> int:
        self.n += 2
        return self.n - 1
