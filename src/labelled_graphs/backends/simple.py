from __future__ import annotations

"""python-graphblas adjacency-matrix graphs addressed by dense indices."""

from typing import ClassVar, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

import numpy as np
import graphblas as gb
from graphblas import Matrix

G = TypeVar("G", bound="_AdjacencyGraph")


class _AdjacencyGraph:
    """
    Dense-index graph backed by a python-graphblas boolean adjacency matrix.

    Structure:
      - Vertices are 0..num_vertices-1.
      - adjacency: square Matrix[BOOL]; True at (i, j) = edge i -> j.
      - Undirected graphs store both (i, j) and (j, i).
    """

    __slots__ = ("_adj",)

    directed: ClassVar[bool] = True

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(self, num_vertices: int = 0, *, adjacency: Optional[Matrix] = None) -> None:
        num_vertices = int(num_vertices)
        if num_vertices < 0:
            raise ValueError(f"num_vertices must be non-negative, got {num_vertices}")

        if adjacency is None:
            adjacency = gb.Matrix(gb.dtypes.BOOL, nrows=num_vertices, ncols=num_vertices)
        else:
            if adjacency.dtype is not gb.dtypes.BOOL:
                raise TypeError(f"adjacency must have BOOL dtype, got {adjacency.dtype!r}")
            if adjacency.nrows != num_vertices or adjacency.ncols != num_vertices:
                raise ValueError(
                    f"adjacency shape ({adjacency.nrows}, {adjacency.ncols}) must be "
                    f"({num_vertices}, {num_vertices})"
                )

        self._adj: Matrix = adjacency

    @classmethod
    def from_edges(cls: type[G], num_vertices: int, edges: Iterable[Tuple[int, int]]) -> G:
        """
        Build a graph from ``(src, dst)`` index pairs.

        Repeated pairs collapse into one edge. For undirected graphs the
        reverse of every pair is inserted as well.
        """
        num_vertices = int(num_vertices)
        pairs = np.asarray(list(edges), dtype=np.int64).reshape(-1, 2)
        if pairs.size and (pairs.min() < 0 or pairs.max() >= num_vertices):
            raise ValueError(f"edge endpoints must lie in [0, {num_vertices})")

        src_arr = pairs[:, 0]
        dst_arr = pairs[:, 1]
        if not cls.directed:
            src_arr, dst_arr = (
                np.concatenate([src_arr, dst_arr]),
                np.concatenate([dst_arr, src_arr]),
            )

        mat = gb.Matrix.from_coo(
            src_arr,
            dst_arr,
            np.ones(len(src_arr), dtype=bool),
            dtype=gb.dtypes.BOOL,
            nrows=num_vertices,
            ncols=num_vertices,
            dup_op=gb.binary.lor,
        )
        return cls(num_vertices, adjacency=mat)

    # ------------------------------------------------------------------ #
    # Vertices
    # ------------------------------------------------------------------ #
    def num_vertices(self) -> int:
        return int(self._adj.nrows)

    def has_vertex(self, vertex: int) -> bool:
        return 0 <= vertex < self._adj.nrows

    def add_vertex(self) -> int:
        n = int(self._adj.nrows)
        self._adj.resize(n + 1, n + 1)
        return n

    def _check_vertex(self, vertex: int) -> int:
        vertex = int(vertex)
        if not self.has_vertex(vertex):
            raise IndexError(f"vertex {vertex} out of range [0, {self.num_vertices()})")
        return vertex

    # ------------------------------------------------------------------ #
    # Edges
    # ------------------------------------------------------------------ #
    def num_edges(self) -> int:
        if self.directed:
            return int(self._adj.nvals)
        rows, cols, _ = self._adj.to_coo()
        return int(np.count_nonzero(rows <= cols))

    def has_edge(self, src: int, dst: int) -> bool:
        if not (self.has_vertex(src) and self.has_vertex(dst)):
            return False
        return self._adj.get(int(src), int(dst)) is not None

    def add_edge(self, src: int, dst: int) -> bool:
        if not (self.has_vertex(src) and self.has_vertex(dst)):
            return False
        if self.has_edge(src, dst):
            return False
        self._adj[int(src), int(dst)] = True
        if not self.directed:
            self._adj[int(dst), int(src)] = True
        return True

    def edges(self) -> Iterator[Tuple[int, int]]:
        """
        Yield edges in row-major order. Undirected edges are reported once,
        as ``(i, j)`` with ``i <= j``.
        """
        rows, cols, _ = self._adj.to_coo()
        if not self.directed:
            keep = rows <= cols
            rows, cols = rows[keep], cols[keep]
        for i, j in zip(rows.tolist(), cols.tolist()):
            yield i, j

    # ------------------------------------------------------------------ #
    # Neighbourhoods
    # ------------------------------------------------------------------ #
    def out_neighbors(self, vertex: int) -> List[int]:
        vertex = self._check_vertex(vertex)
        indices, _ = self._adj[vertex, :].new().to_coo()
        return indices.tolist()

    def in_neighbors(self, vertex: int) -> List[int]:
        vertex = self._check_vertex(vertex)
        indices, _ = self._adj[:, vertex].new().to_coo()
        return indices.tolist()

    # ------------------------------------------------------------------ #
    # Derived graphs
    # ------------------------------------------------------------------ #
    def induced_subgraph(self: G, vertices: Sequence[int]) -> Tuple[G, List[int]]:
        vmap = [self._check_vertex(v) for v in vertices]
        if vmap:
            sub = self._adj[vmap, vmap].new()
        else:
            sub = None
        return type(self)(len(vmap), adjacency=sub), vmap

    def copy(self: G) -> G:
        return type(self)(self.num_vertices(), adjacency=self._adj.dup())

    @property
    def adjacency(self) -> Matrix:
        """The underlying adjacency matrix (not a copy)."""
        return self._adj

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(num_vertices={self.num_vertices()}, "
            f"num_edges={self.num_edges()})"
        )


class SimpleGraph(_AdjacencyGraph):
    """Undirected dense-index graph."""

    __slots__ = ()

    directed: ClassVar[bool] = False


class SimpleDiGraph(_AdjacencyGraph):
    """Directed dense-index graph."""

    __slots__ = ()

    directed: ClassVar[bool] = True


def path_graph(n: int) -> SimpleGraph:
    """Undirected path 0 - 1 - ... - n-1."""
    return SimpleGraph.from_edges(n, zip(range(n - 1), range(1, n)))


def path_digraph(n: int) -> SimpleDiGraph:
    """Directed path 0 -> 1 -> ... -> n-1."""
    return SimpleDiGraph.from_edges(n, zip(range(n - 1), range(1, n)))
