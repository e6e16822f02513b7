from __future__ import annotations

"""Label-pair edge value type."""

from dataclasses import dataclass
from typing import Generic, Hashable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True, slots=True)
class LabelledEdge(Generic[T]):
    """
    Connection between two labelled vertices.

    Equality is ordered: ``LabelledEdge(a, b) != LabelledEdge(b, a)`` even when
    the owning graph is undirected.
    """

    src: T
    dst: T

    def reverse(self) -> LabelledEdge[T]:
        return LabelledEdge(self.dst, self.src)

    def __iter__(self) -> Iterator[T]:
        # allows ``s, d = edge``
        yield self.src
        yield self.dst
