from __future__ import annotations

"""Bidirectional mapping between vertex labels and dense indices."""

from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Sequence, TypeVar

from .errors import ArityMismatch, DuplicateLabel, UnknownLabel

T = TypeVar("T", bound=Hashable)


class LabelRegistry(Generic[T]):
    """
    Ordered label sequence plus its reverse index.

    Indices are 0-based and follow insertion order: ``labels[i]`` is the
    label of backing vertex ``i``. The registry only ever grows.
    """

    __slots__ = ("_labels", "_index")

    def __init__(self, labels: Iterable[T], num_vertices: int) -> None:
        labels = list(labels)
        index: Dict[T, int] = {}
        for i, label in enumerate(labels):
            if label in index:
                raise DuplicateLabel(label)
            index[label] = i

        if len(labels) != num_vertices:
            raise ArityMismatch(len(labels), num_vertices)

        self._labels: List[T] = labels
        self._index: Dict[T, int] = index

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        try:
            return label in self._index
        except TypeError:
            # unhashable values are never registered
            return False

    def __iter__(self) -> Iterator[T]:
        return iter(self._labels)

    @property
    def labels(self) -> List[T]:
        """Copy of the labels in index order."""
        return list(self._labels)

    def index_of(self, label: T) -> int:
        try:
            return self._index[label]
        except (KeyError, TypeError):
            raise UnknownLabel(label) from None

    def indices_of(self, labels: Iterable[T]) -> List[int]:
        return [self.index_of(label) for label in labels]

    def label_of(self, index: int) -> T:
        return self._labels[index]

    def labels_of(self, indices: Iterable[int]) -> List[T]:
        labels = self._labels
        return [labels[int(i)] for i in indices]

    def check_new(self, labels: Sequence[T]) -> None:
        """
        Raise DuplicateLabel if any of ``labels`` is already registered or
        occurs more than once in ``labels`` itself. Never mutates.
        """
        seen = set()
        for label in labels:
            if label in self._index or label in seen:
                raise DuplicateLabel(label)
            seen.add(label)

    def append(self, label: T) -> int:
        """Register ``label`` under the next free index and return that index."""
        if label in self._index:
            raise DuplicateLabel(label)
        index = len(self._labels)
        self._labels.append(label)
        self._index[label] = index
        return index

    def __repr__(self) -> str:
        return f"LabelRegistry({self._labels!r})"
