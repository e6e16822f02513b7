from __future__ import annotations

"""Error types raised by labelled graphs."""

from typing import Any


class LabelledGraphError(Exception):
    """Base exception for labelled-graph failures."""
    pass


class ArityMismatch(LabelledGraphError, ValueError):
    """Number of labels differs from the backing graph's vertex count."""

    def __init__(self, num_labels: int, num_vertices: int) -> None:
        super().__init__(
            f"Labels and backing graph's vertices have to be equinumerous "
            f"(got {num_labels} labels for {num_vertices} vertices)"
        )
        self.num_labels = num_labels
        self.num_vertices = num_vertices


class DuplicateLabel(LabelledGraphError, ValueError):
    """A label collides with an already registered (or in-batch) label."""

    def __init__(self, label: Any) -> None:
        super().__init__(f"Duplicate labels are not allowed: {label!r}")
        self.label = label


class UnknownLabel(LabelledGraphError, KeyError):
    """A label does not resolve to a registered vertex."""

    def __init__(self, label: Any) -> None:
        super().__init__(label)
        self.label = label

    def __str__(self) -> str:
        return f"Unknown vertex label: {self.label!r}"


class BackendContractError(LabelledGraphError, RuntimeError):
    """The backend assigned a vertex index other than the next free one."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Backend assigned index {actual} to a new vertex, expected {expected}"
        )
        self.expected = expected
        self.actual = actual
