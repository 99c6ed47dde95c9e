"""Mutable path input handed to the transform under test."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .geometry import Rect

if TYPE_CHECKING:
    from .fixture import PathKind


class PathInput:
    """A logical path in view-local coordinates.

    A defective transform may translate it in place; the same instance is
    passed to every read of a fixture.
    """

    def __init__(self, kind: "PathKind", bounds: Rect):
        self.kind = kind
        self.bounds = bounds
        self.mutation_count = 0

    def translate(self, dx: float, dy: float) -> None:
        self.bounds = self.bounds.translated(dx, dy)
        self.mutation_count += 1

    def copy(self) -> "PathInput":
        return PathInput(kind=self.kind, bounds=self.bounds)

    def __repr__(self) -> str:
        return f"PathInput(kind={self.kind.value}, bounds={self.bounds.describe()})"
