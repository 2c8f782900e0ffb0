"""Cells of the playing grid and helpers for working with them."""

from typing import Iterable, NamedTuple


class Cell(NamedTuple):
    """A position (or step) on the grid."""

    x: int
    y: int

    def __add__(self, other: "Cell") -> "Cell":
        return Cell(self.x + other.x, self.y + other.y)


def contains(position: Cell, cells: Iterable[Cell]) -> bool:
    """Return True if *position* is one of *cells*."""
    return any(cell == position for cell in cells)


def in_bounds(position: Cell, cell_count: int) -> bool:
    """Return True if *position* lies on a square grid of *cell_count* cells a side."""
    return 0 <= position.x < cell_count and 0 <= position.y < cell_count