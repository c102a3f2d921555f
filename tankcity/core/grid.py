"""Grid arithmetic shared by every part of the simulation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(Enum):
    """Facing of a tank or bullet, with the unit pixel step it implies."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        """Return ``(d_top, d_left)`` for a single pixel step."""
        return self.value

    @property
    def vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


@dataclass(frozen=True)
class Cell:
    """Integer grid coordinate."""

    row: int
    column: int


@dataclass(frozen=True)
class Coordinate:
    """Top-left pixel position of an element."""

    top: int
    left: int


@dataclass(frozen=True)
class Box:
    """Axis aligned pixel rectangle; ``right``/``bottom`` are exclusive."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @classmethod
    def at(cls, coordinate: Coordinate, width: int, height: int) -> "Box":
        return cls(left=coordinate.left, top=coordinate.top, width=width, height=height)

    def intersects(self, other: "Box") -> bool:
        # Touching edges do not count as overlap.
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def contains(self, other: "Box") -> bool:
        return (
            self.left <= other.left
            and self.top <= other.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )


def to_cell(coordinate: Coordinate, cell_size: int) -> Cell:
    """Return the cell containing the pixel ``coordinate``."""
    return Cell(row=coordinate.top // cell_size, column=coordinate.left // cell_size)


def to_pixel(cell: Cell, cell_size: int) -> Coordinate:
    return Coordinate(top=cell.row * cell_size, left=cell.column * cell_size)


def step(coordinate: Coordinate, direction: Direction, distance: int) -> Coordinate:
    """Move ``coordinate`` by ``distance`` pixels along ``direction``."""
    d_top, d_left = direction.delta
    return Coordinate(
        top=coordinate.top + d_top * distance,
        left=coordinate.left + d_left * distance,
    )


def cells_covered(box: Box, cell_size: int) -> Tuple[Cell, ...]:
    """Every cell the box touches, row-major."""
    if box.width <= 0 or box.height <= 0:
        return ()
    first_row = box.top // cell_size
    last_row = (box.bottom - 1) // cell_size
    first_col = box.left // cell_size
    last_col = (box.right - 1) // cell_size
    return tuple(
        Cell(row, col)
        for row in range(first_row, last_row + 1)
        for col in range(first_col, last_col + 1)
    )


__all__ = [
    "Box",
    "Cell",
    "Coordinate",
    "Direction",
    "cells_covered",
    "step",
    "to_cell",
    "to_pixel",
]
