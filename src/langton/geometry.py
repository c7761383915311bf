"""Toroidal coordinates and compass headings.

A `Position` is two independent `LoopValue`s: the row wraps at the field
height and the column wraps at the field width. Moving off one edge
re-enters from the opposite one.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

import numpy as np

# Direction encoding: 0 = up, then clockwise. new_row = row + ROW_STEP[dir]
ROW_STEP = np.array([-1, 0, 1, 0], dtype=np.int8)
COL_STEP = np.array([0, 1, 0, -1], dtype=np.int8)


@dataclass
class LoopValue:
    """Integer kept in `[0, modulus)` by wrapping on every update.

    The constructor does not check `value`; callers must pass
    `0 <= value < modulus`.
    """
    value: int
    modulus: int

    def add(self, delta: int) -> "LoopValue":
        """Shift by `delta` in place and return self."""
        # Python's % is floored, so negative deltas wrap to the top.
        self.value = (self.value + delta) % self.modulus
        return self

    def to_index(self) -> int:
        return int(self.value)

    def to_signed(self) -> int:
        return int(self.value)


@dataclass(frozen=True)
class Vector:
    """Displacement of one cell along exactly one axis."""
    row: int
    col: int


@dataclass
class Position:
    row: LoopValue
    col: LoopValue

    @classmethod
    def at(cls, row: int, col: int, width: int, height: int) -> "Position":
        """Build a position on a `width` x `height` torus."""
        return cls(row=LoopValue(row, height), col=LoopValue(col, width))

    def translate(self, vector: Vector) -> "Position":
        """Move by `vector`, wrapping each axis on its own modulus."""
        self.row.add(vector.row)
        self.col.add(vector.col)
        return self

    def to_index(self) -> Tuple[int, int]:
        """Return `(row, col)` for indexing a row-major grid."""
        return self.row.to_index(), self.col.to_index()

    def in_bounds(self, width: int, height: int) -> bool:
        """Return True if the position lies inside a `width` x `height` grid."""
        row, col = self.row.to_signed(), self.col.to_signed()
        return 0 <= row < height and 0 <= col < width


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def rotate_clockwise(self) -> "Direction":
        return Direction((self + 1) & 3)

    def rotate_counterclockwise(self) -> "Direction":
        return Direction((self - 1) & 3)

    def displacement(self) -> Vector:
        """Unit step for this heading; rows grow downward."""
        return Vector(row=int(ROW_STEP[self]), col=int(COL_STEP[self]))
