"""Board state produced by replaying a game record."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .coords import Point
from .errors import CoordinateOutOfBounds, InvalidColor


class Color(Enum):
    """Stone color, valued by its SGF flag."""

    BLACK = "B"
    WHITE = "W"

    @property
    def opponent(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @classmethod
    def from_flag(cls, flag: str) -> "Color":
        try:
            return cls(flag.strip().upper())
        except (ValueError, AttributeError):
            raise InvalidColor(flag) from None


# Matrix values used by to_matrix(): black -1, empty 0, white 1.
_MATRIX_VALUE = {Color.BLACK: -1, Color.WHITE: 1}

Cell = Optional[Color]


@dataclass(frozen=True)
class GridSize:
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board dimensions must be positive: {self.width}x{self.height}")

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def contains(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, point: Point) -> int:
        """Row-major cell index of ``(x, y)``."""

        if not self.contains(point):
            raise CoordinateOutOfBounds(point, self.width, self.height)
        x, y = point
        return y * self.width + x

    def point(self, index: int) -> Point:
        y, x = divmod(index, self.width)
        return x, y


@dataclass
class Board:
    """Grid of cells plus the color to move next."""

    size: GridSize
    next_player: Color = Color.BLACK
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [None] * self.size.cell_count
        elif len(self.cells) != self.size.cell_count:
            raise ValueError(
                f"Expected {self.size.cell_count} cells, got {len(self.cells)}"
            )

    @property
    def width(self) -> int:
        return self.size.width

    @property
    def height(self) -> int:
        return self.size.height

    def get(self, point: Point) -> Cell:
        return self.cells[self.size.index(point)]

    def place(self, point: Point, color: Cell) -> None:
        self.cells[self.size.index(point)] = color

    def occupied(self, color: Color) -> List[int]:
        """Indices of all cells holding ``color``, ascending."""

        return [idx for idx, cell in enumerate(self.cells) if cell is color]

    def stone_counts(self) -> Tuple[int, int, int]:
        """Return ``(black, white, empty)`` cell counts."""

        black = sum(cell is Color.BLACK for cell in self.cells)
        white = sum(cell is Color.WHITE for cell in self.cells)
        return black, white, len(self.cells) - black - white

    def to_matrix(self) -> np.ndarray:
        values = [_MATRIX_VALUE.get(cell, 0) for cell in self.cells]
        return np.array(values, dtype=np.int8).reshape(self.height, self.width)

    def __str__(self) -> str:
        symbols = {Color.BLACK: "X", Color.WHITE: "O", None: "."}
        rows = []
        for y in range(self.height):
            row = self.cells[y * self.width : (y + 1) * self.width]
            rows.append(" ".join(symbols[cell] for cell in row))
        return "\n".join(rows)
