# src/ellermaze/grid.py
# Working boxes used while a maze is built, and the immutable Maze handed back.

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

XY = Tuple[int, int]

# Wall bits for wall_masks(), in top/right/bottom/left order.
TOP, RIGHT, BOTTOM, LEFT = 1, 2, 4, 8


@dataclass
class Box:
    """Mutable construction cell. `set` is the row-local label (None = unlabeled)."""
    x: int
    y: int
    top: bool = True
    right: bool = True
    bottom: bool = True
    left: bool = True
    set: Optional[int] = None


Row = List[Box]


def empty_box_grid(width: int, height: int, closed: bool = True) -> List[Row]:
    """
    Return height rows of width boxes with every interior wall standing.
    With closed=False the outer rim starts open; interior walls are unaffected.
    """
    return [
        [
            Box(
                x=x,
                y=y,
                top=closed or y > 0,
                right=closed or x < width - 1,
                bottom=closed or y < height - 1,
                left=closed or x > 0,
            )
            for x in range(width)
        ]
        for y in range(height)
    ]


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    top: bool
    right: bool
    bottom: bool
    left: bool

    @classmethod
    def from_box(cls, box: Box) -> Cell:
        return cls(box.x, box.y, box.top, box.right, box.bottom, box.left)

    @property
    def walls(self) -> Tuple[bool, bool, bool, bool]:
        return (self.top, self.right, self.bottom, self.left)

    def mask(self) -> int:
        return (
            (TOP if self.top else 0)
            | (RIGHT if self.right else 0)
            | (BOTTOM if self.bottom else 0)
            | (LEFT if self.left else 0)
        )


class Maze:
    """Row-major grid of Cells: maze[y][x] is the cell at (x, y)."""

    __slots__ = ("rows",)

    def __init__(self, rows: List[Tuple[Cell, ...]]):
        self.rows: Tuple[Tuple[Cell, ...], ...] = tuple(tuple(r) for r in rows)

    @classmethod
    def from_boxes(cls, boxes: List[Row]) -> Maze:
        # Copy out so construction labels never reach the caller.
        return cls([tuple(Cell.from_box(b) for b in row) for row in boxes])

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Tuple[Cell, ...]]:
        return iter(self.rows)

    def __getitem__(self, y: int) -> Tuple[Cell, ...]:
        return self.rows[y]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return self.rows == other.rows

    def __repr__(self) -> str:
        return f"Maze(width={self.width}, height={self.height})"

    def cell(self, x: int, y: int) -> Cell:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinate ({x}, {y}) out of bounds")
        return self.rows[y][x]

    def wall_masks(self) -> List[List[int]]:
        return [[c.mask() for c in row] for row in self.rows]

    def open_neighbors(self, x: int, y: int) -> Iterator[XY]:
        """Yield in-grid neighbours of (x, y) with no wall in between."""
        c = self.cell(x, y)
        if not c.top and y > 0:
            yield (x, y - 1)
        if not c.right and x < self.width - 1:
            yield (x + 1, y)
        if not c.bottom and y < self.height - 1:
            yield (x, y + 1)
        if not c.left and x > 0:
            yield (x - 1, y)
