"""
Maze grid model.

Holds the parsed cell matrix and answers bounds-checked queries about it.

Maze Format:
    X = Wall (impassable)
    I = Entrance
    O = Exit (goal)
      = Open path (space)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence

from .directions import Direction, Vector
from .exceptions import MazeParseError, NoEntranceError


class Cell(Enum):
    """Types of cells in the maze."""
    EMPTY = " "
    WALL = "X"
    ENTRANCE = "I"
    EXIT = "O"

    @classmethod
    def from_char(cls, char: str) -> "Cell":
        """Convert character to Cell."""
        try:
            return cls(char)
        except ValueError:
            raise MazeParseError(f"Invalid character '{char}'") from None

    @property
    def passable(self) -> bool:
        return self is not Cell.WALL


@dataclass(frozen=True)
class Coordinate:
    """2D position in the maze, x is the column and y the row."""
    x: int
    y: int

    def move(self, direction: Direction) -> "Coordinate":
        """Return new position after moving in direction."""
        dx, dy = direction.delta
        return Coordinate(self.x + dx, self.y + dy)

    def vector_from(self, other: "Coordinate") -> Vector:
        """Displacement that leads from `other` to this position."""
        return (self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y}


class MazeGrid:
    """
    Immutable grid of cells.

    Build one with `parse_maze_text` or `load_maze_file`; the constructor
    takes rows that are already converted to cells.
    """

    def __init__(self, rows: Iterable[Iterable[Cell]]):
        self.rows: tuple[tuple[Cell, ...], ...] = tuple(tuple(row) for row in rows)
        self.height: int = len(self.rows)
        self.width: int = len(self.rows[0]) if self.rows else 0

        self._start_coords: Optional[Coordinate] = None
        self._exit_coords: Optional[Coordinate] = None

    def __repr__(self) -> str:
        return f"MazeGrid(width={self.width}, height={self.height})"

    def cell(self, coords: Coordinate) -> Optional[Cell]:
        """Get cell at position, None when outside the grid."""
        if not (0 <= coords.y < self.height and 0 <= coords.x < len(self.rows[coords.y])):
            return None
        return self.rows[coords.y][coords.x]

    def border_coords(self) -> Iterator[Coordinate]:
        """
        Yield the border cells in search order.

        Row 0 first, then the first and last column of every following row,
        with the whole last row scanned when it is reached.
        """
        for y, row in enumerate(self.rows):
            if y == 0 or y == self.height - 1:
                for x in range(len(row)):
                    yield Coordinate(x, y)
            elif row:
                yield Coordinate(0, y)
                if len(row) > 1:
                    yield Coordinate(len(row) - 1, y)

    def find(self, target: Cell) -> list[Coordinate]:
        """All positions holding `target`, in row-major order."""
        return [
            Coordinate(x, y)
            for y, row in enumerate(self.rows)
            for x, cell in enumerate(row)
            if cell is target
        ]

    def _locate(self, target: Cell) -> Optional[Coordinate]:
        for coords in self.border_coords():
            if self.cell(coords) is target:
                return coords
        # Fall back to the interior
        found = self.find(target)
        return found[0] if found else None

    @property
    def start_coords(self) -> Coordinate:
        """
        Position of the entrance.

        Computed on first access and cached for the lifetime of the grid.

        Raises:
            NoEntranceError: If the grid has no entrance cell.
        """
        if self._start_coords is None:
            coords = self._locate(Cell.ENTRANCE)
            if coords is None:
                raise NoEntranceError("Maze must have an entrance (I)")
            self._start_coords = coords
        return self._start_coords

    @property
    def exit_coords(self) -> Optional[Coordinate]:
        """Position of the exit, or None when the grid has none."""
        if self._exit_coords is None:
            self._exit_coords = self._locate(Cell.EXIT)
        return self._exit_coords

    def possible_directions(self, coords: Coordinate) -> list[Direction]:
        """Directions leading to an in-bounds, non-wall neighbour."""
        directions = []
        for direction in Direction:
            cell = self.cell(coords.move(direction))
            if cell is not None and cell.passable:
                directions.append(direction)
        return directions

    def visualize(self, path: Optional[Sequence[Coordinate]] = None) -> str:
        """
        Generate ASCII visualization of maze.

        Args:
            path: If provided, open cells on the path are drawn as '.'.

        Returns:
            ASCII string representation.
        """
        marked = set(path or ())

        lines = []
        for y, row in enumerate(self.rows):
            line = ""
            for x, cell in enumerate(row):
                if cell is Cell.EMPTY and Coordinate(x, y) in marked:
                    line += "."
                else:
                    line += cell.value
            lines.append(line)

        return "\n".join(lines)
