"""
Direction engine for the wall follower.

Maps the four cardinal moves to unit displacement vectors and back, and
provides the rotating priority list used to pick the next move at a junction.

Coordinates are (x, y) with y growing downwards, so UP is (0, -1).
"""

from enum import Enum
from typing import Optional

Vector = tuple[int, int]


class Direction(Enum):
    """Movement directions, in declaration order."""
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"
    UP = "up"

    @property
    def delta(self) -> Vector:
        """Get (dx, dy) for this direction."""
        return DIRECTION_VECTORS[self]

    @property
    def index(self) -> int:
        """Position of this direction in declaration order."""
        return _DECLARATION_ORDER.index(self)


DIRECTION_VECTORS: dict[Direction, Vector] = {
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
}

_VECTOR_DIRECTIONS: dict[Vector, Direction] = {
    vector: direction for direction, vector in DIRECTION_VECTORS.items()
}

_DECLARATION_ORDER: tuple[Direction, ...] = tuple(Direction)

# Base priority, also used for the first step when there is no heading yet
INITIAL_PRIORITY: tuple[Direction, ...] = (
    Direction.UP,
    Direction.LEFT,
    Direction.DOWN,
    Direction.RIGHT,
)


def to_vector(direction: Direction) -> Vector:
    """Displacement vector for a direction."""
    return DIRECTION_VECTORS[direction]


def to_direction(vector: Vector) -> Optional[Direction]:
    """
    Direction whose displacement is exactly `vector`.

    Returns None for the zero vector, diagonals and anything longer than
    one cell.
    """
    return _VECTOR_DIRECTIONS.get((vector[0], vector[1]))


def priority_order(previous: Direction) -> list[Direction]:
    """
    Order in which to try the next move after travelling `previous`.

    The base priority list is rotated so that it starts at the declaration
    index of `previous`, e.g. after moving DOWN (index 1) the order is
    LEFT, DOWN, RIGHT, UP.
    """
    i = previous.index
    return list(INITIAL_PRIORITY[i:] + INITIAL_PRIORITY[:i])
