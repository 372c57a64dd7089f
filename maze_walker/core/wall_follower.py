"""
Wall-follower maze solver.

Walks the maze one cell at a time from the entrance, choosing each move with
a fixed hand-on-the-wall rule:

- a cell with a single open neighbour (dead end or corridor end) is left the
  only way possible
- anywhere else the next move is the first open direction in
  `priority_order(heading)`, where the heading is the move just made
- the first move has no heading and uses `INITIAL_PRIORITY`

The walk stops as soon as it stands on a cell that is not open floor. It is
solved if that cell is the exit. The raw walk is then passed through the
optimizer to cut out the dead ends it explored.
"""

import logging
from dataclasses import dataclass, field
from typing import Literal, Optional, Sequence, Union

from .directions import INITIAL_PRIORITY, Direction, priority_order, to_direction
from .exceptions import NoSolutionError, StuckError
from .maze_grid import Cell, Coordinate, MazeGrid
from .maze_parser import parse_maze_text
from .optimizer import find_loops, optimize_path

logger = logging.getLogger("maze_walker.solver")

# Each (cell, heading) pair can occur once before the walk repeats itself
DEFAULT_STEP_LIMIT_FACTOR = 4

WalkStatus = Literal["solved", "stuck", "unsolvable", "step_limit"]


@dataclass
class WalkResult:
    """Raw outcome of a walk, before optimization."""
    status: WalkStatus
    path: list[Coordinate]
    steps: int

    @property
    def end(self) -> Coordinate:
        return self.path[-1]


@dataclass
class SolveResult:
    """Result of solving a maze."""
    status: WalkStatus
    raw_path: list[Coordinate]
    steps: int
    path: Optional[list[Coordinate]] = None
    message: Optional[str] = None
    loops: dict[Coordinate, tuple[int, int]] = field(default_factory=dict)

    @property
    def solved(self) -> bool:
        return self.status == "solved"

    def raise_for_status(self) -> list[Coordinate]:
        """
        Return the optimized path, or raise if the maze was not solved.

        Raises:
            StuckError: The walk reached a cell with no open neighbour.
            NoSolutionError: The walk ended anywhere but on the exit.
        """
        if self.status == "solved" and self.path is not None:
            return self.path
        if self.status == "stuck":
            raise StuckError(self.message or "No possible direction", steps=self.steps)
        raise NoSolutionError(self.message or "Maze has no solution", steps=self.steps)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        result = {
            "status": self.status,
            "solved": self.solved,
            "path": [c.to_dict() for c in self.path] if self.path is not None else None,
            "raw_length": len(self.raw_path),
            "steps": self.steps,
        }
        if self.message:
            result["message"] = self.message
        return result


class WallFollowerSolver:
    """
    Wall-following solver bound to a single grid.

    Example usage:
        grid = parse_maze_text(maze_text)
        result = WallFollowerSolver(grid).solve()
        if result.solved:
            print(result.path)
    """

    def __init__(
        self,
        grid: MazeGrid,
        step_limit: Optional[int] = None,
        step_limit_factor: int = DEFAULT_STEP_LIMIT_FACTOR,
    ):
        """
        Args:
            grid: Grid to walk.
            step_limit: Maximum number of moves. Defaults to
                `step_limit_factor * width * height`.
            step_limit_factor: Multiplier for the default limit.
        """
        self.grid = grid
        if step_limit is None:
            step_limit = max(1, step_limit_factor * grid.width * grid.height)
        self.step_limit = step_limit

    def next_direction(
        self,
        directions: Sequence[Direction],
        path: Sequence[Coordinate],
    ) -> Direction:
        """
        Pick the next move among the open `directions`.

        Args:
            directions: Open directions from the last cell of `path`.
            path: Walk so far, at least the start position.
        """
        if len(directions) == 1:
            return directions[0]

        order: Sequence[Direction] = INITIAL_PRIORITY
        if len(path) >= 2:
            prev_vector = path[-1].vector_from(path[-2])
            heading = to_direction(prev_vector)
            logger.debug(f"Prev vector: {prev_vector} ({heading.value if heading else None})")
            if heading is not None:
                order = priority_order(heading)

        return next(d for d in order if d in directions)

    def walk(self) -> WalkResult:
        """
        Walk from the entrance until the walk leaves open floor.

        Raises:
            NoEntranceError: If the grid has no entrance.
        """
        current = self.grid.start_coords
        path = [current]
        steps = 0

        while True:
            directions = self.grid.possible_directions(current)
            logger.debug(
                f"Step {steps}: at {current.as_tuple()}, "
                f"directions {[d.value for d in directions]}"
            )

            if not directions:
                return WalkResult(status="stuck", path=path, steps=steps)

            if steps >= self.step_limit:
                return WalkResult(status="step_limit", path=path, steps=steps)

            direction = self.next_direction(directions, path)
            current = current.move(direction)
            path.append(current)
            steps += 1
            logger.debug(f"Moved {direction.value} {direction.delta} to {current.as_tuple()}")

            if self.grid.cell(current) is not Cell.EMPTY:
                break

        status: WalkStatus = "solved" if self.grid.cell(current) is Cell.EXIT else "unsolvable"
        return WalkResult(status=status, path=path, steps=steps)

    def solve(self) -> SolveResult:
        """
        Walk the maze and optimize the walk.

        An unsolvable maze is reported through `SolveResult.status`, not
        raised. Use `SolveResult.raise_for_status()` to turn it into an error.
        """
        walk = self.walk()
        result = SolveResult(status=walk.status, raw_path=walk.path, steps=walk.steps)

        if walk.status == "solved":
            result.loops = find_loops(walk.path)
            result.path = optimize_path(walk.path)
            logger.info(
                f"Solved in {walk.steps} steps, path of {len(result.path)} cells "
                f"({len(walk.path) - len(result.path)} dropped from {len(result.loops)} loops)"
            )
        elif walk.status == "stuck":
            result.message = f"No possible direction at {walk.end.as_tuple()}"
        elif walk.status == "step_limit":
            result.message = f"Step limit of {self.step_limit} reached at {walk.end.as_tuple()}"
        else:
            cell = self.grid.cell(walk.end)
            result.message = (
                f"Walk ended on {cell.name.lower() if cell else 'nothing'} "
                f"at {walk.end.as_tuple()} without reaching the exit"
            )

        if result.message:
            logger.info(f"No solution: {result.message}")

        return result


def solve_maze(
    maze: Union[str, MazeGrid],
    strict: bool = True,
    step_limit: Optional[int] = None,
    step_limit_factor: int = DEFAULT_STEP_LIMIT_FACTOR,
) -> SolveResult:
    """
    Solve maze text or an already parsed grid.

    Raises:
        MazeSchemaError: If the maze text is malformed.
        NoEntranceError: If the grid has no entrance.
    """
    grid = maze if isinstance(maze, MazeGrid) else parse_maze_text(maze, strict=strict)
    solver = WallFollowerSolver(grid, step_limit=step_limit, step_limit_factor=step_limit_factor)
    return solver.solve()


# Sample maze for testing
SAMPLE_MAZE = """
XXXIXXXXXXXXXX
X            X
X X X XXXXX XX
X X X XX XX XX
X X X X   XXXX
X XXX XX XXXXX
XXX         XX
XX  XXXX    XX
X  XX XX     X
X XX      XX X
X XXXXXXX XX X
X      XX XX X
XXXXXX XX  X X
XXXXXXXXXXOXXX
"""


if __name__ == "__main__":
    # Quick test
    logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")
    grid = parse_maze_text(SAMPLE_MAZE)
    print(grid.visualize())

    result = WallFollowerSolver(grid).solve()
    print(f"\nResult: {result.to_dict()}")
    if result.path:
        print(f"\n{grid.visualize(result.path)}")
