# Core module
from .directions import (
    Direction,
    INITIAL_PRIORITY,
    priority_order,
    to_direction,
    to_vector,
)
from .exceptions import (
    MazeError,
    MazeSchemaError,
    MazeParseError,
    MazeValidationError,
    NoEntranceError,
    NoSolutionError,
    StuckError,
)
from .maze_grid import Cell, Coordinate, MazeGrid
from .maze_parser import (
    parse_maze_text,
    load_maze_file,
    validate_maze_text,
    validate_structure,
)
from .optimizer import find_loops, optimize_path
from .wall_follower import (
    SAMPLE_MAZE,
    SolveResult,
    WalkResult,
    WallFollowerSolver,
    solve_maze,
)

__all__ = [
    "Direction",
    "INITIAL_PRIORITY",
    "priority_order",
    "to_direction",
    "to_vector",
    "MazeError",
    "MazeSchemaError",
    "MazeParseError",
    "MazeValidationError",
    "NoEntranceError",
    "NoSolutionError",
    "StuckError",
    "Cell",
    "Coordinate",
    "MazeGrid",
    "parse_maze_text",
    "load_maze_file",
    "validate_maze_text",
    "validate_structure",
    "find_loops",
    "optimize_path",
    "SAMPLE_MAZE",
    "SolveResult",
    "WalkResult",
    "WallFollowerSolver",
    "solve_maze",
]
