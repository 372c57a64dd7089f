"""
Maze Parser for Maze Walker.

Loads and validates maze schemas from text or from the filesystem.

Maze Format:
    X = Wall (impassable)
    I = Entrance (exactly one, on the border)
    O = Exit (exactly one, on the border)
      = Open path (space)

Blank lines are ignored and every row is trimmed before it is split into
cells, so open cells cannot start or end a row.
"""

from pathlib import Path
from typing import Optional

from .exceptions import MazeParseError, MazeValidationError
from .maze_grid import Cell, Coordinate, MazeGrid

VALID_CHARS = {cell.value for cell in Cell}


def _schema_rows(maze_text: str) -> list[str]:
    return [line.strip() for line in maze_text.split("\n") if line.strip()]


def parse_maze_text(maze_text: str, strict: bool = True) -> MazeGrid:
    """
    Parse maze text into a grid.

    Args:
        maze_text: Multi-line string representing the maze grid.
        strict: Also enforce the structural rules of `validate_structure`.

    Returns:
        MazeGrid built from the text.

    Raises:
        MazeParseError: If the text is empty or holds an unknown character.
        MazeValidationError: If the rows differ in length, or in strict mode
            when the maze breaks a structural rule.
    """
    if not maze_text or not maze_text.strip():
        raise MazeParseError("Maze text is empty")

    lines = _schema_rows(maze_text)

    rows: list[list[Cell]] = []
    for y, line in enumerate(lines):
        row = []
        for x, char in enumerate(line):
            if char not in VALID_CHARS:
                raise MazeParseError(
                    f"Invalid character '{char}' at position ({x}, {y}). "
                    f"Valid characters: {', '.join(repr(c) for c in sorted(VALID_CHARS))}"
                )
            row.append(Cell.from_char(char))
        rows.append(row)

    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise MazeValidationError(
                f"Row {y} has {len(row)} cells, expected {width}. "
                f"All rows must have the same length"
            )

    grid = MazeGrid(rows)

    if strict:
        validate_structure(grid)

    return grid


def validate_structure(grid: MazeGrid) -> None:
    """
    Check that the grid is a well-formed maze.

    Rules:
        - exactly one entrance and exactly one exit
        - both on the border and next to at least one open cell
        - every other border cell is a wall

    Raises:
        MazeValidationError: On the first rule that is broken.
    """
    for cell, label in ((Cell.ENTRANCE, "an entrance (I)"), (Cell.EXIT, "an exit (O)")):
        found = grid.find(cell)
        if not found:
            raise MazeValidationError(f"Maze must have {label}")
        if len(found) > 1:
            raise MazeValidationError(
                f"Multiple {cell.name.lower()} positions found: "
                f"first at {found[0].as_tuple()}, second at {found[1].as_tuple()}"
            )

    for coords in grid.border_coords():
        cell = grid.cell(coords)
        if cell is Cell.EMPTY:
            raise MazeValidationError(
                f"Maze border is open at {coords.as_tuple()}. "
                f"The maze must be enclosed by walls"
            )

    for coords in (grid.start_coords, grid.exit_coords):
        if not _on_border(grid, coords):
            raise MazeValidationError(
                f"{grid.cell(coords).name.title()} at {coords.as_tuple()} "
                f"must be on the maze border"
            )
        if not grid.possible_directions(coords):
            raise MazeValidationError(
                f"{grid.cell(coords).name.title()} at {coords.as_tuple()} is blocked"
            )


def _on_border(grid: MazeGrid, coords: Coordinate) -> bool:
    return (
        coords.x == 0
        or coords.y == 0
        or coords.x == grid.width - 1
        or coords.y == grid.height - 1
    )


def load_maze_file(file_path: Path | str, strict: bool = True) -> MazeGrid:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.
        strict: Also enforce the structural rules.

    Returns:
        MazeGrid parsed from the file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        MazeParseError: If the maze cannot be read or parsed.
        MazeValidationError: If the maze is invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeParseError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeParseError(f"Failed to read maze file: {e}") from e

    return parse_maze_text(maze_text, strict=strict)


def validate_maze_text(maze_text: str, strict: bool = True) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Args:
        maze_text: Multi-line string representing the maze grid.
        strict: Also enforce the structural rules.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text, strict=strict)
        return True, None
    except (MazeParseError, MazeValidationError) as e:
        return False, str(e)
