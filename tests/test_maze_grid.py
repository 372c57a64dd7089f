"""Tests for the maze grid model."""

import pytest

from maze_walker.core import (
    Cell,
    Coordinate,
    Direction,
    MazeGrid,
    MazeParseError,
    NoEntranceError,
    parse_maze_text,
)


class TestCell:
    """Tests for cell conversion."""

    def test_from_char(self):
        assert Cell.from_char("X") is Cell.WALL
        assert Cell.from_char(" ") is Cell.EMPTY
        assert Cell.from_char("I") is Cell.ENTRANCE
        assert Cell.from_char("O") is Cell.EXIT

    def test_unknown_char_raises(self):
        with pytest.raises(MazeParseError, match="Invalid character '#'"):
            Cell.from_char("#")

    def test_passable(self):
        assert not Cell.WALL.passable
        assert Cell.EMPTY.passable
        assert Cell.ENTRANCE.passable
        assert Cell.EXIT.passable


class TestCoordinate:
    """Tests for coordinates."""

    def test_move(self):
        assert Coordinate(3, 3).move(Direction.UP) == Coordinate(3, 2)
        assert Coordinate(0, 0).move(Direction.LEFT) == Coordinate(-1, 0)

    def test_vector_from(self):
        assert Coordinate(3, 4).vector_from(Coordinate(3, 3)) == (0, 1)

    def test_hashable(self):
        assert len({Coordinate(1, 2), Coordinate(1, 2), Coordinate(2, 1)}) == 2

    def test_to_dict(self):
        assert Coordinate(1, 2).to_dict() == {"x": 1, "y": 2}


class TestMazeGrid:
    """Tests for grid queries."""

    def test_dimensions(self, sample_grid):
        assert sample_grid.width == 14
        assert sample_grid.height == 14

    def test_cell_bounds(self, sample_grid):
        """Cells outside the grid are None, every cell inside is defined."""
        for y in range(-2, sample_grid.height + 2):
            for x in range(-2, sample_grid.width + 2):
                cell = sample_grid.cell(Coordinate(x, y))
                inside = 0 <= x < sample_grid.width and 0 <= y < sample_grid.height
                assert (cell is not None) == inside

    def test_cell_values(self, sample_grid):
        assert sample_grid.cell(Coordinate(0, 0)) is Cell.WALL
        assert sample_grid.cell(Coordinate(1, 1)) is Cell.EMPTY
        assert sample_grid.cell(Coordinate(3, 0)) is Cell.ENTRANCE
        assert sample_grid.cell(Coordinate(10, 13)) is Cell.EXIT

    def test_empty_grid(self):
        grid = MazeGrid([])
        assert grid.width == 0
        assert grid.height == 0
        assert grid.cell(Coordinate(0, 0)) is None

    def test_start_coords_top_row(self, sample_grid):
        assert sample_grid.start_coords == Coordinate(3, 0)

    def test_start_coords_is_cached(self, sample_grid):
        first = sample_grid.start_coords
        assert sample_grid._start_coords is first
        assert sample_grid.start_coords is first

    @pytest.mark.parametrize(
        "maze, expected",
        [
            ("XXX\nI O\nXXX", Coordinate(0, 1)),
            ("XXX\nO I\nXXX", Coordinate(2, 1)),
            ("XOX\nX X\nXIX", Coordinate(1, 2)),
            ("XXXXX\nX I X\nXXOXX", Coordinate(2, 1)),
        ],
    )
    def test_start_coords_search(self, maze, expected):
        grid = parse_maze_text(maze, strict=False)
        assert grid.start_coords == expected

    def test_start_coords_missing_raises(self):
        grid = parse_maze_text("XXX\nX O\nXXX", strict=False)
        with pytest.raises(NoEntranceError):
            grid.start_coords

    def test_exit_coords(self, sample_grid):
        assert sample_grid.exit_coords == Coordinate(10, 13)

    def test_exit_coords_missing(self):
        grid = parse_maze_text("XIX\nX X\nXXX", strict=False)
        assert grid.exit_coords is None

    def test_possible_directions_junction(self, sample_grid):
        assert sample_grid.possible_directions(Coordinate(3, 1)) == [
            Direction.LEFT, Direction.DOWN, Direction.RIGHT, Direction.UP,
        ]

    def test_possible_directions_entrance(self, sample_grid):
        assert sample_grid.possible_directions(Coordinate(3, 0)) == [Direction.DOWN]

    def test_possible_directions_corner(self, sample_grid):
        assert sample_grid.possible_directions(Coordinate(0, 0)) == []

    def test_possible_directions_includes_exit(self, sample_grid):
        assert Direction.DOWN in sample_grid.possible_directions(Coordinate(10, 12))

    def test_visualize_round_trip(self, dead_end_grid):
        assert dead_end_grid.visualize() == "XXXIXX\nX   XX\nXXX XX\nXXXOXX"

    def test_visualize_path(self, dead_end_grid):
        path = [Coordinate(3, 0), Coordinate(3, 1), Coordinate(3, 2), Coordinate(3, 3)]
        assert dead_end_grid.visualize(path) == "XXXIXX\nX  .XX\nXXX.XX\nXXXOXX"
