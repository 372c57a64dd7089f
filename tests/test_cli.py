"""Tests for the command line entry point."""

from pathlib import Path
import tempfile

from maze_walker.__main__ import main


UNREACHABLE_EXIT_MAZE = """XXIXX
XX XX
XXXXX
XX XX
XXOXX"""


def write_maze(text: str) -> str:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False) as f:
        f.write(text)
    return f.name


def test_solves_sample_by_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Solution (21 cells" in out
    assert out.splitlines()[1].startswith("(3,0) (3,1) (4,1)")
    assert out.splitlines()[1].endswith("(10,13)")


def test_show_draws_path(capsys):
    assert main(["--show"]) == 0
    out = capsys.readouterr().out
    assert "XXXIXXXXXXXXXX" in out
    assert "XXXXXXXXXXOXXX" in out


def test_unsolvable_file(capsys):
    path = write_maze(UNREACHABLE_EXIT_MAZE)
    try:
        assert main([path]) == 1
    finally:
        Path(path).unlink()
    assert "No solution (unsolvable)" in capsys.readouterr().out


def test_malformed_file():
    path = write_maze("XIX\nX?X\nXOX")
    try:
        assert main([path]) == 2
    finally:
        Path(path).unlink()


def test_lenient_flag():
    path = write_maze("XIX\nXXX\nXOX")
    try:
        assert main([path]) == 2
        assert main([path, "--lenient"]) == 1
    finally:
        Path(path).unlink()


def test_missing_file():
    assert main(["/nonexistent/path/maze.txt"]) == 2
