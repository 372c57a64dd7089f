#!/usr/bin/env python3
"""
Maze Walker command line.

Solves a maze file (or the bundled sample) and prints the optimized path.

Exit codes:
    0 = solved
    1 = no solution
    2 = malformed maze
"""

import argparse
import logging
import sys

from maze_walker.config import configure_logging, get_settings
from maze_walker.core import (
    SAMPLE_MAZE,
    MazeSchemaError,
    NoEntranceError,
    WallFollowerSolver,
    load_maze_file,
    parse_maze_text,
)

logger = logging.getLogger("maze_walker.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maze_walker",
        description="Solve a text maze with the wall follower",
    )
    parser.add_argument("file", nargs="?", help="Maze file (defaults to the bundled sample)")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip the border and entrance/exit checks",
    )
    parser.add_argument("--trace", action="store_true", help="Log every solver step")
    parser.add_argument("--show", action="store_true", help="Draw the maze with the path")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    if args.trace:
        settings = settings.model_copy(update={"trace_steps": True})
    configure_logging(settings)

    strict = settings.strict_validation and not args.lenient

    try:
        if args.file:
            grid = load_maze_file(args.file, strict=strict)
        else:
            grid = parse_maze_text(SAMPLE_MAZE, strict=strict)
        result = WallFollowerSolver(grid, step_limit_factor=settings.step_limit_factor).solve()
    except (MazeSchemaError, NoEntranceError, FileNotFoundError) as e:
        logger.error(f"Invalid maze: {e}")
        return 2

    if not result.solved:
        print(f"No solution ({result.status}): {result.message}")
        return 1

    print(f"Solution ({len(result.path)} cells, {result.steps} steps walked):")
    print(" ".join(f"({c.x},{c.y})" for c in result.path))
    if args.show:
        print()
        print(grid.visualize(result.path))
    return 0


if __name__ == "__main__":
    sys.exit(main())
