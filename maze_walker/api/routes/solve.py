"""Solve routes for running the wall follower on submitted mazes."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from maze_walker.api.deps import AppSettings
from maze_walker.config import get_settings
from maze_walker.core import (
    SAMPLE_MAZE,
    MazeGrid,
    MazeSchemaError,
    NoEntranceError,
    SolveResult,
    WallFollowerSolver,
    parse_maze_text,
    validate_maze_text,
)
from maze_walker.schemas.solve import (
    MazePosition,
    SolveRequest,
    SolveResponse,
    ValidateRequest,
    ValidateResponse,
)

logger = logging.getLogger("maze_walker.api")

settings = get_settings()
limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/solve", tags=["Solve"])


def _position(coords) -> MazePosition:
    return MazePosition(x=coords.x, y=coords.y)


def _solve_grid(grid: MazeGrid, step_limit_factor: int, render: bool) -> SolveResponse:
    """Run the solver and convert the outcome into a response."""
    try:
        start = grid.start_coords
    except NoEntranceError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from e

    result: SolveResult = WallFollowerSolver(grid, step_limit_factor=step_limit_factor).solve()
    exit_coords = grid.exit_coords

    return SolveResponse(
        status=result.status,
        solved=result.solved,
        width=grid.width,
        height=grid.height,
        start=_position(start),
        exit=_position(exit_coords) if exit_coords else None,
        path=[_position(c) for c in result.path] if result.path is not None else None,
        path_length=len(result.path) if result.path is not None else 0,
        raw_length=len(result.raw_path),
        steps=result.steps,
        rendering=grid.visualize(result.path) if render else None,
        message=result.message,
    )


@router.post(
    "",
    response_model=SolveResponse,
)
@limiter.limit(f"{settings.rate_limit_solves}/minute")
async def solve(
    request: Request,
    solve_data: SolveRequest,
    app_settings: AppSettings,
) -> SolveResponse:
    """Solve a maze.

    An unsolvable maze is a normal response with `solved` set to false.
    Malformed maze text is rejected with 422 before any solving starts.
    """
    strict = app_settings.strict_validation if solve_data.strict is None else solve_data.strict

    try:
        grid = parse_maze_text(solve_data.grid_data, strict=strict)
    except MazeSchemaError as e:
        logger.info(f"Rejected maze: {e}")
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from e

    return _solve_grid(grid, app_settings.step_limit_factor, solve_data.render)


@router.post(
    "/validate",
    response_model=ValidateResponse,
)
async def validate(
    validate_data: ValidateRequest,
    app_settings: AppSettings,
) -> ValidateResponse:
    """Check maze text without solving it."""
    strict = (
        app_settings.strict_validation if validate_data.strict is None else validate_data.strict
    )
    is_valid, error = validate_maze_text(validate_data.grid_data, strict=strict)
    return ValidateResponse(valid=is_valid, error=error)


@router.get(
    "/sample",
    response_model=SolveResponse,
)
async def solve_sample(
    app_settings: AppSettings,
    render: Optional[bool] = Query(False, description="Include the maze drawn with the path"),
) -> SolveResponse:
    """Solve the bundled sample maze."""
    grid = parse_maze_text(SAMPLE_MAZE)
    return _solve_grid(grid, app_settings.step_limit_factor, bool(render))
