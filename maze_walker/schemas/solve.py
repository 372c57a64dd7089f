"""Solve schemas for request/response validation."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    x: int
    y: int


class SolveRequest(BaseModel):
    """Schema for a solve request."""

    grid_data: str = Field(..., min_length=1, max_length=100_000)
    strict: Optional[bool] = Field(
        None,
        description="Enforce border and entrance/exit rules. Defaults to the server setting.",
    )
    render: bool = Field(False, description="Include the maze drawn with the path")


class ValidateRequest(BaseModel):
    """Schema for a validation request."""

    grid_data: str = Field(..., min_length=1, max_length=100_000)
    strict: Optional[bool] = None


class SolveResponse(BaseModel):
    """Schema for a solve response."""

    status: Literal["solved", "stuck", "unsolvable", "step_limit"]
    solved: bool
    width: int
    height: int
    start: MazePosition
    exit: Optional[MazePosition] = None
    path: Optional[list[MazePosition]] = None
    path_length: int = 0
    raw_length: int
    steps: int
    rendering: Optional[str] = None
    message: Optional[str] = None


class ValidateResponse(BaseModel):
    """Schema for a validation response."""

    valid: bool
    error: Optional[str] = None
