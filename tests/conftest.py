"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from maze_walker.core import SAMPLE_MAZE, MazeGrid, parse_maze_text
from maze_walker.main import app


# Corridor with a two-cell dead end branching off to the left
DEAD_END_MAZE = """
XXXIXX
X   XX
XXX XX
XXXOXX
"""


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def sample_grid() -> MazeGrid:
    """The bundled 14-column sample maze."""
    return parse_maze_text(SAMPLE_MAZE)


@pytest.fixture
def dead_end_grid() -> MazeGrid:
    """Maze with a single dead-end side branch."""
    return parse_maze_text(DEAD_END_MAZE)
